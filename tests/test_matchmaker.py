from pydilemma.config import GameRules
from pydilemma.engine import GameState, LookupStatus, Matchmaker, lookup
from pydilemma.models import Player, Vote


def _player(sender: bytes, vote: Vote, stake: int) -> Player:
    return Player(sender=sender, transaction_id=sender * 2, stake=stake, vote=vote)


def test_empty_pool_parks_player():
    state = GameState.fresh()
    result = Matchmaker(state).match_or_enqueue(_player(b"\x01", Vote.COOPERATE, 10))

    assert result.waiting
    assert result.match.match_id == "1"
    assert lookup(state, "1").status is LookupStatus.STILL_WAITING


def test_never_pairs_with_self():
    state = GameState.fresh()
    matchmaker = Matchmaker(state)
    matchmaker.match_or_enqueue(_player(b"\x01", Vote.COOPERATE, 10))
    second = matchmaker.match_or_enqueue(_player(b"\x01", Vote.DEFECT, 10))

    assert second.waiting
    assert second.match.match_id == "2"
    assert len(state.waiting) == 2
    assert len(state.history) == 0


def test_pairs_with_oldest_foreign_match_and_settles():
    state = GameState.fresh(GameRules(seed_pot=100_000))
    matchmaker = Matchmaker(state)
    matchmaker.match_or_enqueue(_player(b"\x02", Vote.COOPERATE, 300))
    matchmaker.match_or_enqueue(_player(b"\x01", Vote.COOPERATE, 1000))

    result = matchmaker.match_or_enqueue(_player(b"\x01", Vote.DEFECT, 500))

    match = result.match
    assert not result.waiting
    assert match.match_id == "1"
    assert match.player_one.sender == b"\x02"
    assert match.player_one_payout == 0
    assert match.player_two_payout == 300 + 500 + 1500
    assert state.ledger.balance_of(b"\x02") == 0
    assert state.ledger.balance_of(b"\x01") == 2300
    assert state.ledger.pot == 100_000 - 1500
    assert [m.match_id for m in state.waiting] == ["2"]
    assert lookup(state, "1").status is LookupStatus.COMPLETED


def test_mutual_cooperation_example():
    state = GameState.fresh(GameRules(seed_pot=100_000))
    matchmaker = Matchmaker(state)
    matchmaker.match_or_enqueue(_player(b"\x01", Vote.COOPERATE, 400))
    matchmaker.match_or_enqueue(_player(b"\x02", Vote.COOPERATE, 600))

    assert state.ledger.balance_of(b"\x01") == 400 + 1000
    assert state.ledger.balance_of(b"\x02") == 600 + 1000
    assert state.ledger.pot == 98_000


def test_mutual_defection_feeds_pot():
    state = GameState.fresh()
    matchmaker = Matchmaker(state)
    matchmaker.match_or_enqueue(_player(b"\x01", Vote.DEFECT, 400))
    matchmaker.match_or_enqueue(_player(b"\x02", Vote.DEFECT, 600))

    assert state.ledger.balance_of(b"\x01") == 0
    assert state.ledger.balance_of(b"\x02") == 0
    assert state.ledger.pot == 1000


def test_history_capacity_evicts_lowest_id():
    state = GameState.fresh(GameRules(history_capacity=3))
    matchmaker = Matchmaker(state)
    for _ in range(4):
        matchmaker.match_or_enqueue(_player(b"\x01", Vote.COOPERATE, 1))
        matchmaker.match_or_enqueue(_player(b"\x02", Vote.COOPERATE, 1))

    assert len(state.history) == 3
    assert lookup(state, "1").status is LookupStatus.NOT_FOUND
    assert lookup(state, "4").status is LookupStatus.COMPLETED
    assert lookup(state, "999").status is LookupStatus.NOT_FOUND
