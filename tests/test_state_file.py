from pydilemma.config import GameRules
from pydilemma.contract import CallParameters, PrisonersDilemma, RecordingHost
from pydilemma.engine import GameState, LookupStatus, lookup
from pydilemma.state_file import StateFile


def _params(sender: bytes, amount: int = 0) -> CallParameters:
    return CallParameters(sender=sender, round_id=b"\x01", transaction_id=b"\x02", amount=amount)


def test_snapshot_round_trip_preserves_game(tmp_path):
    rules = GameRules(initial_threshold=10_000, threshold_ceiling=None)
    contract = PrisonersDilemma.init(RecordingHost(), rules)
    contract.state.ledger.apply_pot_delta(5_000)
    contract.play(_params(b"\x01", 100), 1)
    contract.play(_params(b"\x02", 200), 2)
    contract.play(_params(b"\x03", 300), 2)

    path = tmp_path / "nested" / "state.json"
    StateFile(contract.state).save(path)
    restored = StateFile.load(path, rules).state

    assert restored.threshold == contract.state.threshold
    assert restored.match_counter == 2
    assert restored.ledger.pot == contract.state.ledger.pot
    assert restored.ledger.balance_of(b"\x02") == contract.state.ledger.balance_of(b"\x02")
    assert lookup(restored, "1").status is LookupStatus.COMPLETED
    assert lookup(restored, "2").status is LookupStatus.STILL_WAITING
    assert restored.history.get("1") == contract.state.history.get("1")

    # Ids keep increasing after a restore.
    resumed = PrisonersDilemma(restored, RecordingHost())
    assert resumed.play(_params(b"\x03", 10), 1).match_id == "3"


def test_state_threshold_follows_rules():
    assert GameState(rules=GameRules(initial_threshold=5)).threshold == 5
    assert GameState(rules=GameRules(initial_threshold=5), threshold=9).threshold == 9


def test_stale_counter_never_reissues_restored_ids():
    contract = PrisonersDilemma.init(RecordingHost(), GameRules(initial_threshold=10_000, threshold_ceiling=None))
    for sender in (b"\x01", b"\x02", b"\x03", b"\x04", b"\x05"):
        contract.play(_params(sender, 10), 1)
    snapshot = contract.state.to_dict()
    snapshot["match_counter"] = 1

    restored = GameState.from_dict(snapshot, contract.state.rules)

    assert restored.match_counter == 3
    assert restored.next_match_id() == "4"
