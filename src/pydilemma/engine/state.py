"""Mutable game state owned by exactly one entry-point call at a time."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from pydilemma.config import DEFAULT_RULES, GameRules
from pydilemma.history import HistoryStore, WaitingPool
from pydilemma.ledger import Ledger
from pydilemma.models import Match, Player, Vote


@dataclass
class GameState:
    rules: GameRules = DEFAULT_RULES
    ledger: Ledger = field(default_factory=Ledger)
    # None starts from rules.initial_threshold.
    threshold: Optional[int] = None
    waiting: WaitingPool = field(default_factory=WaitingPool)
    history: HistoryStore | None = None
    match_counter: int = 0

    def __post_init__(self) -> None:
        if self.threshold is None:
            self.threshold = self.rules.initial_threshold
        if self.history is None:
            self.history = HistoryStore(self.rules.history_capacity)

    @classmethod
    def fresh(cls, rules: GameRules = DEFAULT_RULES) -> "GameState":
        balances: Dict[bytes, int] = {}
        if rules.seed_account is not None and rules.seed_balance > 0:
            balances[rules.seed_account] = rules.seed_balance
        return cls(
            rules=rules,
            ledger=Ledger(balances, pot=rules.seed_pot),
            threshold=rules.initial_threshold,
        )

    def next_match_id(self) -> str:
        self.match_counter += 1
        return str(self.match_counter)

    def open_match(self, player: Player) -> Match:
        """Park ``player`` in a new waiting match and return it."""

        match = Match(match_id=self.next_match_id(), player_one=player)
        self.waiting.append(match)
        return match

    def to_dict(self) -> dict[str, Any]:
        return {
            "threshold": self.threshold,
            "match_counter": self.match_counter,
            "pot": self.ledger.pot,
            "balances": {identity.hex(): amount for identity, amount in self.ledger.items()},
            "waiting": [_match_to_dict(match) for match in self.waiting],
            "history": [_match_to_dict(match) for match in self.history],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], rules: GameRules = DEFAULT_RULES) -> "GameState":
        balances = {
            bytes.fromhex(identity): int(amount)
            for identity, amount in data.get("balances", {}).items()
        }
        waiting = WaitingPool(_match_from_dict(item) for item in data.get("waiting", []))
        history = HistoryStore(
            rules.history_capacity,
            (_match_from_dict(item) for item in data.get("history", [])),
        )
        # Never reissue an id that is still resolvable.
        restored_ids = [int(m.match_id) for m in (*waiting, *history) if m.match_id.isdecimal()]
        counter = max([int(data.get("match_counter", 0)), *restored_ids])
        return cls(
            rules=rules,
            ledger=Ledger(balances, pot=int(data.get("pot", 0))),
            threshold=int(data.get("threshold", rules.initial_threshold)),
            waiting=waiting,
            history=history,
            match_counter=counter,
        )


def _player_to_dict(player: Player) -> dict[str, Any]:
    return {
        "sender": player.sender.hex(),
        "transaction_id": player.transaction_id.hex(),
        "stake": player.stake,
        "vote": int(player.vote),
    }


def _player_from_dict(data: dict[str, Any]) -> Player:
    return Player(
        sender=bytes.fromhex(data["sender"]),
        transaction_id=bytes.fromhex(data["transaction_id"]),
        stake=int(data["stake"]),
        vote=Vote(int(data["vote"])),
    )


def _match_to_dict(match: Match) -> dict[str, Any]:
    return {
        "match_id": match.match_id,
        "player_one": _player_to_dict(match.player_one),
        "player_two": None if match.player_two is None else _player_to_dict(match.player_two),
        "player_one_delta": match.player_one_delta,
        "player_two_delta": match.player_two_delta,
        "pot_delta": match.pot_delta,
    }


def _match_from_dict(data: dict[str, Any]) -> Match:
    player_two = data.get("player_two")
    return Match(
        match_id=str(data["match_id"]),
        player_one=_player_from_dict(data["player_one"]),
        player_two=None if player_two is None else _player_from_dict(player_two),
        player_one_delta=int(data.get("player_one_delta", 0)),
        player_two_delta=int(data.get("player_two_delta", 0)),
        pot_delta=int(data.get("pot_delta", 0)),
    )
