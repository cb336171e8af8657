"""Pairing against the waiting pool and result lookup."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pydilemma.engine.payoff import compute_payoff
from pydilemma.engine.state import GameState
from pydilemma.models import Match, Player


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchResult:
    match: Match

    @property
    def waiting(self) -> bool:
        return not self.match.completed


class Matchmaker:
    def __init__(self, state: GameState):
        self.state = state

    def match_or_enqueue(self, player: Player) -> MatchResult:
        """Pair ``player`` with the oldest waiting match from another sender.

        Without such a match the player is parked in a new one instead.
        """

        state = self.state
        index = state.waiting.first_index_not_from(player.sender)
        if index is None:
            match = state.open_match(player)
            logger.info("No opponent available; parked %s as match %s", player.sender_hex, match.match_id)
            return MatchResult(match)

        match = state.waiting.pop(index)
        payoff = compute_payoff(match.player_one, player, state.ledger.pot, rules=state.rules)
        match.complete(player, payoff)

        state.ledger.apply_delta(match.player_one.sender, match.player_one_payout)
        state.ledger.apply_delta(player.sender, match.player_two_payout)
        state.ledger.apply_pot_delta(match.pot_delta)
        state.history.append(match)

        logger.info(
            "Match %s completed: %s vs %s, payouts %d/%d, pot %+d",
            match.match_id,
            match.player_one.sender_hex,
            player.sender_hex,
            match.player_one_payout,
            match.player_two_payout,
            match.pot_delta,
        )
        return MatchResult(match)


class LookupStatus(str, Enum):
    NOT_FOUND = "not_found"
    STILL_WAITING = "still_waiting"
    COMPLETED = "completed"


@dataclass(frozen=True)
class Lookup:
    status: LookupStatus
    match: Optional[Match] = None


def lookup(state: GameState, match_id: str) -> Lookup:
    """Resolve ``match_id`` against the waiting pool first, then history."""

    waiting = state.waiting.get(match_id)
    if waiting is not None:
        return Lookup(LookupStatus.STILL_WAITING, waiting)
    completed = state.history.get(match_id)
    if completed is not None:
        return Lookup(LookupStatus.COMPLETED, completed)
    return Lookup(LookupStatus.NOT_FOUND)
