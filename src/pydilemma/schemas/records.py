from __future__ import annotations

from pydantic import BaseModel

from pydilemma.models import Match, Player


class PlayerPayoutRecord(BaseModel):
    sender: str
    payout: int
    delta: int


class WaitingRecord(BaseModel):
    match_id: str


class MatchRecord(BaseModel):
    match_id: str
    player_1: PlayerPayoutRecord
    player_2: PlayerPayoutRecord
    pot_delta: int

    @classmethod
    def from_match(cls, match: Match) -> "MatchRecord":
        if match.player_two is None:
            raise ValueError(f"Match {match.match_id} has no second player yet")
        return cls(
            match_id=match.match_id,
            player_1=_payout(match.player_one, match.player_one_payout, match.player_one_delta),
            player_2=_payout(match.player_two, match.player_two_payout, match.player_two_delta),
            pot_delta=match.pot_delta,
        )


class TransferRecord(BaseModel):
    destination: str
    amount: int


def _payout(player: Player, payout: int, delta: int) -> PlayerPayoutRecord:
    return PlayerPayoutRecord(sender=player.sender_hex, payout=payout, delta=delta)
