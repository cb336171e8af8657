"""Canonical player models shared across admission, payoff and ledger layers."""

from __future__ import annotations

from enum import IntEnum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Vote(IntEnum):
    """Wire codes for the two moves a participant can submit."""

    COOPERATE = 1
    DEFECT = 2


class Player(BaseModel):
    """One play request: who staked how much on which move."""

    sender: bytes = Field(..., min_length=1)
    transaction_id: bytes = Field(..., min_length=1)
    stake: int = Field(..., ge=0)
    vote: Vote

    model_config = ConfigDict(frozen=True)

    @property
    def sender_hex(self) -> str:
        return self.sender.hex()
