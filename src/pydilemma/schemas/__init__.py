"""Pydantic records emitted to the host log sink."""

from .records import MatchRecord, PlayerPayoutRecord, TransferRecord, WaitingRecord

__all__ = [
    "MatchRecord",
    "PlayerPayoutRecord",
    "TransferRecord",
    "WaitingRecord",
]
