"""Matchmaking, payoff and ledger state machine for a staked prisoner's dilemma."""

from pydilemma.contract import CallParameters, PrisonersDilemma, RecordingHost
from pydilemma.errors import DilemmaError, InvalidVote, MatchNotFound, MatchStillWaiting, ZeroBalance

__all__ = [
    "CallParameters",
    "DilemmaError",
    "InvalidVote",
    "MatchNotFound",
    "MatchStillWaiting",
    "PrisonersDilemma",
    "RecordingHost",
    "ZeroBalance",
]
