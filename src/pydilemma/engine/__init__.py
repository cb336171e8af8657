"""Admission, payoff and matchmaking over a single game state."""

from .admission import AdmissionController, AdmissionOutcome, derive_seed, draw
from .matchmaker import Lookup, LookupStatus, MatchResult, Matchmaker, lookup
from .payoff import Payoff, compute_payoff
from .state import GameState

__all__ = [
    "AdmissionController",
    "AdmissionOutcome",
    "GameState",
    "Lookup",
    "LookupStatus",
    "MatchResult",
    "Matchmaker",
    "Payoff",
    "compute_payoff",
    "derive_seed",
    "draw",
    "lookup",
]
