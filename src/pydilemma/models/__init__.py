"""Domain models for players and matches."""

from .match import Match
from .player import Player, Vote

__all__ = ["Match", "Player", "Vote"]
