"""Configuration helpers for game rules."""

from .rules import DEFAULT_RULES, GameRules, load_rules

__all__ = [
    "DEFAULT_RULES",
    "GameRules",
    "load_rules",
]
