"""Game rules and their environment overrides."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Optional


logger = logging.getLogger(__name__)

_HISTORY_CAPACITY_ENV = "PYDILEMMA_HISTORY_CAPACITY"
_INITIAL_THRESHOLD_ENV = "PYDILEMMA_INITIAL_THRESHOLD"
_THRESHOLD_CEILING_ENV = "PYDILEMMA_THRESHOLD_CEILING"
_SEED_ACCOUNT_ENV = "PYDILEMMA_SEED_ACCOUNT"
_SEED_BALANCE_ENV = "PYDILEMMA_SEED_BALANCE"
_SEED_POT_ENV = "PYDILEMMA_SEED_POT"


@dataclass(frozen=True)
class GameRules:
    history_capacity: int = 100
    initial_threshold: int = 50
    # None leaves the threshold unbounded above.
    threshold_ceiling: Optional[int] = 100
    cooperate_dividend_permille: int = 10
    defect_bonus_permille: int = 15
    seed_account: Optional[bytes] = None
    seed_balance: int = 0
    seed_pot: int = 0


DEFAULT_RULES = GameRules()


def _env_int(name: str, default: int, *, min_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


def _env_ceiling(default: Optional[int]) -> Optional[int]:
    raw = os.getenv(_THRESHOLD_CEILING_ENV)
    if raw is None:
        return default
    if raw.strip().lower() in {"", "none"}:
        return None
    try:
        return max(0, int(raw))
    except ValueError:
        logger.warning("Invalid threshold ceiling %s; using default %s", raw, default)
        return default


def _env_account(default: Optional[bytes]) -> Optional[bytes]:
    raw = os.getenv(_SEED_ACCOUNT_ENV)
    if not raw:
        return default
    try:
        return bytes.fromhex(raw)
    except ValueError:
        logger.warning("Invalid hex for %s: %s; ignoring", _SEED_ACCOUNT_ENV, raw)
        return default


def load_rules(base: GameRules = DEFAULT_RULES) -> GameRules:
    """Return ``base`` with any ``PYDILEMMA_*`` environment overrides applied."""

    return replace(
        base,
        history_capacity=_env_int(_HISTORY_CAPACITY_ENV, base.history_capacity, min_value=1),
        initial_threshold=_env_int(_INITIAL_THRESHOLD_ENV, base.initial_threshold, min_value=0),
        threshold_ceiling=_env_ceiling(base.threshold_ceiling),
        seed_account=_env_account(base.seed_account),
        seed_balance=_env_int(_SEED_BALANCE_ENV, base.seed_balance, min_value=0),
        seed_pot=_env_int(_SEED_POT_ENV, base.seed_pot, min_value=0),
    )
