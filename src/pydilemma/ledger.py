"""Balance ledger and the shared pot."""

from __future__ import annotations

import logging
from typing import Dict, Iterator, Mapping, Tuple


logger = logging.getLogger(__name__)


def _clamped(current: int, delta: int, label: str) -> int:
    updated = current + delta
    if updated < 0:
        # Accounting rules keep every credit >= 0; reaching this is a bug upstream.
        logger.warning("Clamped %s to zero (current=%d, delta=%d)", label, current, delta)
        return 0
    return updated


class Ledger:
    """Non-negative balance per participant plus a single pot counter."""

    def __init__(self, balances: Mapping[bytes, int] | None = None, pot: int = 0):
        self._balances: Dict[bytes, int] = {}
        for identity, amount in (balances or {}).items():
            self._balances[bytes(identity)] = max(0, int(amount))
        self._pot = max(0, int(pot))

    @property
    def pot(self) -> int:
        return self._pot

    def balance_of(self, identity: bytes) -> int:
        return self._balances.get(identity, 0)

    def apply_delta(self, identity: bytes, delta: int) -> int:
        updated = _clamped(self.balance_of(identity), delta, f"balance of {identity.hex()}")
        self._balances[identity] = updated
        return updated

    def apply_pot_delta(self, delta: int) -> int:
        self._pot = _clamped(self._pot, delta, "pot")
        return self._pot

    def zero_out(self, identity: bytes) -> None:
        self._balances[identity] = 0

    def items(self) -> Iterator[Tuple[bytes, int]]:
        return iter(self._balances.items())

    def __len__(self) -> int:
        return len(self._balances)
