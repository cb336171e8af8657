"""Deterministic admission test with a self-tuning threshold."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Optional

from pydilemma.engine.state import GameState
from pydilemma.models import Player


logger = logging.getLogger(__name__)

SEED_LENGTH = 16
DRAW_RANGE = 100


def derive_seed(round_id: bytes, transaction_id: bytes) -> bytes:
    """Sum both identifiers byte by byte (mod 256) into a fixed-size seed.

    Positions past the shorter identifier stay zero.
    """

    seed = bytearray(SEED_LENGTH)
    for index, (a, b) in enumerate(zip(round_id[:SEED_LENGTH], transaction_id[:SEED_LENGTH])):
        seed[index] = (a + b) & 0xFF
    return bytes(seed)


def draw(seed: bytes) -> int:
    """Uniform value in ``[0, 100)`` reproducible from ``seed`` alone."""

    rng = random.Random(int.from_bytes(seed, "big"))
    return rng.randrange(DRAW_RANGE)


@dataclass(frozen=True)
class AdmissionOutcome:
    ready: bool
    match_id: Optional[str] = None


class AdmissionController:
    def __init__(self, state: GameState):
        self.state = state

    def _raise_threshold(self) -> None:
        ceiling = self.state.rules.threshold_ceiling
        raised = self.state.threshold + 1
        self.state.threshold = raised if ceiling is None else min(ceiling, raised)

    def _lower_threshold(self) -> None:
        self.state.threshold = max(0, self.state.threshold - 1)

    def admit(self, player: Player, seed: bytes) -> AdmissionOutcome:
        value = draw(seed)
        before = self.state.threshold
        if value > before:
            self._raise_threshold()
            match = self.state.open_match(player)
            logger.debug(
                "Draw %d > threshold %d; parked as match %s (threshold now %d)",
                value,
                before,
                match.match_id,
                self.state.threshold,
            )
            return AdmissionOutcome(ready=False, match_id=match.match_id)

        self._lower_threshold()
        logger.debug(
            "Draw %d <= threshold %d; attempting pairing (threshold now %d)",
            value,
            before,
            self.state.threshold,
        )
        return AdmissionOutcome(ready=True)
