"""Match lifecycle: created waiting with one player, completed exactly once."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from .player import Player


@dataclass
class Match:
    match_id: str
    player_one: Player
    player_two: Optional[Player] = None
    player_one_delta: int = 0
    player_two_delta: int = 0
    pot_delta: int = 0
    _sealed: bool = field(default=False, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.player_two is not None:
            object.__setattr__(self, "_sealed", True)

    def __setattr__(self, name: str, value: Any) -> None:
        if getattr(self, "_sealed", False):
            raise AttributeError(f"Match {self.match_id} is completed and read-only")
        super().__setattr__(name, value)

    @property
    def completed(self) -> bool:
        return self.player_two is not None

    @property
    def player_one_payout(self) -> int:
        """Amount credited to player one's balance: escrowed stake plus net delta."""

        return self.player_one.stake + self.player_one_delta

    @property
    def player_two_payout(self) -> int:
        if self.player_two is None:
            return 0
        return self.player_two.stake + self.player_two_delta

    def complete(self, player_two: Player, deltas: tuple[int, int, int]) -> None:
        if self.completed:
            raise RuntimeError(f"Match {self.match_id} is already completed")
        self.player_one_delta, self.player_two_delta, self.pot_delta = deltas
        self.player_two = player_two
        object.__setattr__(self, "_sealed", True)
