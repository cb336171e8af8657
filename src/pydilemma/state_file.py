"""Persist and load game state snapshots for a local host."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from pydilemma.config import DEFAULT_RULES, GameRules
from pydilemma.engine import GameState


@dataclass
class StateFile:
    state: GameState

    @classmethod
    def load(cls, path: Path, rules: GameRules = DEFAULT_RULES) -> "StateFile":
        data = json.loads(path.read_text(encoding="utf-8"))
        return cls(state=GameState.from_dict(data, rules))

    def save(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(self.state.to_dict(), indent=2), encoding="utf-8")
