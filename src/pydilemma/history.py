"""Waiting pool and bounded match history."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional

from pydilemma.models import Match


logger = logging.getLogger(__name__)


class WaitingPool:
    """Matches with one participant, kept in arrival order."""

    def __init__(self, matches: Iterable[Match] = ()):
        self._matches: List[Match] = list(matches)

    def append(self, match: Match) -> None:
        self._matches.append(match)

    def pop(self, index: int) -> Match:
        return self._matches.pop(index)

    def first_index_not_from(self, sender: bytes) -> Optional[int]:
        """Position of the oldest match opened by someone other than ``sender``."""

        for index, match in enumerate(self._matches):
            if match.player_one.sender != sender:
                return index
        return None

    def get(self, match_id: str) -> Optional[Match]:
        for match in self._matches:
            if match.match_id == match_id:
                return match
        return None

    def __contains__(self, match_id: object) -> bool:
        return isinstance(match_id, str) and self.get(match_id) is not None

    def __iter__(self) -> Iterator[Match]:
        return iter(self._matches)

    def __len__(self) -> int:
        return len(self._matches)


class HistoryStore:
    """Completed matches, oldest evicted first once ``capacity`` is exceeded."""

    def __init__(self, capacity: int = 100, matches: Iterable[Match] = ()):
        if capacity < 1:
            raise ValueError("history capacity must be at least 1")
        self.capacity = capacity
        self._matches: List[Match] = []
        for match in matches:
            self.append(match)

    def append(self, match: Match) -> None:
        if not match.completed:
            raise ValueError(f"Match {match.match_id} has not been completed")
        self._matches.append(match)
        while len(self._matches) > self.capacity:
            evicted = self._matches.pop(0)
            logger.debug("Evicted match %s from history", evicted.match_id)

    def get(self, match_id: str) -> Optional[Match]:
        for match in self._matches:
            if match.match_id == match_id:
                return match
        return None

    def __contains__(self, match_id: object) -> bool:
        return isinstance(match_id, str) and self.get(match_id) is not None

    def __iter__(self) -> Iterator[Match]:
        return iter(self._matches)

    def __len__(self) -> int:
        return len(self._matches)
