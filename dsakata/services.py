"""Small services: a score leaderboard, a priority task queue, a URL shortener."""

from __future__ import annotations

import heapq
import itertools
import string
from collections import Counter
from typing import Optional

_BASE62 = string.digits + string.ascii_lowercase + string.ascii_uppercase


class Leaderboard:
    """Accumulates scores per user and ranks users by total score."""

    def __init__(self) -> None:
        self.scores: Counter[int] = Counter()

    def add_score(self, user_id: int, score: int) -> None:
        """Add ``score`` to the user's total."""
        self.scores[user_id] += score

    def top(self, k: int) -> list[int]:
        """Up to ``k`` user ids, highest total first; ties go to the higher id."""
        if k <= 0:
            return []
        ranked = heapq.nlargest(
            k, ((score, user) for user, score in self.scores.items())
        )
        return [user for _, user in ranked]


class TaskScheduler:
    """Runs tasks highest priority first; equal priorities in arrival order."""

    def __init__(self) -> None:
        self._heap: list[tuple[int, int, str]] = []
        self._sequence = itertools.count()

    def __len__(self) -> int:
        return len(self._heap)

    def add_task(self, priority: int, description: str) -> None:
        heapq.heappush(self._heap, (-priority, next(self._sequence), description))

    def execute_task(self) -> Optional[str]:
        """Remove and return the next task's description; None when idle."""
        if not self._heap:
            return None
        return heapq.heappop(self._heap)[2]


def _encode(number: int) -> str:
    digits = []
    while number:
        number, remainder = divmod(number, len(_BASE62))
        digits.append(_BASE62[remainder])
    return "".join(reversed(digits)) or _BASE62[0]


class URLShortener:
    """Maps long URLs to short base-62 codes and back."""

    def __init__(self) -> None:
        self._short_to_long: dict[str, str] = {}
        self._long_to_short: dict[str, str] = {}
        self._counter = 0

    def shorten(self, long_url: str) -> str:
        """Short code for ``long_url``; the same URL always gets the same code."""
        existing = self._long_to_short.get(long_url)
        if existing is not None:
            return existing
        self._counter += 1
        code = _encode(self._counter)
        self._short_to_long[code] = long_url
        self._long_to_short[long_url] = code
        return code

    def retrieve(self, short_code: str) -> Optional[str]:
        """The URL stored under ``short_code``, or None if unknown."""
        return self._short_to_long.get(short_code)