"""Streaming data structures: stock span, running median, price tracker."""

from __future__ import annotations

import heapq


class StockSpan:
    """Reports, per day, how many consecutive days the price stayed at or below today's."""

    def __init__(self) -> None:
        self._stack: list[tuple[int, int]] = []

    def next(self, price: int) -> int:
        """Record today's price and return its span."""
        span = 1
        while self._stack and self._stack[-1][0] <= price:
            span += self._stack.pop()[1]
        self._stack.append((price, span))
        return span


class MedianFinder:
    """Running median over a stream of numbers using two heaps."""

    def __init__(self) -> None:
        self._lower: list[int] = []  # max-heap stored negated
        self._upper: list[int] = []

    def __len__(self) -> int:
        return len(self._lower) + len(self._upper)

    def add_num(self, num: int) -> None:
        heapq.heappush(self._lower, -num)
        heapq.heappush(self._upper, -heapq.heappop(self._lower))
        if len(self._upper) > len(self._lower):
            heapq.heappush(self._lower, -heapq.heappop(self._upper))

    def find_median(self) -> float:
        """Median of every number added so far."""
        if not self._lower:
            raise ValueError("no numbers have been added")
        if len(self._lower) > len(self._upper):
            return float(-self._lower[0])
        return (-self._lower[0] + self._upper[0]) / 2


class StockTracker:
    """Prices keyed by timestamp, allowing corrections, with current/min/max."""

    def __init__(self) -> None:
        self._prices: dict[int, int] = {}
        self._latest: int | None = None
        self._min_heap: list[tuple[int, int]] = []
        self._max_heap: list[tuple[int, int]] = []

    def update(self, timestamp: int, price: int) -> None:
        """Set the price at ``timestamp``, replacing any earlier record for it."""
        self._prices[timestamp] = price
        if self._latest is None or timestamp > self._latest:
            self._latest = timestamp
        heapq.heappush(self._min_heap, (price, timestamp))
        heapq.heappush(self._max_heap, (-price, timestamp))

    def _require_data(self) -> None:
        if self._latest is None:
            raise ValueError("no prices have been recorded")

    def current(self) -> int:
        """Price at the latest timestamp."""
        self._require_data()
        return self._prices[self._latest]

    def maximum(self) -> int:
        self._require_data()
        while self._prices[self._max_heap[0][1]] != -self._max_heap[0][0]:
            heapq.heappop(self._max_heap)
        return -self._max_heap[0][0]

    def minimum(self) -> int:
        self._require_data()
        while self._prices[self._min_heap[0][1]] != self._min_heap[0][0]:
            heapq.heappop(self._min_heap)
        return self._min_heap[0][0]