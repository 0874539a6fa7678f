"""Interval problems: meeting rooms, meeting selection and event booking."""

from __future__ import annotations

from bisect import bisect_left
from typing import Iterable


def min_meeting_rooms(intervals: Iterable[tuple[int, int]]) -> int:
    """Minimum number of rooms needed to hold every meeting."""
    meetings = list(intervals)
    starts = sorted(start for start, _ in meetings)
    ends = sorted(end for _, end in meetings)
    rooms = 0
    next_end = 0
    for start in starts:
        if start >= ends[next_end]:
            next_end += 1
        else:
            rooms += 1
    return rooms


def max_meetings(meetings: Iterable[tuple[int, int]]) -> int:
    """Largest number of non-overlapping meetings one person can attend."""
    attended = 0
    last_end: float = float("-inf")
    for start, end in sorted(meetings, key=lambda meeting: meeting[1]):
        if start >= last_end:
            attended += 1
            last_end = end
    return attended


class Scheduler:
    """Books half-open events ``[start, end)`` that must not overlap."""

    def __init__(self) -> None:
        self._events: list[tuple[int, int]] = []

    def __len__(self) -> int:
        return len(self._events)

    def schedule(self, start: int, end: int) -> bool:
        """Book the event if it overlaps nothing booked; report success."""
        if end < start:
            raise ValueError("an event cannot end before it starts")
        index = bisect_left(self._events, (start, end))
        if index > 0 and self._events[index - 1][1] > start:
            return False
        if index < len(self._events) and self._events[index][0] < end:
            return False
        self._events.insert(index, (start, end))
        return True