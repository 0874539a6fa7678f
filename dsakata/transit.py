"""Average travel times between stations from check-in and check-out events."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class _RouteStats:
    total_time: int = 0
    trips: int = 0


class StationTracker:
    """Tracks riders' journeys and the average time of each directed route."""

    def __init__(self) -> None:
        self._active: dict[int, tuple[str, int]] = {}
        self._routes: dict[tuple[str, str], _RouteStats] = {}

    def check_in(self, station: str, user_id: int, time: int) -> None:
        """Start a journey; ignored if the rider is already checked in."""
        self._active.setdefault(user_id, (station, time))

    def check_out(self, station: str, user_id: int, time: int) -> None:
        """Finish a journey; ignored if the rider never checked in."""
        journey = self._active.pop(user_id, None)
        if journey is None:
            return
        start_station, start_time = journey
        stats = self._routes.setdefault((start_station, station), _RouteStats())
        stats.total_time += time - start_time
        stats.trips += 1

    def average_time(self, start_station: str, end_station: str) -> float:
        """Mean travel time from ``start_station`` to ``end_station``; 0.0 if unknown."""
        stats = self._routes.get((start_station, end_station))
        if stats is None:
            return 0.0
        return stats.total_time / stats.trips