"""Graph problems: flight routes between cities and friend recommendations."""

from __future__ import annotations

import sys
from collections import defaultdict
from typing import Hashable, Iterable, Mapping, Sequence, TextIO


def format_path(path: Sequence[str]) -> str:
    """Render a path as its stops joined by arrows."""
    return " -> ".join(path)


class FlightMap:
    """Directed flights between cities, with enumeration of simple routes."""

    def __init__(self) -> None:
        self._routes: defaultdict[str, list[str]] = defaultdict(list)

    def travel(self, src: str, dest: str) -> None:
        """Record a direct flight from ``src`` to ``dest``."""
        self._routes[src].append(dest)

    def all_paths(self, src: str, dest: str) -> list[list[str]]:
        """Every route from ``src`` to ``dest`` that visits no city twice."""
        paths: list[list[str]] = []
        path: list[str] = []
        visited: set[str] = set()

        def explore(city: str) -> None:
            path.append(city)
            visited.add(city)
            if city == dest:
                paths.append(list(path))
            else:
                for neighbour in self._routes.get(city, ()):
                    if neighbour not in visited:
                        explore(neighbour)
            path.pop()
            visited.discard(city)

        explore(src)
        return paths

    def print_all_paths(self, src: str, dest: str, out: TextIO | None = None) -> None:
        """Write every route from ``src`` to ``dest``, one per line."""
        out = out if out is not None else sys.stdout
        paths = self.all_paths(src, dest)
        if not paths:
            out.write(f"No paths from {src} to {dest}\n")
            return
        out.write(f"All paths from {src} to {dest}:\n")
        for path in paths:
            out.write(format_path(path) + "\n")

    def clear(self) -> None:
        """Forget every recorded flight."""
        self._routes.clear()

    def has_direct_flight(self, src: str, dest: str) -> bool:
        return dest in self._routes.get(src, ())

    def destinations(self, src: str) -> list[str]:
        """Cities reachable by a direct flight from ``src``, in recorded order."""
        return list(self._routes.get(src, ()))


def recommend_friends(
    user_id: Hashable, friends: Mapping[Hashable, Iterable[Hashable]]
) -> list:
    """Friends of friends of ``user_id`` who are not already friends, sorted."""
    direct = set(friends.get(user_id, ()))
    suggestions = {
        candidate
        for friend in direct
        for candidate in friends.get(friend, ())
        if candidate != user_id and candidate not in direct
    }
    return sorted(suggestions)