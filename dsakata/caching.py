"""Time- and size-bounded structures: LRU cache, rate limiter, spam filter."""

from __future__ import annotations

from collections import OrderedDict, defaultdict, deque


class LRUCache:
    """Fixed-capacity key/value cache evicting the least recently used entry."""

    MISSING = -1

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._entries: OrderedDict[int, int] = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, key: int) -> int:
        """Value stored under ``key``, or -1 if absent; marks it most recent."""
        if key not in self._entries:
            return self.MISSING
        self._entries.move_to_end(key)
        return self._entries[key]

    def put(self, key: int, value: int) -> None:
        """Store ``value`` under ``key``, evicting the oldest entry if full."""
        self._entries[key] = value
        self._entries.move_to_end(key)
        while len(self._entries) > self.capacity:
            self._entries.popitem(last=False)


class RateLimiter:
    """Allows at most ``max_requests`` per user in any sliding window of seconds."""

    def __init__(self, max_requests: int, window_seconds: int) -> None:
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._requests: defaultdict[str, deque[int]] = defaultdict(deque)

    def allow_request(self, user_id: str, timestamp: int) -> bool:
        """Record and allow the request if the user is under the limit."""
        recent = self._requests[user_id]
        while recent and timestamp - recent[0] >= self.window_seconds:
            recent.popleft()
        if len(recent) >= self.max_requests:
            return False
        recent.append(timestamp)
        return True


class SpamFilter:
    """Detects a message repeated within ``window`` time units of its first sighting."""

    def __init__(self, window: int) -> None:
        self.window = window
        self._last_seen: dict[str, int] = {}
        self._order: deque[tuple[str, int]] = deque()

    def _expire(self, now: int) -> None:
        while self._order and now - self._order[0][1] > self.window:
            message, seen = self._order.popleft()
            if self._last_seen.get(message) == seen:
                del self._last_seen[message]

    def is_duplicate(self, message: str, timestamp: int) -> bool:
        """True if ``message`` was recorded within the window; else record it."""
        self._expire(timestamp)
        if message in self._last_seen:
            return True
        self._last_seen[message] = timestamp
        self._order.append((message, timestamp))
        return False