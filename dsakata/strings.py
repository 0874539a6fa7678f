"""String problems: longest palindromic substring and longest unique run."""

from __future__ import annotations


def _expand(s: str, left: int, right: int) -> tuple[int, int]:
    """Grow a palindrome outward from a centre; return its half-open bounds."""
    while left >= 0 and right < len(s) and s[left] == s[right]:
        left -= 1
        right += 1
    return left + 1, right


def longest_palindrome(s: str) -> str:
    """Return the first longest palindromic substring of ``s``."""
    best_start, best_end = 0, 0
    for centre in range(len(s)):
        for start, end in (_expand(s, centre, centre), _expand(s, centre, centre + 1)):
            if end - start > best_end - best_start:
                best_start, best_end = start, end
    return s[best_start:best_end]


def length_of_longest_substring(s: str) -> int:
    """Length of the longest substring of ``s`` without a repeated character."""
    last_seen: dict[str, int] = {}
    window_start = 0
    longest = 0
    for index, char in enumerate(s):
        previous = last_seen.get(char)
        if previous is not None and previous >= window_start:
            window_start = previous + 1
        last_seen[char] = index
        longest = max(longest, index - window_start + 1)
    return longest