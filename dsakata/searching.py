"""Searching and counting problems over integer sequences."""

from __future__ import annotations

from collections import Counter
from fractions import Fraction
from math import inf
from typing import Sequence


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """All distinct sorted triplets from ``nums`` that sum to zero."""
    values = sorted(nums)
    result: list[list[int]] = []
    for i, first in enumerate(values[:-2] if len(values) >= 2 else []):
        if first > 0:
            break
        if i > 0 and first == values[i - 1]:
            continue
        left, right = i + 1, len(values) - 1
        while left < right:
            total = first + values[left] + values[right]
            if total < 0:
                left += 1
            elif total > 0:
                right -= 1
            else:
                result.append([first, values[left], values[right]])
                left += 1
                right -= 1
                while left < right and values[left] == values[left - 1]:
                    left += 1
                while left < right and values[right] == values[right + 1]:
                    right -= 1
    return result


def top_k_frequent(nums: Sequence[int], k: int) -> list[int]:
    """The ``k`` most frequent values, most frequent first, by bucket sort."""
    counts = Counter(nums)
    buckets: list[list[int]] = [[] for _ in range(len(nums) + 1)]
    for value, count in counts.items():
        buckets[count].append(value)
    result: list[int] = []
    for bucket in reversed(buckets):
        for value in bucket:
            if len(result) >= k:
                return result
            result.append(value)
    return result


def closest_pair(values: Sequence[int]) -> tuple[int, int]:
    """The two values with the smallest absolute difference, smaller first."""
    if len(values) < 2:
        raise ValueError("closest_pair needs at least two values")
    ordered = sorted(values)
    return min(zip(ordered, ordered[1:]), key=lambda pair: pair[1] - pair[0])


def median_of_two_sorted(a: Sequence[int], b: Sequence[int]) -> float:
    """Median of the union of two sorted sequences; 0.0 when both are empty."""
    if len(a) > len(b):
        a, b = b, a
    m, n = len(a), len(b)
    total = m + n
    if total == 0:
        return 0.0
    half = (total + 1) // 2
    lo, hi = 0, m
    while lo <= hi:
        i = (lo + hi) // 2
        j = half - i
        a_left = a[i - 1] if i > 0 else -inf
        a_right = a[i] if i < m else inf
        b_left = b[j - 1] if j > 0 else -inf
        b_right = b[j] if j < n else inf
        if a_left <= b_right and b_left <= a_right:
            left_max = max(a_left, b_left)
            if total % 2:
                return float(left_max)
            return (left_max + min(a_right, b_right)) / 2
        if a_left > b_right:
            hi = i - 1
        else:
            lo = i + 1
    raise ValueError("inputs must be sorted in ascending order")


def car_fleet(target: int, position: Sequence[int], speed: Sequence[int]) -> int:
    """Number of car fleets that arrive at ``target``."""
    if len(position) != len(speed):
        raise ValueError("position and speed must have the same length")
    if any(s <= 0 for s in speed):
        raise ValueError("every speed must be positive")
    fleets = 0
    slowest: Fraction | float = -inf
    for pos, spd in sorted(zip(position, speed), reverse=True):
        arrival = Fraction(target - pos, spd)
        if arrival > slowest:
            fleets += 1
            slowest = arrival
    return fleets