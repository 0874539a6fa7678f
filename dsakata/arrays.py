"""Classic array problems: majority, maximum subarray, products, runs."""

from __future__ import annotations

from math import prod
from typing import NamedTuple, Sequence


class SubarrayMax(NamedTuple):
    """Largest subarray sum with its inclusive start and end indices."""

    total: int
    start: int
    end: int


def find_majority_element(values: Sequence[int]) -> int:
    """Return the majority candidate found by Boyer-Moore voting."""
    if not values:
        raise ValueError("cannot find a majority element of an empty sequence")
    candidate = values[0]
    count = 0
    for value in values:
        if count == 0:
            candidate = value
        count += 1 if value == candidate else -1
    return candidate


def max_subarray_with_indices(values: Sequence[int]) -> SubarrayMax:
    """Kadane's algorithm keeping the earliest best range; empty gives (0, -1, -1)."""
    if not values:
        return SubarrayMax(0, -1, -1)
    current = best = values[0]
    current_start = best_start = best_end = 0
    for index, value in enumerate(values[1:], start=1):
        if value > current + value:
            current = value
            current_start = index
        else:
            current += value
        if current > best:
            best, best_start, best_end = current, current_start, index
    return SubarrayMax(best, best_start, best_end)


def max_subarray_sum(values: Sequence[int]) -> int:
    """Largest sum of a contiguous subarray; 0 for an empty sequence."""
    return max_subarray_with_indices(values).total


def product_except_self_brute(values: Sequence[int]) -> list[int]:
    """Product of all other elements, computed directly for each position."""
    return [
        prod(other for j, other in enumerate(values) if j != i)
        for i in range(len(values))
    ]


def product_except_self(values: Sequence[int]) -> list[int]:
    """Product of all other elements using prefix and suffix products."""
    result = []
    running = 1
    for value in values:
        result.append(running)
        running *= value
    running = 1
    for i in reversed(range(len(values))):
        result[i] *= running
        running *= values[i]
    return result


def longest_consecutive(values: Sequence[int]) -> int:
    """Length of the longest run of consecutive integers present in ``values``."""
    present = set(values)
    longest = 0
    for value in present:
        if value - 1 in present:
            continue
        end = value
        while end + 1 in present:
            end += 1
        longest = max(longest, end - value + 1)
    return longest