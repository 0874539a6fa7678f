"""Dynamic programming and backtracking: knapsack, coins, queens, subsets."""

from __future__ import annotations

from typing import Sequence


def knapsack_max_profit(
    capacity: int, weights: Sequence[int], values: Sequence[int]
) -> int:
    """Largest total value of items whose total weight fits in ``capacity``."""
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must not be negative")
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        # Walk capacities downward so each item is used at most once.
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], value + best[room - weight])
    return best[capacity]


def coin_change(coins: Sequence[int], amount: int) -> int:
    """Fewest coins summing to ``amount``, or -1 if it cannot be made."""
    if amount < 0:
        raise ValueError("amount must not be negative")
    if any(coin <= 0 for coin in coins):
        raise ValueError("coin values must be positive")
    unreachable = amount + 1
    fewest = [0] + [unreachable] * amount
    for total in range(1, amount + 1):
        for coin in coins:
            if coin <= total:
                fewest[total] = min(fewest[total], fewest[total - coin] + 1)
    return -1 if fewest[amount] == unreachable else fewest[amount]


def total_n_queens(n: int) -> int:
    """Number of ways to place ``n`` non-attacking queens on an n×n board."""
    if n < 0:
        raise ValueError("board size must not be negative")
    columns: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def place(row: int) -> int:
        if row == n:
            return 1
        count = 0
        for col in range(n):
            if col in columns or row - col in diagonals or row + col in anti_diagonals:
                continue
            columns.add(col)
            diagonals.add(row - col)
            anti_diagonals.add(row + col)
            count += place(row + 1)
            columns.remove(col)
            diagonals.remove(row - col)
            anti_diagonals.remove(row + col)
        return count

    return place(0)


def subsets(values: Sequence[int]) -> list[list[int]]:
    """Every subset of ``values``, each keeping the input order of its items."""
    result: list[list[int]] = []
    current: list[int] = []

    def explore(index: int) -> None:
        if index >= len(values):
            result.append(list(current))
            return
        current.append(values[index])
        explore(index + 1)
        current.pop()
        explore(index + 1)

    explore(0)
    return result