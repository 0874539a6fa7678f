"""Flagging invalid card transactions."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Iterable

AMOUNT_LIMIT = 1000
CONFLICT_WINDOW = 60


@dataclass(frozen=True)
class Transaction:
    """One transaction: who made it, how much, where and when (in minutes)."""

    name: str
    amount: int
    city: str
    time: int


def invalid_transactions(transactions: Iterable[Transaction]) -> list[Transaction]:
    """Transactions that are invalid, in input order.

    A transaction is invalid when its amount exceeds the limit, or when another
    transaction by the same name in a different city happens within the window
    (inclusive) of it.
    """
    items = list(transactions)
    buckets: defaultdict[tuple[str, int], list[int]] = defaultdict(list)
    for index, item in enumerate(items):
        buckets[(item.name, item.time // CONFLICT_WINDOW)].append(index)

    invalid: set[int] = set()
    for index, item in enumerate(items):
        if item.amount > AMOUNT_LIMIT:
            invalid.add(index)
        bucket = item.time // CONFLICT_WINDOW
        for neighbour in (bucket - 1, bucket, bucket + 1):
            for other_index in buckets.get((item.name, neighbour), ()):
                other = items[other_index]
                if (
                    other.city != item.city
                    and abs(other.time - item.time) <= CONFLICT_WINDOW
                ):
                    invalid.add(index)
                    invalid.add(other_index)
    return [item for index, item in enumerate(items) if index in invalid]