"""A small test registry with assertions, benchmarking and input generators."""

from __future__ import annotations

import random
import sys
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Sequence, TextIO

INT_MIN_VAL = -(2**31)
INT_MAX_VAL = 2**31 - 1

_WARMUP_ROUNDS = 10


class AssertionFailed(Exception):
    """Raised by the assertion helpers when a check does not hold."""


@dataclass(frozen=True)
class RunResult:
    """Counts of passed and failed tests from one run."""

    passed: int
    failed: int

    @property
    def total(self) -> int:
        return self.passed + self.failed


@dataclass(frozen=True)
class BenchmarkResult:
    """Timing of a benchmark, in whole microseconds."""

    name: str
    iterations: int
    total_us: int
    avg_us: int


@dataclass
class TestRegistry:
    """An ordered collection of named test callables."""

    __test__ = False

    tests: list[tuple[str, Callable[[], Any]]] = field(default_factory=list)

    def add_test(self, name: str, func: Callable[[], Any]) -> None:
        """Register a test under the given name."""
        self.tests.append((name, func))

    def run_all(self, out: TextIO | None = None) -> RunResult:
        """Run every registered test in order and report to ``out``."""
        out = out if out is not None else sys.stdout
        out.write("\n========== Running Tests ==========\n\n")
        passed = failed = 0
        for name, func in self.tests:
            out.write(f"Running: {name} ... ")
            start = time.perf_counter()
            try:
                func()
            except Exception as exc:  # a failing test must not stop the run
                out.write(f"FAILED: {exc}\n")
                failed += 1
            else:
                elapsed = int((time.perf_counter() - start) * 1_000_000)
                out.write(f"PASSED ({elapsed} μs)\n")
                passed += 1
        count = len(self.tests)
        out.write("\n========== Results ==========\n")
        out.write(f"Passed: {passed}/{count}\n")
        out.write(f"Failed: {failed}/{count}\n")
        out.write("=================================\n")
        return RunResult(passed, failed)


_default_registry = TestRegistry()


def register(func: Callable[[], Any]) -> Callable[[], Any]:
    """Decorator adding ``func`` to the default registry under its own name."""
    _default_registry.add_test(func.__name__, func)
    return func


def _suffix(msg: str) -> str:
    return f" - {msg}" if msg else ""


def assert_equal(expected: Any, actual: Any, msg: str = "") -> None:
    if expected != actual:
        raise AssertionFailed(f"Expected: {expected}, Got: {actual}{_suffix(msg)}")


def assert_true(condition: bool, msg: str = "Condition was false") -> None:
    if not condition:
        raise AssertionFailed(msg)


def assert_false(condition: bool, msg: str = "Condition was true") -> None:
    if condition:
        raise AssertionFailed(msg)


def assert_vector_equal(expected: Sequence[Any], actual: Sequence[Any], msg: str = "") -> None:
    if len(expected) != len(actual):
        raise AssertionFailed(
            f"Vector size mismatch. Expected: {len(expected)}, Got: {len(actual)}{_suffix(msg)}"
        )
    for index, (want, got) in enumerate(zip(expected, actual)):
        if want != got:
            raise AssertionFailed(
                f"Mismatch at index {index}. Expected: {want}, Got: {got}{_suffix(msg)}"
            )


def assert_throws(func: Callable[[], Any], msg: str = "Expected exception not thrown") -> None:
    try:
        func()
    except Exception:
        return
    raise AssertionFailed(msg)


def benchmark(
    name: str,
    func: Callable[[], Any],
    iterations: int = 1000,
    out: TextIO | None = None,
) -> BenchmarkResult:
    """Time ``func`` over ``iterations`` calls after a short warm-up."""
    if iterations <= 0:
        raise ValueError("iterations must be positive")
    out = out if out is not None else sys.stdout
    for _ in range(_WARMUP_ROUNDS):
        func()
    start = time.perf_counter()
    for _ in range(iterations):
        func()
    total = int((time.perf_counter() - start) * 1_000_000)
    avg = total // iterations
    out.write(
        f"⏱️  {name}: {avg} μs/op (total: {total} μs for {iterations} iterations)\n"
    )
    return BenchmarkResult(name, iterations, total, avg)


def compare_benchmark(
    name1: str,
    func1: Callable[[], Any],
    name2: str,
    func2: Callable[[], Any],
    iterations: int = 1000,
    out: TextIO | None = None,
) -> tuple[BenchmarkResult, BenchmarkResult]:
    """Benchmark two implementations one after the other."""
    out = out if out is not None else sys.stdout
    out.write("\n📊 Comparing implementations:\n")
    first = benchmark(name1, func1, iterations, out)
    second = benchmark(name2, func2, iterations, out)
    out.write("\n")
    return first, second


def random_ints(count: int, low: int = -1000, high: int = 1000) -> list[int]:
    return [random.randint(low, high) for _ in range(count)]


def sorted_ints(count: int, start: int = 0) -> list[int]:
    return list(range(start, start + count))


def reverse_sorted_ints(count: int, start: int = 0) -> list[int]:
    return sorted_ints(count, start)[::-1]


def edge_case_ints() -> list[int]:
    return [0, 1, -1, INT_MIN_VAL, INT_MAX_VAL, INT_MIN_VAL + 1, INT_MAX_VAL - 1]


def edge_case_arrays() -> list[list[int]]:
    return [
        [],
        [0],
        [1],
        [-1],
        [INT_MIN_VAL],
        [INT_MAX_VAL],
        [1, 2],
        [2, 1],
        [1, 1],
        [INT_MIN_VAL, INT_MAX_VAL],
    ]


def with_duplicates(count: int, num_unique: int = 5) -> list[int]:
    return [random.randint(0, num_unique - 1) for _ in range(count)]


def large_array(count: int = 100000) -> list[int]:
    return random_ints(count)


def main(argv: Iterable[str] | None = None) -> int:
    """Run every test in the default registry."""
    _default_registry.run_all()
    return 0