# dsakata

Worked solutions to medium-difficulty data-structure and algorithm
exercises, plus a small harness for registering, running and benchmarking
checks. It is pure Python with no third-party dependencies.

## Installation

    pip install .

To run the test suite:

    pip install .[test]
    pytest

## What is inside

| Module | Contents |
| --- | --- |
| `dsakata.arrays` | `find_majority_element`, `max_subarray_sum`, `max_subarray_with_indices` (returns a `SubarrayMax` of total, start, end), `product_except_self`, `product_except_self_brute`, `longest_consecutive` |
| `dsakata.strings` | `longest_palindrome`, `length_of_longest_substring` |
| `dsakata.searching` | `three_sum`, `top_k_frequent`, `closest_pair`, `median_of_two_sorted`, `car_fleet` |
| `dsakata.intervals` | `min_meeting_rooms`, `max_meetings`, `Scheduler` (books half-open `[start, end)` events) |
| `dsakata.combinatorics` | `knapsack_max_profit`, `coin_change`, `total_n_queens`, `subsets` |
| `dsakata.graphs` | `FlightMap`, `format_path`, `recommend_friends` |
| `dsakata.linked_lists` | `ListNode`, `from_values`, `to_values`, `merge_two_lists`, `merge_k_lists`, `remove_nth_from_end` |
| `dsakata.grids` | `count_islands` |
| `dsakata.streaming` | `StockSpan`, `MedianFinder`, `StockTracker` |
| `dsakata.transactions` | `Transaction`, `invalid_transactions` |
| `dsakata.transit` | `StationTracker` |
| `dsakata.caching` | `LRUCache`, `RateLimiter`, `SpamFilter` |
| `dsakata.autocomplete` | `Autocomplete`, `AutocompleteHistory` |
| `dsakata.history` | `VersionControl`, `TextEditor` |
| `dsakata.services` | `Leaderboard`, `TaskScheduler`, `URLShortener` |
| `dsakata.harness` | `TestRegistry`, `register`, assertion helpers, `benchmark`, `compare_benchmark`, input generators, `main` |

A few behaviours worth knowing:

- `LRUCache.get` returns `-1` for a missing key.
- `TaskScheduler.execute_task` and `URLShortener.retrieve` return `None`
  when there is nothing to return.
- `MedianFinder.find_median` and the `StockTracker` queries raise
  `ValueError` before any data has been added; `closest_pair` raises
  `ValueError` for fewer than two values, and `find_majority_element`
  for an empty sequence.
- `StationTracker.average_time` returns `0.0` for a route with no trips.

## Examples

```python
from dsakata.combinatorics import coin_change, total_n_queens
from dsakata.caching import LRUCache

coin_change([1, 2, 5], 11)   # 3
total_n_queens(8)            # 92

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)                 # 1
cache.put(3, 3)
cache.get(2)                 # -1, evicted
```

```python
from dsakata.graphs import FlightMap, format_path

flights = FlightMap()
flights.travel("NYC", "LA")
flights.travel("NYC", "Chicago")
flights.travel("Chicago", "LA")
for path in flights.all_paths("NYC", "LA"):
    print(format_path(path))
# NYC -> LA
# NYC -> Chicago -> LA
```

## The harness

`dsakata.harness` keeps a default `TestRegistry`. Decorate a
no-argument function with `register` to add it under its own name, then
call `harness.main()` (or `run_all()` on your own registry) to run every
check in order. Each check gets a `PASSED (n μs)` or `FAILED: message`
line, followed by a summary; `run_all` also returns a `RunResult` with
the pass and fail counts.

```python
from dsakata import harness
from dsakata.strings import length_of_longest_substring

@harness.register
def longest_substring_basic():
    harness.assert_equal(3, length_of_longest_substring("abcabcbb"))

harness.main()
```

The package also installs a command:

    dsakata

It runs the default registry in a fresh process. The package registers
no checks of its own, so on its own the command prints an empty summary
(`Passed: 0/0`); it is useful only from code that registers checks first.

`benchmark` and `compare_benchmark` time a callable over a number of
iterations after a short warm-up, print the average and total in
microseconds, and return `BenchmarkResult` values. `random_ints`,
`sorted_ints`, `reverse_sorted_ints`, `edge_case_ints`,
`edge_case_arrays`, `with_duplicates` and `large_array` produce inputs
for trying solutions out.

## What it does not do

Everything lives in memory: the caches, trackers, leaderboards and
version histories are not saved anywhere. The harness does not discover
checks in files or directories; only functions registered in the running
process are run.