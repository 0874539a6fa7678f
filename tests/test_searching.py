import statistics

import pytest

from dsakata.searching import (
    car_fleet,
    closest_pair,
    median_of_two_sorted,
    three_sum,
    top_k_frequent,
)


# three_sum

def test_three_sum_basic_example():
    result = three_sum([-1, 0, 1, 2, -1, -4])
    assert len(result) == 2
    assert sorted(result) == [[-1, -1, 2], [-1, 0, 1]]


def test_three_sum_no_solution():
    assert three_sum([0, 1, 1]) == []


def test_three_sum_all_zeros():
    assert three_sum([0, 0, 0]) == [[0, 0, 0]]


def test_three_sum_empty():
    assert three_sum([]) == []


def test_three_sum_two_elements():
    assert three_sum([-1, 1]) == []


def test_three_sum_triplets_are_valid_and_unique():
    nums = [-4, -2, -2, -1, 0, 1, 2, 2, 3, 3, 4, 6]
    result = three_sum(nums)
    assert result
    assert all(sum(t) == 0 for t in result)
    assert all(t == sorted(t) for t in result)
    assert len({tuple(t) for t in result}) == len(result)


def test_three_sum_leaves_input_unchanged():
    nums = [3, -1, -2, 0]
    three_sum(nums)
    assert nums == [3, -1, -2, 0]


# top_k_frequent

def test_top_k_basic():
    result = top_k_frequent([1, 1, 1, 2, 2, 3], 2)
    assert sorted(result) == [1, 2]


def test_top_k_single():
    assert top_k_frequent([1], 1) == [1]


def test_top_k_all_same():
    assert top_k_frequent([5, 5, 5, 5], 1) == [5]


def test_top_k_equals_unique():
    assert sorted(top_k_frequent([1, 2, 3], 3)) == [1, 2, 3]


def test_top_k_negative_numbers():
    assert top_k_frequent([-1, -1, 2, 2, 2, 3], 1) == [2]


def test_top_k_ties():
    result = top_k_frequent([1, 1, 2, 2, 3, 3], 2)
    assert len(result) == 2
    assert set(result) <= {1, 2, 3}


def test_top_k_more_than_unique_returns_all():
    assert sorted(top_k_frequent([4, 4, 7], 5)) == [4, 7]


# closest_pair

@pytest.mark.parametrize(
    "values, gap",
    [
        ([1, 5, 3, 19, 18, 25], 1),
        ([1, 2, 3, 4], 1),
        ([5, 3, 5, 10], 0),
        ([-10, -5, 0, 100], 5),
        ([7, 3], 4),
        ([1, 1000000, 999999], 1),
    ],
)
def test_closest_pair_gap(values, gap):
    first, second = closest_pair(values)
    assert abs(second - first) == gap
    assert first in values and second in values


def test_closest_pair_ordered():
    first, second = closest_pair([7, 3])
    assert (first, second) == (3, 7)


def test_closest_pair_needs_two_values():
    with pytest.raises(ValueError):
        closest_pair([4])


# median_of_two_sorted

@pytest.mark.parametrize(
    "a, b, expected",
    [
        ([1, 2, 3, 5], [3, 4, 6, 9, 10], 4.0),
        ([1, 3, 4, 5], [1, 4, 5, 6], 4.0),
        ([], [], 0.0),
        ([], [1, 2, 3, 4, 5], 3.0),
        ([2, 4, 6, 8], [], 5.0),
        ([1], [3], 2.0),
        ([3], [1, 2, 4, 5], 3.0),
        ([1, 2, 3], [4, 5, 6], 3.5),
        ([10, 20, 30], [1, 2, 3], 6.5),
        ([1, 1, 2], [1, 2, 2], 1.5),
        ([-5, -1, 2], [-3, 0, 4], -0.5),
        ([1, 3, 5, 7], [2, 4, 6], 4.0),
        ([1, 2, 3, 4, 5, 6, 7, 8, 9, 10], [100], 6.0),
    ],
)
def test_median_cases(a, b, expected):
    assert median_of_two_sorted(a, b) == expected


@pytest.mark.parametrize(
    "a, b",
    [([0, 7, 9], [2, 2, 8, 11]), ([-4], [-3, -2]), ([5, 6, 7, 8], [1])],
)
def test_median_matches_statistics(a, b):
    assert median_of_two_sorted(a, b) == statistics.median(a + b)


# car_fleet

@pytest.mark.parametrize(
    "target, position, speed, expected",
    [
        (12, [10, 8, 0, 5, 3], [2, 4, 1, 1, 3], 3),
        (10, [3], [3], 1),
        (100, [0, 2, 4], [4, 2, 1], 1),
        (10, [0, 2, 4, 6], [1, 1, 1, 1], 4),
        (10, [0, 5], [3, 1], 1),
        (10, [0, 5], [1, 3], 2),
        (10, [], [], 0),
        (5, [5, 5, 5], [1, 2, 3], 1),
    ],
)
def test_car_fleet(target, position, speed, expected):
    assert car_fleet(target, position, speed) == expected


def test_car_fleet_mismatched_lengths():
    with pytest.raises(ValueError):
        car_fleet(10, [1, 2], [1])


def test_car_fleet_zero_speed():
    with pytest.raises(ValueError):
        car_fleet(10, [1], [0])