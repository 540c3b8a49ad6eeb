from itertools import combinations

import pytest
from hypothesis import given, strategies as st

from algokit.sorting_problems import (
    count_apartments,
    count_distinct,
    count_gondolas,
    find_two_values,
    max_customers,
    max_movies,
    min_stick_cost,
    smallest_missing_sum,
)

small_ints = st.lists(st.integers(min_value=1, max_value=100), max_size=30)


def test_apartments_worked_example():
    assert count_apartments([60, 45, 80, 60], [30, 60, 75], 5) == 2


@given(small_ints, small_ints, st.integers(min_value=0, max_value=50))
def test_apartments_never_exceed_either_side(applicants, apartments, diff):
    result = count_apartments(applicants, apartments, diff)
    assert 0 <= result <= min(len(applicants), len(apartments))


@given(small_ints, small_ints)
def test_apartments_unlimited_difference_matches_everyone(applicants, apartments):
    assert count_apartments(applicants, apartments, 10**9) == min(
        len(applicants), len(apartments)
    )


def test_apartments_far_apart_sizes_match_nobody():
    assert count_apartments([1, 2, 3], [100, 200], 10) == 0


@given(st.lists(st.integers(min_value=-50, max_value=50)))
def test_distinct_ignores_duplicates(numbers):
    assert count_distinct(numbers + numbers[::-1]) == count_distinct(numbers)
    assert count_distinct(numbers) <= len(numbers)


@given(st.integers(min_value=0, max_value=60))
def test_distinct_counts_range(n):
    assert count_distinct(list(range(n)) * 3) == n


@given(small_ints, st.integers(min_value=0, max_value=100))
def test_gondolas_bounds(weights, extra):
    limit = max(weights, default=1) + extra
    result = count_gondolas(weights, limit)
    assert (len(weights) + 1) // 2 <= result <= len(weights)


@given(small_ints)
def test_gondolas_pair_everyone_when_roomy(weights):
    limit = 2 * max(weights, default=1)
    assert count_gondolas(weights, limit) == (len(weights) + 1) // 2


@given(st.integers(min_value=0, max_value=20))
def test_gondolas_one_each_when_no_pair_fits(n):
    assert count_gondolas([10] * n, 15) == n


def _subset_sums(coins):
    sums = {0}
    for coin in coins:
        sums |= {s + coin for s in sums}
    return sums


@given(st.lists(st.integers(min_value=1, max_value=20), max_size=10))
def test_smallest_missing_sum_is_first_gap(coins):
    result = smallest_missing_sum(coins)
    sums = _subset_sums(coins)
    assert result not in sums
    assert all(value in sums for value in range(1, result))


def test_smallest_missing_sum_without_coins():
    assert smallest_missing_sum([]) == 1


def test_movies_worked_example():
    assert max_movies([(3, 5), (4, 9), (5, 8)]) == 2


@given(st.integers(min_value=0, max_value=30))
def test_movies_back_to_back_all_watched(n):
    assert max_movies([(i, i + 1) for i in range(n)]) == n


@given(st.integers(min_value=1, max_value=10))
def test_movies_identical_only_one(k):
    assert max_movies([(0, 10)] * k) == 1


@given(
    st.lists(
        st.tuples(st.integers(0, 50), st.integers(1, 20)).map(
            lambda p: (p[0], p[0] + p[1])
        ),
        min_size=1,
        max_size=20,
    )
)
def test_movies_bounds_and_order_independence(movies):
    result = max_movies(movies)
    assert 1 <= result <= len(movies)
    assert max_movies(list(reversed(movies))) == result


def test_customers_worked_example():
    assert max_customers([(5, 8), (2, 4), (3, 9)]) == 2


@given(st.integers(min_value=0, max_value=40))
def test_customers_nested_all_present(k):
    assert max_customers([(i, 100 - i) for i in range(k)]) == k


@given(
    st.lists(
        st.tuples(st.integers(0, 50), st.integers(1, 20)).map(
            lambda p: (p[0], p[0] + p[1])
        ),
        min_size=1,
        max_size=20,
    )
)
def test_customers_bounds(intervals):
    result = max_customers(intervals)
    assert 1 <= result <= len(intervals)
    assert max_customers(list(reversed(intervals))) == result


@given(st.lists(st.integers(min_value=-30, max_value=30), min_size=1, max_size=25))
def test_stick_cost_is_optimal(lengths):
    cost = min_stick_cost(lengths)
    for target in range(min(lengths), max(lengths) + 1):
        assert cost <= sum(abs(v - target) for v in lengths)


@given(st.integers(min_value=1, max_value=20), st.integers(-50, 50))
def test_stick_cost_equal_sticks(n, length):
    assert min_stick_cost([length] * n) == 0


def test_stick_cost_requires_sticks():
    with pytest.raises(ValueError):
        min_stick_cost([])


@given(
    st.lists(st.integers(min_value=1, max_value=30), max_size=15),
    st.integers(min_value=2, max_value=60),
)
def test_two_values_correct(values, target):
    result = find_two_values(values, target)
    if result is None:
        assert all(a + b != target for a, b in combinations(values, 2))
    else:
        i, j = result
        assert i != j
        assert 1 <= i <= len(values) and 1 <= j <= len(values)
        assert values[i - 1] + values[j - 1] == target


def test_two_values_impossible():
    assert find_two_values([1, 2, 3], 100) is None