"""Problems solved by sorting followed by a greedy or two-pointer sweep."""

from __future__ import annotations

from collections.abc import Iterable
from operator import itemgetter


def count_apartments(
    applicants: Iterable[int], apartments: Iterable[int], max_difference: int
) -> int:
    """Return how many applicants can get an apartment within ``max_difference``.

    Each applicant takes at most one apartment and each apartment goes to at
    most one applicant.
    """
    wanted = sorted(applicants)
    sizes = sorted(apartments)
    i = j = matched = 0
    while i < len(wanted) and j < len(sizes):
        if abs(wanted[i] - sizes[j]) <= max_difference:
            i += 1
            j += 1
            matched += 1
        elif wanted[i] < sizes[j]:
            i += 1
        else:
            j += 1
    return matched


def count_distinct(numbers: Iterable[int]) -> int:
    """Return the number of distinct values in ``numbers``."""
    return len(set(numbers))


def count_gondolas(weights: Iterable[int], max_weight: int) -> int:
    """Return the minimum number of gondolas for children of the given weights.

    A gondola holds one or two children whose total weight is at most
    ``max_weight``.
    """
    ordered = sorted(weights)
    left, right = 0, len(ordered) - 1
    gondolas = 0
    while left < right:
        if ordered[left] + ordered[right] <= max_weight:
            left += 1
        right -= 1
        gondolas += 1
    if left == right:
        gondolas += 1
    return gondolas


def smallest_missing_sum(coins: Iterable[int]) -> int:
    """Return the smallest positive sum that no subset of ``coins`` makes."""
    reachable = 1
    for coin in sorted(coins):
        if coin > reachable:
            break
        reachable += coin
    return reachable


def max_movies(movies: Iterable[tuple[int, int]]) -> int:
    """Return how many non-overlapping ``(start, end)`` movies one can watch."""
    watched = 0
    free_at: int | None = None
    for start, end in sorted(movies, key=itemgetter(1)):
        if free_at is None or start >= free_at:
            free_at = end
            watched += 1
    return watched


def max_customers(intervals: Iterable[tuple[int, int]]) -> int:
    """Return the largest number of customers present at the same time.

    Each interval is an ``(arrival, departure)`` pair. A departure at the same
    moment as an arrival is handled first.
    """
    events: list[tuple[int, int]] = []
    for arrival, departure in intervals:
        events.append((arrival, 1))
        events.append((departure, -1))
    events.sort()
    present = most = 0
    for _, change in events:
        present += change
        most = max(most, present)
    return most


def min_stick_cost(lengths: Iterable[int]) -> int:
    """Return the least total change needed to make all sticks the same length."""
    ordered = sorted(lengths)
    if not ordered:
        raise ValueError("at least one stick is required")
    target = ordered[len(ordered) // 2]
    return sum(abs(length - target) for length in ordered)


def find_two_values(values: Iterable[int], target: int) -> tuple[int, int] | None:
    """Return 1-based positions of two values that add up to ``target``.

    Returns ``None`` when no such pair exists.
    """
    indexed = sorted(enumerate(values, start=1), key=itemgetter(1))
    left, right = 0, len(indexed) - 1
    while left < right:
        total = indexed[left][1] + indexed[right][1]
        if total == target:
            return indexed[left][0], indexed[right][0]
        if total > target:
            right -= 1
        else:
            left += 1
    return None