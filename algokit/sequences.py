"""Problems over sequences of numbers and characters."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from itertools import groupby

MODULUS = 1_000_000_007


def collecting_rounds(permutation: Iterable[int]) -> int:
    """Return the rounds needed to collect 1..n in order from left to right."""
    values = list(permutation)
    if sorted(values) != list(range(1, len(values) + 1)):
        raise ValueError("input must be a permutation of 1..n")
    position = {value: index for index, value in enumerate(values)}
    return 1 + sum(
        1 for value in range(1, len(values)) if position[value] > position[value + 1]
    )


def dice_combinations(n: int) -> int:
    """Return the number of ordered dice throws summing to ``n``, modulo 10**9+7."""
    if n < 0:
        raise ValueError("n must not be negative")
    window: deque[int] = deque([1], maxlen=6)
    for _ in range(n):
        window.append(sum(window) % MODULUS)
    return window[-1]


def increasing_array_moves(values: Iterable[int]) -> int:
    """Return the total increase needed to make ``values`` non-decreasing."""
    moves = 0
    highest: int | None = None
    for value in values:
        if highest is None or value > highest:
            highest = value
        else:
            moves += highest - value
    return moves


def max_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous subarray."""
    best: int | None = None
    running = 0
    for value in values:
        running += value
        if best is None or running > best:
            best = running
        if running < 0:
            running = 0
    if best is None:
        raise ValueError("at least one value is required")
    return best


def missing_number(n: int, numbers: Iterable[int]) -> int:
    """Return the one number of 1..n that ``numbers`` lacks."""
    return n * (n + 1) // 2 - sum(numbers)


def beautiful_permutation(n: int) -> list[int] | None:
    """Return a permutation of 1..n with no adjacent values differing by one.

    Returns ``None`` when no such permutation exists.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    if n in (2, 3):
        return None
    return list(range(n - 1, 0, -2)) + list(range(n, 0, -2))


def longest_repetition(text: str) -> int:
    """Return the length of the longest run of one repeated character."""
    return max((sum(1 for _ in run) for _, run in groupby(text)), default=0)


def weird_algorithm(n: int) -> list[int]:
    """Return the halve-or-triple-plus-one sequence from ``n`` down to 1."""
    if n < 1:
        raise ValueError("n must be positive")
    steps = []
    while n != 1:
        steps.append(n)
        n = n // 2 if n % 2 == 0 else 3 * n + 1
    steps.append(1)
    return steps