"""Command line front end that solves problems read from standard input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator, Sequence

from algokit.graphs import subordinate_counts
from algokit.sequences import beautiful_permutation
from algokit.sorting_problems import count_apartments, find_two_values


class _InputError(ValueError):
    """Raised when the input does not hold what the problem expects."""


class _Tokens:
    """Integers read one after another from whitespace-separated text."""

    def __init__(self, text: str) -> None:
        self._words: Iterator[str] = iter(text.split())

    def take(self, count: int = 1) -> list[int]:
        values = []
        for _ in range(count):
            word = next(self._words, None)
            if word is None:
                raise _InputError("not enough numbers in input")
            try:
                values.append(int(word))
            except ValueError:
                raise _InputError(f"not a number: {word!r}") from None
        return values

    def one(self) -> int:
        return self.take(1)[0]


def _apartments(tokens: _Tokens) -> str:
    applicants, apartments, difference = tokens.take(3)
    wanted = tokens.take(applicants)
    sizes = tokens.take(apartments)
    return str(count_apartments(wanted, sizes, difference))


def _permutation(tokens: _Tokens) -> str:
    permutation = beautiful_permutation(tokens.one())
    if permutation is None:
        return "NO SOLUTION"
    return " ".join(map(str, permutation))


def _two_values(tokens: _Tokens) -> str:
    count, target = tokens.take(2)
    pair = find_two_values(tokens.take(count), target)
    if pair is None:
        return "IMPOSSIBLE"
    return f"{pair[0]} {pair[1]}"


def _subordinates(tokens: _Tokens) -> str:
    count = tokens.one()
    bosses = tokens.take(max(count - 1, 0))
    return " ".join(map(str, subordinate_counts(count, bosses)))


_SOLVERS: dict[str, Callable[[_Tokens], str]] = {
    "apartments": _apartments,
    "permutation": _permutation,
    "two-values": _two_values,
    "subordinates": _subordinates,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the named problem for the input on standard input."""
    parser = argparse.ArgumentParser(
        prog="algokit", description="Solve a problem read from standard input."
    )
    parser.add_argument("problem", choices=sorted(_SOLVERS))
    args = parser.parse_args(argv)
    try:
        answer = _SOLVERS[args.problem](_Tokens(sys.stdin.read()))
    except ValueError as error:
        print(f"algokit: {error}", file=sys.stderr)
        return 2
    print(answer)
    return 0