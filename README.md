# algokit

A small collection of classic algorithm problems solved as ordinary Python
functions, plus a red-black tree set of integers. No third-party
dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library

### `algokit.sorting_problems`

Greedy and two-pointer problems that start by sorting their input.

| Function | Returns |
| --- | --- |
| `count_apartments(applicants, apartments, max_difference)` | How many applicants get an apartment whose size is within `max_difference` of what they want |
| `count_distinct(numbers)` | How many distinct values appear |
| `count_gondolas(weights, max_weight)` | Fewest gondolas, each holding one or two children of total weight at most `max_weight` |
| `smallest_missing_sum(coins)` | Smallest positive sum no subset of the coins makes |
| `max_movies(movies)` | Most non-overlapping `(start, end)` movies one can watch |
| `max_customers(intervals)` | Largest number of `(arrival, departure)` customers present at once; a departure at the same moment as an arrival counts first |
| `min_stick_cost(lengths)` | Least total change to make all sticks the same length (raises `ValueError` for no sticks) |
| `find_two_values(values, target)` | A pair of 1-based positions whose values add up to `target`, or `None` |

```python
from algokit.sorting_problems import count_apartments, count_gondolas

count_apartments([60, 45, 80, 60], [30, 60, 75], 5)   # 2
count_gondolas([7, 2, 3, 9], 10)                       # 3
```

### `algokit.sequences`

Problems over a single sequence or number.

| Function | Returns |
| --- | --- |
| `collecting_rounds(permutation)` | Rounds needed to collect 1..n in order (raises `ValueError` if the input is not a permutation of 1..n) |
| `dice_combinations(n)` | Ways to reach sum `n` with ordered dice throws, modulo 10^9+7 |
| `increasing_array_moves(values)` | Total increase needed to make the values non-decreasing |
| `max_subarray_sum(values)` | Largest sum of a non-empty contiguous subarray (raises `ValueError` when empty) |
| `missing_number(n, numbers)` | The one number of 1..n that `numbers` lacks |
| `beautiful_permutation(n)` | A permutation of 1..n with no adjacent values differing by one, or `None` for n = 2 and n = 3 |
| `longest_repetition(text)` | Length of the longest run of one repeated character (0 for empty text) |
| `weird_algorithm(n)` | The halve-or-triple-plus-one sequence from `n` down to 1 |

```python
from algokit.sequences import dice_combinations, max_subarray_sum

dice_combinations(3)                                # 4
max_subarray_sum([-1, 3, -2, 5, 3, -5, 2, 2])       # 9
```

### `algokit.graphs`

| Function | Returns |
| --- | --- |
| `count_rooms(grid)` | Number of connected floor regions (`.`) in a map of wall cells (`#`); cells past the end of a short row count as wall |
| `subordinate_counts(n, bosses)` | For employees 1..n, how many subordinates each has; `bosses` lists the direct boss of employees 2..n |

```python
from algokit.graphs import count_rooms, subordinate_counts

count_rooms([
    "#####",
    "#..##",
    "###.#",
])                                                  # 2
subordinate_counts(5, [1, 1, 2, 3])                 # [4, 1, 1, 0, 0]
```

### `algokit.rbtree`

`RedBlackTree` is a self-balancing binary search tree holding distinct
integers. `insert(value)` returns the new `Node`, or `None` if the value is
already present. The tree supports `in`, `len()` and iteration in ascending
order.

```python
from algokit.rbtree import RedBlackTree

tree = RedBlackTree()
for value in (5, 1, 9, 1, 3):
    tree.insert(value)

3 in tree        # True
len(tree)        # 4
list(tree)       # [1, 3, 5, 9]
```

Nodes are `Node` objects coloured with the `Color` enum (`Color.RED`,
`Color.BLACK`); the root is available as `tree.root`.

## Commands

```
algokit PROBLEM < input.txt
```

reads whitespace-separated integers from standard input in the usual contest
format and prints the answer. `PROBLEM` is one of:

- `apartments`: `n m k`, then `n` desired sizes, then `m` apartment sizes;
  prints the number of matches.
- `permutation`: `n`; prints the permutation, or `NO SOLUTION`.
- `two-values`: `n x`, then `n` values; prints two 1-based positions, or
  `IMPOSSIBLE`.
- `subordinates`: `n`, then the bosses of employees 2..n; prints each
  employee's subordinate count.

Malformed input is reported on standard error with exit status 2.

```
algokit-rbtree-demo [--count N] [--limit L] [--seed S]
```

inserts `N` random values below `L` (defaults 100 and 1000) into a
red-black tree and prints the distinct values in order, one per line.
`--seed` makes the run repeatable.

## Limitations

- `RedBlackTree` has no removal; values can only be added.
- Only the four problems listed above are available from the `algokit`
  command; the other functions are used from Python.