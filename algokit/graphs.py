"""Grid and tree traversal problems."""

from __future__ import annotations

from collections.abc import Iterable


def count_rooms(grid: Iterable[str]) -> int:
    """Return the number of rooms in a map of ``.`` floor and ``#`` wall cells.

    Cells beyond the end of a short row count as wall.
    """
    floor = {
        (y, x)
        for y, row in enumerate(grid)
        for x, cell in enumerate(row.rstrip("\n"))
        if cell == "."
    }
    rooms = 0
    while floor:
        rooms += 1
        stack = [floor.pop()]
        while stack:
            y, x = stack.pop()
            for neighbour in ((y + 1, x), (y - 1, x), (y, x + 1), (y, x - 1)):
                if neighbour in floor:
                    floor.remove(neighbour)
                    stack.append(neighbour)
    return rooms


def subordinate_counts(n: int, bosses: Iterable[int]) -> list[int]:
    """Return, for employees 1..n, how many subordinates each one has.

    ``bosses`` holds the direct boss of employees 2..n in order; employee 1
    is the general director.
    """
    if n < 1:
        raise ValueError("there must be at least one employee")
    boss_list = list(bosses)
    if len(boss_list) != n - 1:
        raise ValueError(f"expected {n - 1} bosses, got {len(boss_list)}")
    children: list[list[int]] = [[] for _ in range(n + 1)]
    for employee, boss in enumerate(boss_list, start=2):
        if not 1 <= boss <= n:
            raise ValueError(f"boss {boss} of employee {employee} is out of range")
        children[boss].append(employee)

    order = []
    stack = [1]
    while stack:
        node = stack.pop()
        order.append(node)
        stack.extend(children[node])

    counts = [0] * (n + 1)
    for node in reversed(order):
        counts[node] = sum(counts[child] + 1 for child in children[node])
    return counts[1:]