"""A red-black tree set of integers."""

from __future__ import annotations

import argparse
import random
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum


class Color(Enum):
    """Colour of a red-black tree node."""

    RED = "red"
    BLACK = "black"


@dataclass(eq=False)
class Node:
    """A tree node; links are managed by :class:`RedBlackTree`."""

    value: int
    color: Color = Color.RED
    left: Node | None = None
    right: Node | None = None
    parent: Node | None = field(default=None, repr=False)


class RedBlackTree:
    """A set of distinct integers kept in a balanced red-black tree."""

    def __init__(self) -> None:
        self.root: Node | None = None
        self._size = 0

    def insert(self, value: int) -> Node | None:
        """Add ``value`` and return its new node, or ``None`` if already present."""
        parent: Node | None = None
        current = self.root
        while current is not None:
            if value == current.value:
                return None
            parent = current
            current = current.left if value < current.value else current.right

        node = Node(value, parent=parent)
        if parent is None:
            self.root = node
        elif value < parent.value:
            parent.left = node
        else:
            parent.right = node
        self._size += 1
        self._fix(node)
        return node

    def __contains__(self, value: object) -> bool:
        node = self.root
        while node is not None:
            if node.value == value:
                return True
            node = node.right if node.value < value else node.left  # type: ignore[operator]
        return False

    def __iter__(self) -> Iterator[int]:
        stack: list[Node] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def __len__(self) -> int:
        return self._size

    def _replace_child(self, old: Node, new: Node) -> None:
        parent = old.parent
        new.parent = parent
        if parent is None:
            self.root = new
        elif parent.right is old:
            parent.right = new
        else:
            parent.left = new

    def _rotate_right(self, node: Node) -> None:
        pivot = node.left
        assert pivot is not None
        node.left = pivot.right
        if pivot.right is not None:
            pivot.right.parent = node
        self._replace_child(node, pivot)
        pivot.right = node
        node.parent = pivot

    def _rotate_left(self, node: Node) -> None:
        pivot = node.right
        assert pivot is not None
        node.right = pivot.left
        if pivot.left is not None:
            pivot.left.parent = node
        self._replace_child(node, pivot)
        pivot.left = node
        node.parent = pivot

    def _fix(self, node: Node) -> None:
        while (
            node is not self.root
            and node.parent is not None
            and node.parent.color is Color.RED
        ):
            parent = node.parent
            grandparent = parent.parent
            assert grandparent is not None
            if grandparent.left is parent:
                uncle = grandparent.right
                if uncle is not None and uncle.color is Color.RED:
                    parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grandparent.color = Color.RED
                    node = grandparent
                    continue
                if node is parent.right:
                    node = parent
                    self._rotate_left(node)
                    parent = node.parent
                    assert parent is not None
                grandparent.color = Color.RED
                parent.color = Color.BLACK
                self._rotate_right(grandparent)
            else:
                uncle = grandparent.left
                if uncle is not None and uncle.color is Color.RED:
                    parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grandparent.color = Color.RED
                    node = grandparent
                    continue
                if node is parent.left:
                    node = parent
                    self._rotate_right(node)
                    parent = node.parent
                    assert parent is not None
                grandparent.color = Color.RED
                parent.color = Color.BLACK
                self._rotate_left(grandparent)
        assert self.root is not None
        self.root.color = Color.BLACK


def main(argv: Sequence[str] | None = None) -> int:
    """Insert random values into a tree and print them in order."""
    parser = argparse.ArgumentParser(
        prog="rbtree", description="Fill a red-black tree with random values."
    )
    parser.add_argument("--count", type=int, default=100, help="values to draw")
    parser.add_argument(
        "--limit", type=int, default=1000, help="values are drawn below this"
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    if args.count < 0:
        parser.error("--count must not be negative")
    if args.limit < 1:
        parser.error("--limit must be positive")

    rng = random.Random(args.seed)
    tree = RedBlackTree()
    for _ in range(args.count):
        tree.insert(rng.randrange(args.limit))
    for value in tree:
        print(value)
    return 0