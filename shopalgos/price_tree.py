"""Binary search tree of prices with range queries."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass
class Node:
    """A tree node; smaller or equal values go left, larger go right."""

    val: int
    left: Node | None = None
    right: Node | None = None

    def insert(self, value: int) -> None:
        """Insert ``value`` below this node."""
        node = self
        while True:
            if value > node.val:
                if node.right is None:
                    node.right = Node(value)
                    return
                node = node.right
            else:
                if node.left is None:
                    node.left = Node(value)
                    return
                node = node.left


def build_tree(prices: Iterable[int]) -> Node:
    """Build a tree from ``prices``; the first price becomes the root."""
    it = iter(prices)
    try:
        root = Node(next(it))
    except StopIteration:
        raise ValueError("cannot build a tree from no prices") from None
    for price in it:
        root.insert(price)
    return root


def products_in_range(root: Node | None, low: int, high: int) -> list[int]:
    """Return the values in [low, high] in pre-order, skipping subtrees out of range."""
    result = []
    pending = [root] if root is not None else []
    while pending:
        node = pending.pop()
        if low <= node.val <= high:
            result.append(node.val)
        if node.val <= high and node.right is not None:
            pending.append(node.right)
        if node.val >= low and node.left is not None:
            pending.append(node.left)
    return result