"""A stack that reports its maximum in constant time."""

from __future__ import annotations


class MaxStack:
    """Stack of integers that tracks the running maximum."""

    def __init__(self) -> None:
        self._items: list[int] = []
        self._maxima: list[int] = []

    def push(self, value: int) -> None:
        """Push ``value`` onto the stack."""
        self._items.append(value)
        if self._maxima and self._maxima[-1] > value:
            self._maxima.append(self._maxima[-1])
        else:
            self._maxima.append(value)

    def pop(self) -> int | None:
        """Remove and return the top value; return None if the stack is empty."""
        if not self._items:
            return None
        self._maxima.pop()
        return self._items.pop()

    def max_value(self) -> int:
        """Return the largest value currently on the stack."""
        if not self._maxima:
            raise IndexError("max_value of empty stack")
        return self._maxima[-1]

    def __len__(self) -> int:
        return len(self._items)