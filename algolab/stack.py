"""Fixed-capacity stack."""

from __future__ import annotations

import argparse
from typing import Any

MAX_SIZE = 100


class StackOverflowError(IndexError):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(IndexError):
    """Raised when popping or peeking an empty stack."""


class ArrayStack:
    """LIFO stack holding at most ``capacity`` values."""

    def __init__(self, capacity: int = MAX_SIZE) -> None:
        if capacity < 0:
            raise ValueError("capacity cannot be negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        if len(self._items) >= self.capacity:
            raise StackOverflowError("Stack Overflow")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise StackUnderflowError("Stack Underflow")
        return self._items.pop()

    def top(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise StackUnderflowError("Stack is Empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


def main(argv: list[str] | None = None) -> int:
    """Push a few values, then pop an empty stack and report each underflow."""
    parser = argparse.ArgumentParser(description="Exercise a fixed-size stack.")
    parser.parse_args(argv)
    filled = ArrayStack()
    for value in (4, 8, 12, 16):
        filled.push(value)
    empty = ArrayStack()
    for _ in range(4):
        try:
            empty.pop()
        except StackUnderflowError as exc:
            print(exc)
    return 0