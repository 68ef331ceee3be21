"""Unbalanced binary search tree driven by a stream of insert/delete operations."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

INSERT = 1
DELETE = 2
STOP = -1


class _InvalidOperator(ValueError):
    """An operation code other than insert, delete or stop."""


@dataclass
class _Node:
    key: int
    left: _Node | None = None
    right: _Node | None = None


class BinarySearchTree:
    """Binary search tree that keeps duplicate keys in the left subtree."""

    def __init__(self, keys: Iterable[int] = ()) -> None:
        self._root: _Node | None = None
        for key in keys:
            self.insert(key)

    def insert(self, key: int) -> None:
        """Add ``key``; keys equal to a node's key go to its left."""
        new_node = _Node(key)
        if self._root is None:
            self._root = new_node
            return
        node = self._root
        while True:
            if key <= node.key:
                if node.left is None:
                    node.left = new_node
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new_node
                    return
                node = node.right

    def delete(self, key: int) -> bool:
        """Remove one occurrence of ``key``; return whether one was found."""
        return self._delete_below(None, "left", key)

    def inorder(self) -> list[int]:
        """Return the keys in ascending order."""
        return list(self)

    def __iter__(self) -> Iterator[int]:
        pending: list[_Node] = []
        node = self._root
        while pending or node is not None:
            while node is not None:
                pending.append(node)
                node = node.left
            node = pending.pop()
            yield node.key
            node = node.right

    def _link(self, parent: _Node | None, side: str) -> _Node | None:
        return self._root if parent is None else getattr(parent, side)

    def _relink(self, parent: _Node | None, side: str, node: _Node | None) -> None:
        if parent is None:
            self._root = node
        else:
            setattr(parent, side, node)

    def _delete_below(self, parent: _Node | None, side: str, key: int) -> bool:
        node = self._link(parent, side)
        while node is not None and node.key != key:
            parent, side = node, ("left" if key < node.key else "right")
            node = getattr(node, side)
        if node is None:
            return False
        if node.left is None:
            self._relink(parent, side, node.right)
        elif node.right is None:
            self._relink(parent, side, node.left)
        else:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.key = successor.key
            self._delete_below(node, "right", successor.key)
        return True


def run_operations(tokens: Iterable[str | int]) -> BinarySearchTree:
    """Apply ``1 key`` (insert) and ``2 key`` (delete) operations until ``-1``."""
    stream = iter(tokens)
    tree = BinarySearchTree()

    def next_int(what: str) -> int:
        try:
            return int(next(stream))
        except StopIteration:
            raise ValueError(f"input ended while reading {what}") from None

    operation = next_int("an operation")
    while operation != STOP:
        if operation == INSERT:
            tree.insert(next_int("an operand"))
        elif operation == DELETE:
            tree.delete(next_int("an operand"))
        else:
            raise _InvalidOperator("Invalid Operator!")
        operation = next_int("an operation")
    return tree


def main(argv: list[str] | None = None) -> int:
    """Read operations from standard input and print the keys in order."""
    parser = argparse.ArgumentParser(
        description="Insert (1 key) and delete (2 key) keys, -1 to finish."
    )
    parser.parse_args(argv)
    try:
        tree = run_operations(sys.stdin.read().split())
    except _InvalidOperator as exc:
        print(exc)
        return 0
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write("".join(f"{key} " for key in tree))
    return 0