"""In-place heap sort built on a max-heap."""

from __future__ import annotations

import argparse
import itertools
import sys
from collections.abc import Iterator, MutableSequence, Sequence


def heapify(items: MutableSequence, size: int, root: int) -> None:
    """Sift ``items[root]`` down so the subtree at ``root`` within ``size`` is a max-heap."""
    while True:
        largest = root
        left = 2 * root + 1
        right = left + 1
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(items: MutableSequence) -> None:
    """Sort ``items`` in ascending order in place."""
    size = len(items)
    for root in range(size // 2 - 1, -1, -1):
        heapify(items, size, root)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        heapify(items, end, 0)


def _format(items: Sequence) -> str:
    return "".join(f"{value} " for value in items)


def _take_ints(tokens: Iterator[str], count: int) -> list[int]:
    chunk = list(itertools.islice(tokens, count))
    if len(chunk) < count:
        raise ValueError(f"expected {count} numbers, got {len(chunk)}")
    return [int(token) for token in chunk]


def main(argv: list[str] | None = None) -> int:
    """Read a size and that many integers, then print them before and after sorting."""
    parser = argparse.ArgumentParser(description="Heap sort integers.")
    parser.parse_args(argv)
    tokens = iter(sys.stdin.read().split())
    print("Enter the size of the array: ", end="")
    try:
        (size,) = _take_ints(tokens, 1)
        if size < 0:
            raise ValueError("the size cannot be negative")
        print(f"Enter {size} numbers: ", end="")
        items = _take_ints(tokens, size)
    except ValueError as exc:
        print()
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print("Input array")
    print(_format(items))
    heap_sort(items)
    print("Sorted array")
    print(_format(items))
    return 0