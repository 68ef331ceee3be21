"""Median of a list of integers."""

from __future__ import annotations

import argparse
import itertools
import sys
from collections.abc import Iterable, Iterator


def median(values: Iterable[float]) -> float:
    """Return the middle value, or the mean of the two middle values."""
    ordered = sorted(values)
    if not ordered:
        raise ValueError("median of an empty sequence")
    middle = len(ordered) // 2
    if len(ordered) % 2 == 0:
        return (ordered[middle - 1] + ordered[middle]) / 2.0
    return float(ordered[middle])


def _take_ints(tokens: Iterator[str], count: int) -> list[int]:
    chunk = list(itertools.islice(tokens, count))
    if len(chunk) < count:
        raise ValueError(f"expected {count} numbers, got {len(chunk)}")
    return [int(token) for token in chunk]


def main(argv: list[str] | None = None) -> int:
    """Read a count and that many integers, print them sorted and their median."""
    parser = argparse.ArgumentParser(description="Print the median of integers.")
    parser.parse_args(argv)
    tokens = iter(sys.stdin.read().split())
    print("Enter the number of elements in the array: ", end="")
    try:
        (count,) = _take_ints(tokens, 1)
        if count < 0:
            raise ValueError("the number of elements cannot be negative")
        print("Enter the elements of the array: ", end="")
        values = sorted(_take_ints(tokens, count))
        result = median(values)
    except ValueError as exc:
        print()
        print(f"error: {exc}", file=sys.stderr)
        return 1
    for value in values:
        print(f"{value} ")
    print(f"median is {result:.2g}")
    return 0