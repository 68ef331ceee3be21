"""In-place quicksort with Lomuto partitioning and a timed random run."""

from __future__ import annotations

import argparse
import random
import sys
import time
from collections.abc import MutableSequence

RAND_MAX = 2**31 - 1


def partition(items: MutableSequence, low: int, high: int) -> int:
    """Partition ``items[low:high + 1]`` around ``items[high]``; return its final index."""
    pivot = items[high]
    boundary = low - 1
    for current in range(low, high):
        if items[current] <= pivot:
            boundary += 1
            items[boundary], items[current] = items[current], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def quicksort(items: MutableSequence, low: int = 0, high: int | None = None) -> None:
    """Sort ``items[low:high + 1]`` in place (the whole sequence by default)."""
    if high is None:
        high = len(items) - 1
    while low < high:
        pivot_index = partition(items, low, high)
        # Recurse on the smaller side to keep the stack shallow.
        if pivot_index - low < high - pivot_index:
            quicksort(items, low, pivot_index - 1)
            low = pivot_index + 1
        else:
            quicksort(items, pivot_index + 1, high)
            high = pivot_index - 1


def timed_random_sort(size: int, seed: int | None = None) -> tuple[list[int], float]:
    """Sort ``size`` random integers; return them with the CPU seconds taken."""
    if size < 0:
        raise ValueError("size cannot be negative")
    rng = random.Random(seed)
    items = [rng.randint(0, RAND_MAX) for _ in range(size)]
    start = time.process_time()
    quicksort(items)
    elapsed = time.process_time() - start
    return items, elapsed


def main(argv: list[str] | None = None) -> int:
    """Read an array size, sort that many random numbers and report the time."""
    parser = argparse.ArgumentParser(description="Time quicksort on random data.")
    parser.parse_args(argv)
    print("Enter the size of the array: ", end="")
    tokens = sys.stdin.read().split()
    try:
        if not tokens:
            raise ValueError("no array size given")
        _, elapsed = timed_random_sort(int(tokens[0]))
    except ValueError as exc:
        print()
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(f"Execution time: {elapsed:.6g} seconds")
    return 0