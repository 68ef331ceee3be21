"""Maximum number of people that can be moved from the first city to the last."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable

from algolab.flow import FlowGraph, max_flow


def evacuation_flow(vertex_count: int, roads: Iterable[tuple[int, int, int]]) -> int:
    """Return the maximum flow from city 1 to city ``vertex_count``.

    ``roads`` holds ``(from, to, capacity)`` with cities numbered from 1.
    """
    if vertex_count < 1:
        raise ValueError("there must be at least one city")
    graph = FlowGraph(vertex_count)
    for start, end, capacity in roads:
        if not (1 <= start <= vertex_count and 1 <= end <= vertex_count):
            raise ValueError(f"road {start} -> {end} names an unknown city")
        graph.add_edge(start - 1, end - 1, capacity)
    return max_flow(graph, 0, vertex_count - 1)


def parse_input(text: str) -> tuple[int, list[tuple[int, int, int]]]:
    """Parse ``n m`` followed by ``m`` lines of ``from to capacity``."""
    numbers = [int(token) for token in text.split()]
    if len(numbers) < 2:
        raise ValueError("expected the number of cities and roads")
    vertex_count, road_count, *rest = numbers
    if road_count < 0:
        raise ValueError("the number of roads cannot be negative")
    if len(rest) < 3 * road_count:
        raise ValueError(f"expected {road_count} roads")
    fields = iter(rest[: 3 * road_count])
    roads = [(u, v, c) for u, v, c in zip(fields, fields, fields)]
    return vertex_count, roads


def main(argv: list[str] | None = None) -> int:
    """Read a road network from standard input and print its maximum flow."""
    parser = argparse.ArgumentParser(
        description="Maximum flow from the first to the last city."
    )
    parser.parse_args(argv)
    try:
        vertex_count, roads = parse_input(sys.stdin.read())
        result = evacuation_flow(vertex_count, roads)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(result)
    return 0