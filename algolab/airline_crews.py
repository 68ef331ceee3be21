"""Assign crews to flights through a maximum bipartite matching."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from algolab.flow import FlowGraph, max_flow

UNASSIGNED = -1


def _dimensions(matrix: Sequence[Sequence[int]]) -> tuple[int, int]:
    flights = len(matrix)
    crews = len(matrix[0]) if flights else 0
    if any(len(row) != crews for row in matrix):
        raise ValueError("every flight needs one entry per crew")
    return flights, crews


def build_crew_graph(matrix: Sequence[Sequence[int]]) -> FlowGraph:
    """Build the unit-capacity network: source, flights, crews, sink."""
    flights, crews = _dimensions(matrix)
    sink = flights + crews + 1
    graph = FlowGraph(flights + crews + 2)
    for flight in range(1, flights + 1):
        graph.add_edge(0, flight, 1)
    for flight, row in enumerate(matrix, start=1):
        for crew, bit in enumerate(row, start=1):
            if bit == 1:
                graph.add_edge(flight, flights + crew, 1)
    for crew in range(flights + 1, flights + crews + 1):
        graph.add_edge(crew, sink, 1)
    return graph


def assign_crews(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the 1-based crew for each flight, or -1 where none is assigned."""
    flights, _ = _dimensions(matrix)
    graph = build_crew_graph(matrix)
    max_flow(graph, 0, len(graph) - 1)
    return [
        next(
            (edge.target - flights for edge in graph.outgoing(flight) if edge.flow == 1),
            UNASSIGNED,
        )
        for flight in range(1, flights + 1)
    ]


def parse_input(text: str) -> list[list[int]]:
    """Parse ``n m`` followed by an ``n`` by ``m`` matrix of 0/1 entries."""
    numbers = [int(token) for token in text.split()]
    if len(numbers) < 2:
        raise ValueError("expected the number of flights and crews")
    flights, crews, *bits = numbers
    if flights < 0 or crews < 0:
        raise ValueError("counts cannot be negative")
    if len(bits) < flights * crews:
        raise ValueError(f"expected {flights * crews} matrix entries")
    return [bits[row * crews:(row + 1) * crews] for row in range(flights)]


def main(argv: list[str] | None = None) -> int:
    """Read the flight/crew matrix from standard input and print the assignment."""
    parser = argparse.ArgumentParser(description="Assign crews to flights.")
    parser.parse_args(argv)
    try:
        assignment = assign_crews(parse_input(sys.stdin.read()))
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write("".join(f"{crew} " for crew in assignment) + "\n")
    return 0