"""Undirected graph stored as adjacency lists."""

from __future__ import annotations

import argparse
import sys

DEFAULT_SIZE = 8

DEMO_SIZE = 9
DEMO_EDGES = (
    (1, 2),
    (1, 3),
    (1, 5),
    (1, 4),
    (2, 3),
    (2, 6),
    (4, 6),
    (4, 8),
    (4, 7),
    (5, 6),
    (5, 8),
    (5, 7),
)


class Graph:
    """Undirected graph with nodes labelled ``0`` to ``size - 1``."""

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size < 0:
            raise ValueError("size cannot be negative")
        self._adjacency: list[list[int]] = [[] for _ in range(size)]

    @property
    def size(self) -> int:
        return len(self._adjacency)

    def _check(self, node: int) -> None:
        if not 0 <= node < len(self._adjacency):
            raise IndexError(f"node {node} is outside 0..{len(self._adjacency) - 1}")

    def add_edge(self, u: int, v: int) -> None:
        """Connect ``u`` and ``v`` in both directions."""
        self._check(u)
        self._check(v)
        self._adjacency[u].append(v)
        self._adjacency[v].append(u)

    def neighbours(self, node: int) -> tuple[int, ...]:
        """Return the neighbours of ``node`` in the order their edges were added."""
        self._check(node)
        return tuple(self._adjacency[node])

    def format(self) -> str:
        """Return the adjacency list, one ``Nodes : label --> ...`` line per node."""
        return "".join(
            f"Nodes : {label} --> " + "".join(f"{n} " for n in neighbours) + "\n"
            for label, neighbours in enumerate(self._adjacency)
        )

    def __str__(self) -> str:
        return self.format()


def main(argv: list[str] | None = None) -> int:
    """Build the sample graph and print its adjacency list."""
    parser = argparse.ArgumentParser(description="Print a sample adjacency list.")
    parser.parse_args(argv)
    graph = Graph(DEMO_SIZE)
    for u, v in DEMO_EDGES:
        graph.add_edge(u, v)
    sys.stdout.write(graph.format())
    return 0