"""Flow network with paired residual edges and Edmonds-Karp maximum flow."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass
class Edge:
    """A directed edge carrying ``flow`` out of ``capacity``."""

    source: int
    target: int
    capacity: int
    flow: int = 0

    @property
    def residual(self) -> int:
        """Capacity still available on this edge."""
        return self.capacity - self.flow


class FlowGraph:
    """Directed network whose edges are stored in forward/backward pairs.

    Every call to :meth:`add_edge` appends the forward edge at an even id and
    its zero-capacity reverse at the following odd id, so ``edge_id ^ 1``
    always names the partner edge.
    """

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count cannot be negative")
        self._edges: list[Edge] = []
        self._adjacency: list[list[int]] = [[] for _ in range(vertex_count)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacency):
            raise IndexError(
                f"vertex {vertex} is outside 0..{len(self._adjacency) - 1}"
            )

    def add_edge(self, source: int, target: int, capacity: int) -> int:
        """Add an edge and its residual partner; return the forward edge's id."""
        self._check(source)
        self._check(target)
        forward_id = len(self._edges)
        self._adjacency[source].append(forward_id)
        self._edges.append(Edge(source, target, capacity))
        self._adjacency[target].append(forward_id + 1)
        self._edges.append(Edge(target, source, 0))
        return forward_id

    def __len__(self) -> int:
        return len(self._adjacency)

    def edge_ids(self, vertex: int) -> tuple[int, ...]:
        """Return the ids of the edges leaving ``vertex``, residual ones included."""
        self._check(vertex)
        return tuple(self._adjacency[vertex])

    def edge(self, edge_id: int) -> Edge:
        """Return the edge with id ``edge_id``."""
        return self._edges[edge_id]

    def add_flow(self, edge_id: int, flow: int) -> None:
        """Push ``flow`` along an edge and take it off the partner edge."""
        self._edges[edge_id].flow += flow
        self._edges[edge_id ^ 1].flow -= flow

    def outgoing(self, vertex: int) -> Iterator[Edge]:
        """Yield the edges leaving ``vertex``, residual ones included."""
        for edge_id in self.edge_ids(vertex):
            yield self._edges[edge_id]


def _augmenting_path(graph: FlowGraph, source: int, sink: int) -> list[int] | None:
    """Return edge ids of a shortest path with spare capacity, sink first."""
    predecessor: dict[int, int] = {}
    queue = deque([source])
    while queue and sink not in predecessor:
        current = queue.popleft()
        for edge_id in graph.edge_ids(current):
            edge = graph.edge(edge_id)
            if (
                edge.target not in predecessor
                and edge.residual > 0
                and edge.target != source
            ):
                predecessor[edge.target] = edge_id
                queue.append(edge.target)
    if sink not in predecessor:
        return None
    path = []
    vertex = sink
    while vertex in predecessor:
        edge_id = predecessor[vertex]
        path.append(edge_id)
        vertex = graph.edge(edge_id).source
    return path


def max_flow(graph: FlowGraph, source: int, sink: int) -> int:
    """Saturate ``graph`` from ``source`` to ``sink`` and return the flow value."""
    if not 0 <= source < len(graph) or not 0 <= sink < len(graph):
        raise IndexError("source or sink is not a vertex of the graph")
    total = 0
    while (path := _augmenting_path(graph, source, sink)) is not None:
        bottleneck = min(graph.edge(edge_id).residual for edge_id in path)
        for edge_id in path:
            graph.add_flow(edge_id, bottleneck)
        total += bottleneck
    return total