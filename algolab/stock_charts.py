"""Fewest overlaid charts for stock price series, via minimum path cover."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from algolab.flow import FlowGraph, max_flow

MAX_STOCKS = 1000
MAX_POINTS = 1000


def _strictly_below(lower: Sequence[int], upper: Sequence[int]) -> bool:
    return all(a < b for a, b in zip(lower, upper))


def build_chart_graph(prices: Sequence[Sequence[int]]) -> FlowGraph:
    """Build the bipartite network linking each stock to the stocks above it."""
    stocks = len(prices)
    sink = 2 * stocks + 1
    graph = FlowGraph(2 * stocks + 2)
    for stock in range(1, stocks + 1):
        graph.add_edge(0, stock, 1)
    for i, lower in enumerate(prices):
        for j, upper in enumerate(prices):
            if i != j and _strictly_below(lower, upper):
                graph.add_edge(i + 1, stocks + j + 1, 1)
    for stock in range(stocks + 1, 2 * stocks + 1):
        graph.add_edge(stock, sink, 1)
    return graph


def min_overlaid_charts(prices: Sequence[Sequence[int]]) -> int:
    """Return the fewest charts on which every stock fits without lines touching."""
    if not prices or not prices[0]:
        return 0
    if any(len(row) != len(prices[0]) for row in prices):
        raise ValueError("every stock needs the same number of points")
    graph = build_chart_graph(prices)
    max_flow(graph, 0, len(graph) - 1)
    matched = sum(
        any(edge.flow > 0 for edge in graph.outgoing(stock))
        for stock in range(1, len(prices) + 1)
    )
    return len(prices) - matched


def parse_input(text: str) -> list[list[int]]:
    """Parse ``stocks points`` followed by each stock's prices."""
    numbers = [int(token) for token in text.split()]
    if len(numbers) < 2:
        raise ValueError("expected the number of stocks and points")
    stocks, points, *values = numbers
    if stocks < 0 or points < 0:
        raise ValueError("counts cannot be negative")
    if stocks == 0 or points == 0:
        return [[] for _ in range(stocks)]
    if stocks > MAX_STOCKS or points > MAX_POINTS:
        raise ValueError("Number of stocks or points exceeds limit.")
    if len(values) < stocks * points:
        raise ValueError(f"expected {stocks * points} prices")
    return [values[row * points:(row + 1) * points] for row in range(stocks)]


def main(argv: list[str] | None = None) -> int:
    """Read stock prices from standard input and print the fewest charts needed."""
    parser = argparse.ArgumentParser(description="Fewest overlaid stock charts.")
    parser.parse_args(argv)
    try:
        result = min_overlaid_charts(parse_input(sys.stdin.read()))
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(result)
    return 0