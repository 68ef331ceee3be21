import io
import itertools
import random

import pytest

from algolab.airline_crews import assign_crews, build_crew_graph, main, parse_input

SAMPLE = "3 4\n1 1 0 1\n0 1 0 0\n0 0 0 0\n"


def _max_matching_size(matrix):
    options = [
        [None] + [j for j, bit in enumerate(row) if bit == 1] for row in matrix
    ]
    best = 0
    for choice in itertools.product(*options):
        chosen = [c for c in choice if c is not None]
        if len(chosen) == len(set(chosen)):
            best = max(best, len(chosen))
    return best


def test_sample_assignment():
    assert assign_crews(parse_input(SAMPLE)) == [1, 2, -1]


def test_parse_input_builds_rows():
    assert parse_input("2 3\n1 0 1\n0 1 0\n") == [[1, 0, 1], [0, 1, 0]]


def test_graph_has_source_flights_crews_and_sink():
    matrix = [[1, 0, 1], [0, 1, 0]]
    graph = build_crew_graph(matrix)
    assert len(graph) == 2 + 3 + 2
    assert [e.target for e in graph.outgoing(0)] == [1, 2]


def test_identity_matrix_matches_everyone():
    matrix = [[int(i == j) for j in range(4)] for i in range(4)]
    assert assign_crews(matrix) == [1, 2, 3, 4]


def test_no_possible_crews():
    assert assign_crews([[0, 0], [0, 0]]) == [-1, -1]


def test_no_flights():
    assert assign_crews([]) == []


@pytest.mark.parametrize("seed", range(10))
def test_assignment_is_valid_and_maximum(seed):
    rng = random.Random(seed)
    matrix = [[rng.randint(0, 1) for _ in range(4)] for _ in range(4)]
    assignment = assign_crews(matrix)
    assert len(assignment) == len(matrix)
    chosen = [crew for crew in assignment if crew != -1]
    assert len(chosen) == len(set(chosen))
    for row, crew in zip(matrix, assignment):
        if crew != -1:
            assert row[crew - 1] == 1
    assert len(chosen) == _max_matching_size(matrix)


def test_ragged_matrix_raises():
    with pytest.raises(ValueError):
        assign_crews([[1, 0], [1]])


def test_truncated_input_raises():
    with pytest.raises(ValueError):
        parse_input("2 2\n1 0 1\n")


def test_main_prints_assignment(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(SAMPLE))
    assert main([]) == 0
    assert capsys.readouterr().out == "1 2 -1 \n"