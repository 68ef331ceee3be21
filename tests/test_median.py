import io
import random
import statistics

import pytest

from algolab.median import main, median


def test_odd_length():
    assert median([5, 1, 3]) == 3.0


def test_single_value():
    assert median([42]) == 42.0


@pytest.mark.parametrize("seed", range(6))
def test_matches_statistics(seed):
    rng = random.Random(seed)
    values = [rng.randint(-1000, 1000) for _ in range(rng.randint(1, 40))]
    assert median(values) == pytest.approx(statistics.median(values))


def test_even_length_averages_middle():
    values = [10, 2, 8, 4]
    assert median(values) == (4 + 8) / 2


def test_input_not_mutated():
    values = [3, 1, 2]
    median(values)
    assert values == [3, 1, 2]


def test_empty_raises():
    with pytest.raises(ValueError):
        median([])


def test_main_output(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4\n4 1 3 2\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith(
        "Enter the number of elements in the array: Enter the elements of the array: "
    )
    assert "1 \n2 \n3 \n4 \n" in out
    assert out.endswith("median is 2.5\n")


def test_main_two_significant_digits(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n100 200 300\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.endswith("median is 2e+02\n")


def test_main_missing_numbers(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n1 2\n"))
    assert main([]) == 1
    assert "median is" not in capsys.readouterr().out


def test_main_zero_elements(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n"))
    assert main([]) == 1
    assert "error" in capsys.readouterr().err