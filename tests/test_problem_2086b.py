import io

import pytest

from cfsolve.problem_2086b import count_positions, main


def test_worked_example():
    assert count_positions([3, 4, 2, 1, 5], 3, 10) == 12


def test_threshold_above_total_gives_zero():
    values = [3, 4, 2, 1, 5]
    assert count_positions(values, 3, sum(values) * 3 + 1) == 0


@pytest.mark.parametrize("values,k", [([3, 4, 2, 1, 5], 3), ([1, 1, 1], 4), ([7], 5), ([2, 9, 1], 2)])
def test_count_does_not_grow_with_threshold(values, k):
    total = sum(values) * k
    counts = [count_positions(values, k, x) for x in range(1, total + 2)]
    assert all(a >= b for a, b in zip(counts, counts[1:]))


@pytest.mark.parametrize("values,k", [([3, 4, 2, 1, 5], 3), ([1, 1, 1], 4), ([2, 9, 1], 2)])
def test_count_bounded_by_length(values, k):
    for x in range(1, sum(values) * k + 1):
        result = count_positions(values, k, x)
        assert 1 <= result <= len(values) * k


def test_main_prints_counts(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n5 3 10\n3 4 2 1 5\n3 4 5\n1 1 1\n"))
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        str(count_positions([3, 4, 2, 1, 5], 3, 10)),
        str(count_positions([1, 1, 1], 4, 5)),
    ]