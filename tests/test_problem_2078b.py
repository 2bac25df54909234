import io

import pytest

from cfsolve.problem_2078b import arrange, main


@pytest.mark.parametrize("n,k", [(1, 1), (1, 2), (3, 1), (4, 2), (5, 7), (6, 10)])
def test_length_matches_n(n, k):
    assert len(arrange(n, k)) == n


@pytest.mark.parametrize("n,k", [(2, 1), (3, 3), (7, 5)])
def test_odd_k_layout(n, k):
    result = arrange(n, k)
    assert result[:-1] == [n] * (n - 1)
    assert result[-1] == n - 1


@pytest.mark.parametrize("n,k", [(2, 2), (3, 4), (7, 6)])
def test_even_k_layout(n, k):
    result = arrange(n, k)
    assert result[-2] == n
    assert result[:-2] + result[-1:] == [n - 1] * (n - 1)


def test_values_come_from_n_and_n_minus_one():
    for n in range(1, 8):
        for k in range(1, 5):
            assert set(arrange(n, k)) <= {n, n - 1}


def test_main_prints_each_case(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n3 1\n4 2\n"))
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        " ".join(map(str, arrange(3, 1))),
        " ".join(map(str, arrange(4, 2))),
    ]