import io

import pytest

from cfsolve.problem_2094d import could_be_typed, main


@pytest.mark.parametrize("p", ["L", "R", "LR", "LLRRL", "RRRLLLR"])
def test_identical_strings_match(p):
    assert could_be_typed(p, p) is True


@pytest.mark.parametrize("p", ["L", "LR", "LLRRL", "RRRLLLR"])
def test_every_character_doubled_matches(p):
    doubled = "".join(c * 2 for c in p)
    assert could_be_typed(p, doubled) is True


@pytest.mark.parametrize("p", ["L", "LR", "LLRRL"])
def test_tripled_string_does_not_match(p):
    tripled = "".join(c * 3 for c in p)
    assert could_be_typed(p, tripled) is False


def test_shorter_run_does_not_match():
    assert could_be_typed("LLR", "LR") is False


def test_different_letters_do_not_match():
    assert could_be_typed("LR", "RL") is False


def test_different_run_counts_do_not_match():
    assert could_be_typed("LRL", "LR") is False


def test_main_prints_one_answer_per_case(monkeypatch, capsys):
    cases = [("LR", "LLR"), ("LR", "LLLR"), ("LLRR", "LLLRRRR"), ("R", "L")]
    text = f"{len(cases)}\n" + "\n".join(f"{p}\n{s}" for p, s in cases) + "\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["YES" if could_be_typed(p, s) else "NO" for p, s in cases]