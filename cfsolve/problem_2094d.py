"""Decide whether a string of L and R presses could have produced the heard sounds."""

from collections.abc import Sequence
from itertools import groupby

from .problem_2078b import _run, _verdict


def _runs(text: str) -> list[tuple[str, int]]:
    return [(char, sum(1 for _ in group)) for char, group in groupby(text)]


def could_be_typed(p: str, s: str) -> bool:
    """Return True when each run in ``p`` appears in ``s`` between one and two times as long."""
    pressed = _runs(p)
    heard = _runs(s)
    if len(pressed) != len(heard):
        return False
    return all(
        c1 == c2 and n1 <= n2 <= 2 * n1
        for (c1, n1), (c2, n2) in zip(pressed, heard)
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Read test cases from standard input and print YES or NO for each."""
    return _run(
        argv,
        "Answer YES or NO for each pair of strings.",
        lambda tokens: (next(tokens), next(tokens)),
        lambda case: _verdict(could_be_typed(*case)),
    )