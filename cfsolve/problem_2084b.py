"""Decide whether the gcd of the other multiples of the minimum equals the minimum."""

import math
from collections.abc import Sequence

from .problem_2078b import _ints, _run, _verdict


def can_reach(values: Sequence[int]) -> bool:
    """Return True when the multiples of the minimum, other than the minimum itself, have gcd equal to it.

    The minimum excluded is its last occurrence in ``values``.
    """
    if not values:
        raise ValueError("values must not be empty")
    smallest = min(values)
    skip = len(values) - 1 - list(reversed(values)).index(smallest)
    g = math.gcd(
        *(v for i, v in enumerate(values) if i != skip and v % smallest == 0)
    )
    return g == smallest


def main(argv: Sequence[str] | None = None) -> int:
    """Read test cases from standard input and print Yes or No for each."""
    return _run(
        argv,
        "Answer Yes or No for each array.",
        lambda tokens: _ints(tokens, int(next(tokens))),
        lambda values: _verdict(can_reach(values), "Yes", "No"),
    )