"""Decide whether the number formed by writing x k times in a row is prime."""

from collections.abc import Sequence

from .problem_2078b import _ints, _run, _verdict


def is_prime(t: int) -> bool:
    """Return True when t is a prime number, by trial division."""
    if t <= 1:
        return False
    i = 2
    while i * i <= t:
        if t % i == 0:
            return False
        i += 1
    return True


def is_repeated_prime(x: int, k: int) -> bool:
    """Return True when x written k times in a row forms a prime.

    Repeating a number more than once gives a multiple of it, so for k > 1
    only x == 1 can work, and then only the two-digit repunit 11 is prime.
    """
    if k != 1 and x != 1:
        return False
    if k == 1:
        return is_prime(x)
    return k == 2


def main(argv: Sequence[str] | None = None) -> int:
    """Read test cases from standard input and print YES or NO for each."""
    return _run(
        argv,
        "Answer YES or NO for each (x, k) case.",
        lambda tokens: _ints(tokens, 2),
        lambda case: _verdict(is_repeated_prime(*case)),
    )