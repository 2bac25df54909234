"""Decide whether the ones of one binary string fit into the zeros of another by parity."""

from collections.abc import Iterator, Sequence

from .problem_2078b import _run, _verdict


def can_swap(a: str, b: str) -> bool:
    """Return True when ones of ``a`` at even positions fit zeros of ``b`` at odd ones, and vice versa."""
    if len(a) != len(b):
        raise ValueError("strings must have the same length")
    a_even_ones = a[0::2].count("1")
    a_odd_ones = a[1::2].count("1")
    b_even_zeros = b[0::2].count("0")
    b_odd_zeros = b[1::2].count("0")
    return a_even_ones <= b_odd_zeros and a_odd_ones <= b_even_zeros


def _read_case(tokens: Iterator[str]) -> tuple[str, str]:
    n = int(next(tokens))
    a, b = next(tokens), next(tokens)
    return a[:n], b[:n]


def main(argv: Sequence[str] | None = None) -> int:
    """Read test cases from standard input and print YES or NO for each."""
    return _run(
        argv,
        "Answer YES or NO for each pair of strings.",
        _read_case,
        lambda case: _verdict(can_swap(*case)),
    )