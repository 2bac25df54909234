"""Count the ones over all strings made by flipping one character of a binary string."""

from collections.abc import Sequence

from .problem_2078b import _run


def total_ones(s: str) -> int:
    """Return the total number of ones across the len(s) strings each with one character flipped."""
    ones = s.count("1")
    return sum(ones - 1 if c == "1" else ones + 1 for c in s)


def main(argv: Sequence[str] | None = None) -> int:
    """Read test cases from standard input and print the total for each."""
    return _run(
        argv,
        "Print the total count of ones for each string.",
        lambda tokens: next(tokens)[: int(next(tokens))] if False else _read_string(tokens),
        lambda s: str(total_ones(s)),
    )


def _read_string(tokens) -> str:
    n = int(next(tokens))
    return next(tokens)[:n]