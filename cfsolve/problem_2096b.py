"""Count the draws needed to be sure of k matching pairs of gloves."""

from collections.abc import Iterator, Sequence

from .problem_2078b import _ints, _run


def min_attempts(a: Sequence[int], b: Sequence[int], k: int) -> int:
    """Return the fewest draws that guarantee k pairs.

    The worst case takes the larger pile of every colour, then the smaller
    piles of the k - 1 richest colours, and one more draw completes the pairs.
    """
    if len(a) != len(b):
        raise ValueError("a and b must have the same length")
    if not 1 <= k <= len(a):
        raise ValueError("k must be between 1 and the number of colours")
    total = sum(max(x, y) for x, y in zip(a, b))
    smaller = sorted((min(x, y) for x, y in zip(a, b)), reverse=True)
    return total + sum(smaller[: k - 1]) + 1


def _read_two_arrays(tokens: Iterator[str]) -> tuple[list[int], list[int], int]:
    """Read ``n k`` followed by two arrays of n integers each."""
    n, k = _ints(tokens, 2)
    return _ints(tokens, n), _ints(tokens, n), k


def main(argv: Sequence[str] | None = None) -> int:
    """Read test cases from standard input and print the draw count for each."""
    return _run(
        argv,
        "Print the number of draws for each case.",
        _read_two_arrays,
        lambda case: str(min_attempts(*case)),
    )