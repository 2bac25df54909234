"""Find the smallest longest bench length that seats k people in n rows of m seats."""

from collections.abc import Sequence

from .problem_2078b import _ints, _run


def _capacity(n: int, m: int, bench: int) -> int:
    return (m // (bench + 1) * bench + m % (bench + 1)) * n


def min_max_bench(n: int, m: int, k: int) -> int:
    """Return the smallest possible length of the longest run of occupied seats."""
    low, high = 0, (k + n - 1) // n
    while low + 1 < high:
        mid = (low + high) // 2
        if _capacity(n, m, mid) >= k:
            high = mid
        else:
            low = mid
    return high


def main(argv: Sequence[str] | None = None) -> int:
    """Read test cases from standard input and print the answer for each."""
    return _run(
        argv,
        "Print the minimal bench length for each case.",
        lambda tokens: _ints(tokens, 3),
        lambda case: str(min_max_bench(*case)),
    )