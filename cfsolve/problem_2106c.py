"""Count the arrays b with values in 0..k that make every a[i] + b[i] equal."""

from collections.abc import Sequence

from .problem_2078b import _run
from .problem_2096b import _read_two_arrays

UNKNOWN = -1


def count_arrays(a: Sequence[int], b: Sequence[int], k: int) -> int:
    """Return how many ways the unknown entries of ``b`` (marked -1) can be filled."""
    if len(a) != len(b):
        raise ValueError("a and b must have the same length")
    if not a:
        raise ValueError("arrays must not be empty")
    sums = {x + y for x, y in zip(a, b) if y != UNKNOWN}
    if len(sums) > 1:
        return 0
    if not sums:
        return k + min(a) - max(a) + 1
    (target,) = sums
    if all(x <= target and target - x <= k for x in a):
        return 1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Read test cases from standard input and print the count for each."""
    return _run(
        argv,
        "Print the number of arrays for each case.",
        _read_two_arrays,
        lambda case: str(count_arrays(*case)),
    )