"""Build a permutation of 0..n-1 that keeps the prefix mex away from x as long as possible."""

from collections.abc import Sequence

from .problem_2078b import _ints, _run, _spaced


def build_sequence(n: int, x: int) -> list[int]:
    """Return 0..n-1 with x moved to the end; unchanged when x is not below n."""
    if x >= n:
        return list(range(n))
    return [v for v in range(n) if v != x] + [x]


def main(argv: Sequence[str] | None = None) -> int:
    """Read test cases from standard input and print the sequence for each."""
    return _run(
        argv,
        "Print the sequence for each (n, x) case.",
        lambda tokens: _ints(tokens, 2),
        lambda case: _spaced(build_sequence(*case)),
    )