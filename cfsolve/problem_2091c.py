"""Build a permutation of 1..n for odd n; even n has none."""

from collections.abc import Sequence

from .problem_2078b import _run, _spaced


def build_permutation(n: int) -> list[int] | None:
    """Return the permutation n, n - 1, ..., 1 for odd n, or None when n is even."""
    if n % 2 == 0:
        return None
    return list(range(n, 0, -1))


def _format(perm: list[int] | None) -> str:
    return "-1" if perm is None else _spaced(perm)


def main(argv: Sequence[str] | None = None) -> int:
    """Read test cases from standard input and print a permutation or -1 for each."""
    return _run(
        argv,
        "Print a permutation for each n, or -1.",
        lambda tokens: int(next(tokens)),
        lambda n: _format(build_permutation(n)),
    )