"""Count the prefix positions of a k-fold repeated array whose suffix sum reaches x."""

from collections.abc import Iterator, Sequence

from .problem_2078b import _ints, _run


def count_positions(values: Sequence[int], k: int, x: int) -> int:
    """Return how many start positions of ``values`` repeated k times leave a suffix sum of at least x."""
    block = sum(values)
    total = block * k
    count = 0
    removed = 0
    for i in range(1, k + 1):
        if total - i * block < x:
            break
        count += len(values)
        removed += block
    for v in values:
        if total - removed < x:
            break
        count += 1
        removed += v
    return count


def _read_case(tokens: Iterator[str]) -> tuple[list[int], int, int]:
    n, k, x = _ints(tokens, 3)
    return _ints(tokens, n), k, x


def main(argv: Sequence[str] | None = None) -> int:
    """Read test cases from standard input and print the count for each."""
    return _run(
        argv,
        "Count positions for each test case.",
        _read_case,
        lambda case: str(count_positions(*case)),
    )