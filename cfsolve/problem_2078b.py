"""Build an array of length n from the values n and n - 1, depending on the parity of k.

This module also holds the small input/output helpers shared by the other
problem modules of the package.
"""

import argparse
import sys
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Any


def arrange(n: int, k: int) -> list[int]:
    """Return the arrangement of n values chosen by the parity of k.

    For odd k every position holds n except the last, which holds n - 1.
    For even k every position holds n - 1 except the one before last,
    which holds n.
    """
    if k % 2:
        return [n - 1 if i == n else n for i in range(1, n + 1)]
    return [n if i == n - 1 else n - 1 for i in range(1, n + 1)]


def _ints(tokens: Iterator[str], count: int) -> list[int]:
    """Read ``count`` integers from the token stream."""
    return [int(next(tokens)) for _ in range(count)]


def _spaced(values: Iterable[int]) -> str:
    return " ".join(map(str, values))


def _verdict(flag: bool, yes: str = "YES", no: str = "NO") -> str:
    return yes if flag else no


def _run(
    argv: Sequence[str] | None,
    description: str,
    read_case: Callable[[Iterator[str]], Any],
    answer: Callable[[Any], str],
) -> int:
    """Read a case count and the cases from standard input, printing one answer line each."""
    argparse.ArgumentParser(description=description).parse_args(argv)
    tokens = iter(sys.stdin.read().split())
    cases = (read_case(tokens) for _ in range(int(next(tokens))))
    sys.stdout.writelines(f"{answer(case)}\n" for case in cases)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Read test cases from standard input and print one arrangement per line."""
    return _run(
        argv,
        "Print the arrangement for each (n, k) case.",
        lambda tokens: _ints(tokens, 2),
        lambda case: _spaced(arrange(*case)),
    )