"""Command line entry point: time a multi-threaded matrix product."""

from __future__ import annotations

import re
import sys

from loopunfold.matrix import Matrix, stopwatch
from loopunfold.multiply import multiply

_PROG = "loopunfold"
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

_USAGE = (
    f"USAGE: {_PROG} n t verb\n"
    "n       : Size of the square matrix\n"
    "t       : Number of threads used by the multi-thread multiplier.\n"
    "verb    : 0=prints only execution time.\n"
    "          1=also print matrices."
)


def _to_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def main(argv: list[str] | None = None) -> int:
    """Run the benchmark; return the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 3:
        print(_USAGE)
        return 1

    n, threads, verbose = (_to_int(arg) for arg in args)
    if n < 2 or n > 10000:
        print(f"The size of the matrix 'n' ({n}) must be >= 2 and <= 10,000.")
        return 1
    if threads < 1:
        print(f"The number of threads 't' ({threads}) must be >= 1.")
        return 1

    a, b, c = Matrix(n, n), Matrix(n, n), Matrix(n, n)
    a.fill()
    b.set_diagonal(2.0)

    if verbose:
        print("A:")
        print(a.format(), end="")
        print("B:")
        print(b.format(), end="")

    start = stopwatch()
    multiply(a, b, c, threads)
    end = stopwatch()

    if verbose:
        print("\nC = A x B:")
        print(c.format(), end="")

    print(f"{end - start:.8f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())