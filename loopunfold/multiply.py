"""Multi-threaded matrix multiplication with a selectable loop order."""

from __future__ import annotations

import enum
import os
import re
import threading
from collections.abc import Mapping

from loopunfold.matrix import Matrix, MatrixError

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class LoopOrder(enum.IntEnum):
    """Order in which the i, j and k loops are nested."""

    IJK = 0
    IKJ = 1
    JIK = 2
    JKI = 3
    KIJ = 4
    KJI = 5


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def loop_order_from_env(environ: Mapping[str, str] | None = None) -> LoopOrder:
    """Read the loop order from ``LOOP_ORDER``; IJK when it is unset."""
    if environ is None:
        environ = os.environ
    value = environ.get("LOOP_ORDER")
    if value is None:
        return LoopOrder.IJK
    number = _leading_int(value)
    try:
        return LoopOrder(number)
    except ValueError:
        raise ValueError(f"LOOP_ORDER {number} is not a valid loop order") from None


def row_ranges(rows: int, threads: int) -> list[range]:
    """Split ``rows`` into ``threads`` contiguous ranges, earlier ones taking the remainder."""
    if threads < 1:
        raise ValueError("threads must be >= 1")
    per_thread, extra = divmod(rows, threads)
    ranges = []
    start = 0
    for index in range(threads):
        stop = start + per_thread + (1 if index < extra else 0)
        ranges.append(range(start, stop))
        start = stop
    return ranges


def multiply_row(a: Matrix, b: Matrix, c: Matrix, row: int, order: LoopOrder) -> None:
    """Compute one row of ``c = a x b`` using the given loop order.

    The IJK and JIK orders assign each element; the others accumulate into
    ``c`` and expect the row to start at zero.
    """
    inner = range(a.n)
    cols = range(b.n)
    order = LoopOrder(order)
    if order in (LoopOrder.IJK, LoopOrder.JIK):
        for j in cols:
            c[row, j] = sum((a[row, k] * b[k, j] for k in inner), 0.0)
    elif order is LoopOrder.JKI:
        for j in cols:
            for k in inner:
                c[row, j] += a[row, k] * b[k, j]
    else:
        for k in inner:
            a_rk = a[row, k]
            for j in cols:
                c[row, j] += a_rk * b[k, j]


def _multiply_rows(a: Matrix, b: Matrix, c: Matrix, rows: range, order: LoopOrder) -> None:
    for row in rows:
        multiply_row(a, b, c, row, order)


def multiply(
    a: Matrix,
    b: Matrix,
    c: Matrix,
    threads: int = 1,
    order: LoopOrder | None = None,
) -> None:
    """Store ``a x b`` in ``c``, dividing the rows among ``threads`` threads.

    When ``order`` is None it is taken from the ``LOOP_ORDER`` environment variable.
    """
    if a.n != b.m:
        raise MatrixError("inner dimensions do not match.")
    if c.m != a.m or c.n != b.n:
        raise MatrixError("result matrix has the wrong size.")
    if order is None:
        order = loop_order_from_env()
    workers = [
        threading.Thread(target=_multiply_rows, args=(a, b, c, rows, order))
        for rows in row_ranges(a.m, threads)
    ]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()