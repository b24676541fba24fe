# loopunfold

A small benchmark that multiplies two square matrices. The rows of the result
are split across worker threads, and the elapsed time is printed.

## Installation

```
pip install .
```

## Command line

```
loopunfold n t verb
```

- `n`: the size of the square matrices. It must be between 2 and 10,000.
- `t`: the number of worker threads. It must be at least 1.
- `verb`: `0` prints only the execution time. Any other number also prints
  the input matrices and the product.

The arguments are read as integers from their leading digits, and text without
digits counts as 0. With the wrong number of arguments the command prints a
usage message. With an out-of-range value it prints the reason. In both cases
it exits with status 1.

Matrix A is filled with the consecutive values 0, 1, 2, …. Matrix B has 2.0 on
its diagonal. The command prints the time taken by the multiplication in
seconds, with eight decimals.

The environment variable `LOOP_ORDER` picks the loop nesting used for each row:

| value | order |
|-------|-------|
| 0 | IJK (the default when unset) |
| 1 | IKJ |
| 2 | JIK |
| 3 | JKI |
| 4 | KIJ |
| 5 | KJI |

A value outside 0–5 raises `ValueError`.

```
LOOP_ORDER=1 loopunfold 200 4 0
```

## Library use

```python
from loopunfold.matrix import Matrix, stopwatch
from loopunfold.multiply import LoopOrder, multiply

a = Matrix(3, 3)
a.fill()
b = Matrix(3, 3)
b.set_diagonal(2.0)
c = Matrix(3, 3)

start = stopwatch()
multiply(a, b, c, 2, LoopOrder.IJK)
print(c.format(), end="")
print(stopwatch() - start)
```

### `loopunfold.matrix`

- `Matrix(m, n)` is an `m` x `n` matrix of floats that starts at zero. Its size
  is available as `m` and `n`, and its elements as `matrix[i, j]`. An index out
  of range raises `IndexError`.
- `fill()` writes 0, 1, 2, … in row-major order.
- `set_diagonal(value)` writes `value` on every (n + 1)-th element, starting
  with the first.
- `copy_from(other)` copies a matrix of the same size.
- `rows()` yields a copy of each row.
- `format()` renders each element as `"  %5.1f"`, with one line per row.
- `stopwatch()` returns the monotonic clock in seconds.
- `MatrixError`, a subclass of `ValueError`, is raised for sizes that are not
  positive and for sizes that do not match.

### `loopunfold.multiply`

- `multiply(a, b, c, threads=1, order=None)` stores `a x b` in `c`. It checks
  that the sizes agree and gives each thread a contiguous block of rows. When
  `order` is `None`, the order is read from `LOOP_ORDER`.
- `multiply_row(a, b, c, row, order)` computes one row. The IJK and JIK orders
  assign each element. The other orders add into `c`, so the row must start at
  zero.
- `row_ranges(rows, threads)` returns the row ranges handed to each thread.
  Leftover rows go to the first threads.
- `loop_order_from_env(environ)` reads `LOOP_ORDER` from a mapping, or from
  `os.environ` when none is given.
- `LoopOrder` is an integer enum of the six nestings.

## Limitations

The matrices are plain Python lists, and the worker threads are ordinary
`threading` threads. On CPython, the threads do not compute in parallel. The
timings reflect how the work is split and ordered, not raw arithmetic speed.

## Tests

```
pip install .[test]
pytest
```