import pytest

from loopunfold.cli import main
from loopunfold.matrix import Matrix


@pytest.fixture(autouse=True)
def _default_order(monkeypatch):
    monkeypatch.delenv("LOOP_ORDER", raising=False)


@pytest.mark.parametrize("argv", [[], ["3"], ["3", "2"], ["3", "2", "0", "1"]])
def test_wrong_argument_count(argv, capsys):
    assert main(argv) == 1
    out = capsys.readouterr().out
    assert out.startswith("USAGE:")
    assert "Size of the square matrix" in out


@pytest.mark.parametrize("size", ["1", "10001", "abc"])
def test_size_out_of_range(size, capsys):
    assert main([size, "2", "0"]) == 1
    assert "must be >= 2 and <= 10,000." in capsys.readouterr().out


def test_zero_threads(capsys):
    assert main(["4", "0", "0"]) == 1
    assert "The number of threads 't' (0) must be >= 1." in capsys.readouterr().out


def test_quiet_prints_only_time(capsys):
    assert main(["4", "2", "0"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 1
    elapsed = float(lines[0])
    assert elapsed >= 0.0
    assert len(lines[0].split(".")[1]) == 8


def test_verbose_prints_matrices(capsys):
    assert main(["3", "2", "1"]) == 0
    out = capsys.readouterr().out

    a = Matrix(3, 3)
    a.fill()
    b = Matrix(3, 3)
    b.set_diagonal(2.0)
    c = Matrix(3, 3)
    for i, row in enumerate(a.rows()):
        for j, value in enumerate(row):
            c[i, j] = 2 * value

    expected_prefix = "A:\n" + a.format() + "B:\n" + b.format() + "\nC = A x B:\n" + c.format()
    assert out.startswith(expected_prefix)
    assert float(out[len(expected_prefix):].strip()) >= 0.0