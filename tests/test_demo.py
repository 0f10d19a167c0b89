import pytest

from adamant.demo import main
from adamant.tensor import Tensor


def _run(capsys):
    status = main([])
    return status, capsys.readouterr().out.splitlines()


def test_main_prints_three_steps(capsys):
    status, lines = _run(capsys)
    assert status == 0
    assert len(lines) == 3


def test_new_tensor_line(capsys):
    _, lines = _run(capsys)
    assert lines[0] == "New tensor: " + repr(Tensor((2, 3)))


def test_filled_tensor_line(capsys):
    _, lines = _run(capsys)
    expected = Tensor.from_list([float(v) for v in range(6)], (2, 3))
    assert lines[1] == "Filled tensor: " + repr(expected)


def test_reshaped_tensor_line(capsys):
    _, lines = _run(capsys)
    expected = Tensor.from_list([float(v) for v in range(6)], (3, 2))
    assert lines[2] == "Reshaped tensor: " + repr(expected)


def test_main_rejects_unknown_argument():
    with pytest.raises(SystemExit) as excinfo:
        main(["--bogus"])
    assert excinfo.value.code == 2