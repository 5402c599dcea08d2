import numpy as np
import pytest

from textlut.util import format_number, plane_values, truncate


def test_format_number():
    assert format_number(1000.0) == "1000"
    assert format_number(15.5) == "15.5"
    assert format_number(-0.25) == "-0.25"
    assert format_number(0.1 + 0.2) == "0.30000000000000004"
    assert format_number(np.float64(3)) == "3"
    assert format_number(7) == "7"


def test_truncate():
    assert truncate([1.239, -1.239], 2).tolist() == pytest.approx([1.23, -1.23])
    assert truncate(2.5, 0) == 2.0


def test_plane_values():
    out = plane_values([1000, 2000], [80, 90, 100], 1.0, 0.5, 2.0)
    assert out.shape == (3, 2)
    # indexed [y, x]
    assert out[0, 0] == 80 + 500 + 2
    assert out[2, 1] == 100 + 1000 + 2
    out = plane_values([1], [1], 0.3333, 0.0, 0.0, digits=2)
    assert out[0, 0] == pytest.approx(0.33)
