import os

import numpy as np
import pytest

from textlut.lookup_tools import text_lookup


@pytest.fixture(scope="module")
def tests_directory() -> str:
    return os.path.dirname(os.path.realpath(__file__))


@pytest.fixture
def ign_file(tests_directory) -> str:
    return os.path.join(tests_directory, "samples", "ign.tbl")


@pytest.fixture
def ign_table():
    # rows bottom up: map 80, 90, 100
    return text_lookup(
        [
            [12.0, 13.5, 14.2, 15.7],
            [13.0, 14.5, 15.3, 16.8],
            [14.0, 15.5, 16.4, 17.9],
        ],
        [1000, 1500, 2000, 2500],
        [80, 90, 100],
        "rpm",
        "map",
    )


@pytest.fixture
def square_table():
    values = np.arange(25, dtype=np.float64).reshape(5, 5)
    return text_lookup(
        values, [1000, 1500, 2000, 2500, 3000], [60, 70, 80, 90, 100], "rpm", "map"
    )
