"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from colstats import datasets


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def write_csv(tmp_path):
    """Write lines to a CSV file under tmp_path and return its path."""
    def _write(name, lines, newline="\n"):
        path = tmp_path / name
        path.write_bytes(newline.join(lines).encode("utf-8") + newline.encode("utf-8"))
        return path
    return _write


@pytest.fixture
def sat_gpa_csv(write_csv):
    """sat-gpa.csv: header line, gpa in column 0, sat in column 1."""
    return write_csv("sat-gpa.csv", datasets.sat_gpa_rows())


@pytest.fixture
def data_dir(write_csv, sat_gpa_csv):
    """Directory holding data1.csv (no header), data2.csv (header) and sat-gpa.csv."""
    write_csv("data1.csv", ["10", "11", "12", "14", "9"])
    write_csv("data2.csv", ["value", "10", "11", "12", "14", "9"])
    return sat_gpa_csv.parent
