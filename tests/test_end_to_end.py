"""
End-to-end: load the SAT/GPA columns from CSV files and reproduce the
known statistics, the same sequence of calls a command-line session makes.
"""

import numpy as np

from colstats import (
    correlation,
    datasets,
    load_column,
    mean,
    regression_intercept,
    regression_slope,
    stddev,
)


def test_datasets_are_read_only():
    assert not datasets.sat.flags.writeable
    assert not datasets.gpa.flags.writeable
    assert len(datasets.sat) == len(datasets.gpa) == 10


def test_sat_gpa_rows_layout():
    rows = datasets.sat_gpa_rows()
    assert rows[0] == "gpa,sat"
    assert rows[1] == "2.4,1714"
    assert len(rows) == 11


def test_loaded_columns_reproduce_known_statistics(sat_gpa_csv):
    gpa = load_column(sat_gpa_csv, has_header=True, column_index=0)
    sat = load_column(sat_gpa_csv, has_header=True, column_index=1)

    assert round(mean(gpa), 4) == 2.8070
    assert round(mean(sat), 4) == 1742.1
    assert round(stddev(gpa), 4) == 0.2295
    assert round(stddev(sat), 4) == 52.9367
    assert round(regression_slope(sat, gpa), 4) == 0.0025
    assert round(regression_intercept(sat, gpa), 4) == -1.5909
    assert round(correlation(gpa, sat), 4) == 0.5823


def test_original_data_files(data_dir):
    expected = [10, 11, 12, 14, 9]
    np.testing.assert_array_equal(load_column(data_dir / "data1.csv", False, 0), expected)
    np.testing.assert_array_equal(load_column(data_dir / "data2.csv", True, 0), expected)
    np.testing.assert_array_equal(load_column(data_dir / "sat-gpa.csv", True, 1), datasets.sat)
