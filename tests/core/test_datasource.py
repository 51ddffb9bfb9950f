"""
Tests for DataSource, the named column container.
"""

import numpy as np
import pytest

from colstats.core.datasource import DataSource
from colstats.core.exceptions import DimensionError, ValidationError


class TestFromArrays:

    def test_keys_and_access(self):
        ds = DataSource.from_arrays(x=[1, 2, 3], y=[4.0, 5.0, 6.0])
        assert ds.keys() == frozenset({"x", "y"})
        np.testing.assert_array_equal(ds["y"], [4.0, 5.0, 6.0])
        assert "x" in ds
        assert "z" not in ds

    def test_n_observations(self):
        ds = DataSource.from_arrays(x=[1, 2, 3])
        assert ds.n_observations == 3
        assert ds.metadata["source"] == "arrays"

    def test_columns_are_read_only_copies(self):
        data = np.array([1.0, 2.0])
        ds = DataSource.from_arrays(x=data)
        data[0] = 99.0
        assert ds["x"][0] == 1.0
        with pytest.raises(ValueError):
            ds["x"][0] = 5.0

    def test_missing_key_lists_available(self):
        ds = DataSource.from_arrays(x=[1.0])
        with pytest.raises(KeyError, match="Available"):
            ds["y"]

    def test_unequal_lengths(self):
        with pytest.raises(DimensionError):
            DataSource.from_arrays(x=[1, 2, 3], y=[1, 2])

    def test_no_columns(self):
        with pytest.raises(ValidationError):
            DataSource.from_arrays()

    def test_metadata_is_a_copy(self):
        ds = DataSource.from_arrays(x=[1.0])
        ds.metadata["source"] = "changed"
        assert ds.metadata["source"] == "arrays"


class TestFromCsv:

    def test_named_columns(self, sat_gpa_csv):
        ds = DataSource.from_csv(sat_gpa_csv, columns={"gpa": 0, "sat": 1}, has_header=True)
        assert ds.n_observations == 10
        assert ds["sat"][0] == 1714.0
        assert ds["gpa"][-1] == 3.02
        assert ds.metadata["source"] == "csv"
        assert ds.metadata["has_header"] is True


class TestFromDataframe:

    def test_dataframe(self):
        pd = pytest.importorskip("pandas")
        df = pd.DataFrame({"a": [1, 2, 3], "b": [0.5, 1.5, 2.5]})
        ds = DataSource.from_dataframe(df, source_path="frame.csv")
        assert ds.keys() == frozenset({"a", "b"})
        np.testing.assert_array_equal(ds["a"], [1.0, 2.0, 3.0])
        assert ds.metadata["source_path"] == "frame.csv"
