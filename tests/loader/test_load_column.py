"""
Tests for the CSV column loader.

Covers header skipping, 0-based column selection, the round trip of
written values, and the fatal error cases (missing file, short row,
non-numeric field).
"""

import os

import numpy as np
import pytest

from colstats import datasets
from colstats.core.exceptions import (
    DataFileError,
    FormatError,
    ParseError,
    ValidationError,
)
from colstats.io import load_column, load_columns


class TestLoadColumn:

    def test_single_column_no_header(self, write_csv):
        path = write_csv("data1.csv", ["10", "11", "12", "14", "9"])
        result = load_column(path, has_header=False, column_index=0)
        np.testing.assert_array_equal(result, [10, 11, 12, 14, 9])

    def test_single_column_with_header(self, write_csv):
        path = write_csv("data2.csv", ["value", "10", "11", "12", "14", "9"])
        result = load_column(path, has_header=True, column_index=0)
        np.testing.assert_array_equal(result, [10, 11, 12, 14, 9])

    def test_header_flag_on_headerless_file_drops_first_row(self, write_csv):
        path = write_csv("data1.csv", ["10", "11", "12"])
        result = load_column(path, has_header=True, column_index=0)
        np.testing.assert_array_equal(result, [11, 12])

    def test_second_column(self, sat_gpa_csv):
        result = load_column(sat_gpa_csv, has_header=True, column_index=1)
        np.testing.assert_array_equal(result, datasets.sat)

    def test_first_column(self, sat_gpa_csv):
        result = load_column(sat_gpa_csv, has_header=True, column_index=0)
        np.testing.assert_array_equal(result, datasets.gpa)

    def test_round_trip_preserves_values_and_order(self, write_csv, rng):
        values = rng.standard_normal(50) * 1000
        path = write_csv("round.csv", [repr(float(v)) for v in values])
        result = load_column(path)
        np.testing.assert_array_equal(result, values)

    def test_defaults(self, write_csv):
        path = write_csv("d.csv", ["1,2", "3,4"])
        np.testing.assert_array_equal(load_column(path), [1.0, 3.0])

    def test_str_path(self, write_csv):
        path = write_csv("d.csv", ["1", "2"])
        np.testing.assert_array_equal(load_column(str(path)), [1.0, 2.0])

    def test_result_is_float64_and_read_only(self, write_csv):
        path = write_csv("d.csv", ["1", "2"])
        result = load_column(path)
        assert result.dtype == np.float64
        assert result.ndim == 1
        with pytest.raises(ValueError):
            result[0] = 3.0

    def test_numeric_forms(self, write_csv):
        path = write_csv("forms.csv", ["-3", "+4", "2.5", ".5", "5.", "1e3", "-2.5E-1"])
        result = load_column(path)
        np.testing.assert_array_equal(result, [-3, 4, 2.5, 0.5, 5.0, 1000.0, -0.25])

    def test_whitespace_around_number_tolerated(self, write_csv):
        path = write_csv("ws.csv", ["1, 2", "3,  4 "])
        np.testing.assert_array_equal(load_column(path, column_index=1), [2.0, 4.0])

    def test_crlf_line_endings(self, write_csv):
        path = write_csv("crlf.csv", ["a,b", "1,2", "3,4"], newline="\r\n")
        np.testing.assert_array_equal(load_column(path, has_header=True, column_index=1), [2.0, 4.0])

    def test_no_trailing_newline(self, tmp_path):
        path = tmp_path / "d.csv"
        path.write_text("1,2\n3,4", encoding="utf-8")
        np.testing.assert_array_equal(load_column(path, column_index=1), [2.0, 4.0])

    def test_extra_columns_ignored(self, write_csv):
        path = write_csv("wide.csv", ["1,x,y,z", "2,,,"])
        np.testing.assert_array_equal(load_column(path), [1.0, 2.0])


class TestEmptyData:

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_text("", encoding="utf-8")
        result = load_column(path)
        assert result.shape == (0,)

    def test_header_only(self, write_csv):
        path = write_csv("header.csv", ["a,b"])
        result = load_column(path, has_header=True, column_index=1)
        assert result.shape == (0,)

    def test_empty_file_with_header_flag(self, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_text("", encoding="utf-8")
        assert load_column(path, has_header=True).shape == (0,)


class TestErrors:

    def test_missing_file(self, tmp_path):
        path = tmp_path / "nope.csv"
        with pytest.raises(DataFileError) as exc_info:
            load_column(path)
        assert exc_info.value.path == os.fspath(path)
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_missing_file_is_os_error(self, tmp_path):
        with pytest.raises(OSError):
            load_column(tmp_path / "nope.csv")

    def test_directory(self, tmp_path):
        with pytest.raises(DataFileError):
            load_column(tmp_path)

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "bin.csv"
        path.write_bytes(b"1\n\xff\xfe\n")
        with pytest.raises(DataFileError, match="utf-8"):
            load_column(path)

    def test_short_row(self, write_csv):
        path = write_csv("short.csv", ["a,b", "1,2", "3"])
        with pytest.raises(FormatError) as exc_info:
            load_column(path, has_header=True, column_index=1)
        err = exc_info.value
        assert err.line_number == 3
        assert err.column_index == 1
        assert err.n_fields == 1

    def test_column_beyond_every_row(self, write_csv):
        path = write_csv("d.csv", ["1,2", "3,4"])
        with pytest.raises(FormatError) as exc_info:
            load_column(path, column_index=2)
        assert exc_info.value.line_number == 1

    def test_non_numeric_field(self, write_csv):
        path = write_csv("bad.csv", ["1", "2", "abc"])
        with pytest.raises(ParseError) as exc_info:
            load_column(path)
        err = exc_info.value
        assert err.line_number == 3
        assert err.field == "abc"
        assert err.column_index == 0

    def test_header_not_skipped_is_parse_error(self, sat_gpa_csv):
        with pytest.raises(ParseError) as exc_info:
            load_column(sat_gpa_csv, has_header=False, column_index=1)
        assert exc_info.value.line_number == 1
        assert exc_info.value.field == "sat"

    @pytest.mark.parametrize("field", ["", "nan", "inf", "1_000", "0x10", "1e", "--1", "1.2.3", "1e999"])
    def test_rejected_literals(self, write_csv, field):
        path = write_csv("bad.csv", ["1", field])
        with pytest.raises(ParseError):
            load_column(path)

    def test_blank_line_is_fatal(self, write_csv):
        path = write_csv("blank.csv", ["1", "", "2"])
        with pytest.raises(ParseError) as exc_info:
            load_column(path)
        assert exc_info.value.line_number == 2

    def test_quoted_field_not_supported(self, write_csv):
        path = write_csv("quoted.csv", ['"1,5",2'])
        with pytest.raises(ParseError):
            load_column(path)

    def test_negative_column_index(self, write_csv):
        path = write_csv("d.csv", ["1"])
        with pytest.raises(ValidationError):
            load_column(path, column_index=-1)

    def test_parse_error_is_validation_error(self, write_csv):
        path = write_csv("bad.csv", ["x"])
        with pytest.raises(ValidationError):
            load_column(path)


class TestLoadColumns:

    def test_two_named_columns(self, sat_gpa_csv):
        ds = load_columns(sat_gpa_csv, {"gpa": 0, "sat": 1}, has_header=True)
        np.testing.assert_array_equal(ds["gpa"], datasets.gpa)
        np.testing.assert_array_equal(ds["sat"], datasets.sat)
        assert ds.n_observations == 10

    def test_same_column_twice(self, sat_gpa_csv):
        ds = load_columns(sat_gpa_csv, {"a": 1, "b": 1}, has_header=True)
        np.testing.assert_array_equal(ds["a"], ds["b"])

    def test_empty_mapping(self, sat_gpa_csv):
        with pytest.raises(ValidationError):
            load_columns(sat_gpa_csv, {})

    def test_short_row_checks_widest_column(self, write_csv):
        path = write_csv("d.csv", ["1,2,3", "4,5"])
        with pytest.raises(FormatError) as exc_info:
            load_columns(path, {"a": 0, "c": 2})
        assert exc_info.value.line_number == 2

    def test_non_ascii_digits_rejected(self, write_csv):
        path = write_csv("digits.csv", ["1", "\u0661\u0662"])
        with pytest.raises(ParseError) as exc_info:
            load_column(path)
        assert exc_info.value.line_number == 2
