"""
CSV column loader.

Reads one or more 0-based columns from a comma-delimited text file into
read-only float64 arrays. Any malformed row is fatal: a short row raises
FormatError, a non-numeric field raises ParseError, and nothing is
returned.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import IO, Any, Iterator, Mapping
import numpy as np
from numpy.typing import NDArray

from colstats.core.datasource import DataSource
from colstats.core.exceptions import (
    DataFileError,
    FormatError,
    ParseError,
    ValidationError,
)
from colstats.core.validation import check_column_index
from colstats.io._fields import parse_number, split_fields, strip_terminator

logger = logging.getLogger(__name__)

ENCODING = 'utf-8'


def load_column(
    path: str | Path,
    has_header: bool = False,
    column_index: int = 0,
) -> NDArray[np.floating[Any]]:
    """
    Load one numeric column from a CSV file.

    Parameters
    ----------
    path : str or Path
        File to read.
    has_header : bool
        If True, the first line is discarded before reading data.
    column_index : int
        0-based column to extract.

    Returns
    -------
    Read-only float64 array of the column values in file order. An empty
    data section gives an empty array.

    Raises
    ------
    DataFileError
        The file cannot be opened or read.
    FormatError
        A data line has too few fields for column_index.
    ParseError
        A selected field is not numeric.

    Example
    -------
    >>> load_column('sat-gpa.csv', has_header=True, column_index=1)
    array([1714., 1664., 1760., ...])
    """
    column_index = check_column_index(column_index)
    (values,) = _read_columns(path, (column_index,), has_header)
    logger.debug(
        "loaded %d values from %s column %d", len(values), path, column_index
    )
    return values


def load_columns(
    path: str | Path,
    columns: Mapping[str, int],
    has_header: bool = False,
) -> DataSource:
    """
    Load several named columns from a CSV file in a single pass.

    Parameters
    ----------
    path : str or Path
        File to read.
    columns : mapping of str to int
        Column name to 0-based column index, e.g. {'gpa': 0, 'sat': 1}.
    has_header : bool
        If True, the first line is discarded before reading data.

    Returns
    -------
    DataSource holding one array per requested name.
    """
    if not columns:
        raise ValidationError("columns: at least one column must be requested")
    names = tuple(columns.keys())
    indices = tuple(check_column_index(columns[name], f"columns[{name!r}]") for name in names)

    arrays = _read_columns(path, indices, has_header)
    logger.debug(
        "loaded %d rows of %s from %s", len(arrays[0]), list(names), path
    )
    return DataSource._build(
        dict(zip(names, arrays)),
        {'source': 'csv', 'source_path': str(path), 'has_header': bool(has_header)},
    )


def _open(path: str) -> IO[str]:
    try:
        return open(path, 'r', encoding=ENCODING)
    except OSError as e:
        raise DataFileError(
            f"Cannot open {path!r}: {e.strerror or e}", path=path
        ) from e


def _records(handle: IO[str], has_header: bool) -> Iterator[tuple[int, list[str]]]:
    """Yield (line_number, fields) for each data line."""
    for line_number, line in enumerate(handle, start=1):
        if has_header and line_number == 1:
            continue
        yield line_number, split_fields(strip_terminator(line))


def _read_columns(
    path: str | Path,
    indices: tuple[int, ...],
    has_header: bool,
) -> list[NDArray[np.floating[Any]]]:
    path_str = os.fspath(path)
    required = max(indices) + 1
    collected: list[list[float]] = [[] for _ in indices]

    with _open(path_str) as handle:
        try:
            for line_number, fields in _records(handle, has_header):
                if len(fields) < required:
                    raise FormatError(
                        f"{path_str}:{line_number}: expected at least {required} "
                        f"fields, found {len(fields)}",
                        path=path_str,
                        line_number=line_number,
                        column_index=required - 1,
                        n_fields=len(fields),
                    )
                for out, index in zip(collected, indices):
                    field = fields[index]
                    try:
                        out.append(parse_number(field))
                    except ValueError as e:
                        raise ParseError(
                            f"{path_str}:{line_number}: column {index}: {e}",
                            path=path_str,
                            line_number=line_number,
                            column_index=index,
                            field=field,
                        ) from e
        except UnicodeDecodeError as e:
            raise DataFileError(
                f"Cannot read {path_str!r}: not {ENCODING} text ({e.reason})",
                path=path_str,
            ) from e
        except OSError as e:
            raise DataFileError(
                f"Cannot read {path_str!r}: {e.strerror or e}", path=path_str
            ) from e

    arrays = []
    for values in collected:
        arr = np.array(values, dtype=np.float64)
        arr.flags.writeable = False
        arrays.append(arr)
    return arrays
