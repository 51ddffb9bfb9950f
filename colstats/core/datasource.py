"""
DataSource: a set of named numeric columns.

DataSource is the "I have data" abstraction. It doesn't know or care
which statistic consumes it. It just provides named, equal-length,
read-only sequences.

Usage:
    from colstats import DataSource

    ds = DataSource.from_arrays(gpa=gpa, sat=sat)
    ds = DataSource.from_csv("sat-gpa.csv", columns={'gpa': 0, 'sat': 1}, has_header=True)
    ds = DataSource.from_dataframe(df)

    ds.keys()  # frozenset({'gpa', 'sat'})
    sat = ds['sat']
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from colstats.core.exceptions import ValidationError
from colstats.core.validation import as_sequence, check_consistent_length

if TYPE_CHECKING:
    import pandas as pd


@dataclass
class DataSource:
    """
    Named column container.

    Construct via factory classmethods, not directly. Every column is a
    1-D float64 array with the writeable flag cleared.
    """
    _data: dict[str, NDArray[np.floating[Any]]]
    _metadata: dict[str, Any] = field(default_factory=dict)

    # === Column Access ===

    def keys(self) -> frozenset[str]:
        """
        Return the names of all available columns.

        Example:
            >>> ds = DataSource.from_arrays(x=[1, 2], y=[3, 4])
            >>> ds.keys()
            frozenset({'x', 'y'})
        """
        return frozenset(self._data.keys())

    def __getitem__(self, key: str) -> NDArray[np.floating[Any]]:
        """
        Access a named column.

        Raises:
            KeyError: If key not found, with helpful message listing available keys
        """
        if key not in self._data:
            available = sorted(self.keys())
            raise KeyError(
                f"DataSource has no column '{key}'. Available: {available}"
            )
        return self._data[key]

    def __contains__(self, key: str) -> bool:
        """Check if a column exists."""
        return key in self._data

    # === Properties ===

    @property
    def n_observations(self) -> int:
        """Number of rows."""
        return self._metadata.get('n_observations', 0)

    @property
    def metadata(self) -> dict[str, Any]:
        """Where the data came from and how many rows it has."""
        return self._metadata.copy()

    # === Factory Methods ===

    @classmethod
    def from_arrays(cls, **named_arrays: ArrayLike) -> DataSource:
        """Construct from array-likes, one keyword per column."""
        return cls._build(named_arrays, {'source': 'arrays'})

    @classmethod
    def from_csv(
        cls,
        path: str | Path,
        *,
        columns: Mapping[str, int],
        has_header: bool = False,
    ) -> DataSource:
        """
        Construct from a comma-delimited file.

        Args:
            path: CSV file
            columns: Mapping of column name to 0-based column index
            has_header: Skip the first line of the file
        """
        from colstats.io import load_columns
        return load_columns(path, columns, has_header=has_header)

    @classmethod
    def from_dataframe(cls, df: 'pd.DataFrame', *, source_path: str | None = None) -> DataSource:
        """Construct from a pandas DataFrame; every column must be numeric."""
        storage = {str(col): df[col].to_numpy() for col in df.columns}
        metadata: dict[str, Any] = {'source': 'dataframe'}
        if source_path:
            metadata['source_path'] = source_path
        return cls._build(storage, metadata)

    @classmethod
    def _build(cls, columns: Mapping[str, ArrayLike], metadata: dict[str, Any]) -> DataSource:
        """Internal builder with validation."""
        if not columns:
            raise ValidationError("DataSource needs at least one column")

        storage: dict[str, NDArray[np.floating[Any]]] = {}
        for name, values in columns.items():
            arr = np.array(as_sequence(values, name), dtype=np.float64)
            arr.flags.writeable = False
            storage[name] = arr

        names = tuple(storage.keys())
        check_consistent_length(*storage.values(), names=names)

        metadata = dict(metadata)
        metadata['n_observations'] = len(next(iter(storage.values())))
        metadata['columns'] = list(names)
        return cls(_data=storage, _metadata=metadata)

    def __repr__(self) -> str:
        return f"DataSource(n={self.n_observations}, columns={sorted(self.keys())})"
