"""
Paired design for bivariate statistics.

PairedDesign holds two index-aligned sequences, x (predictor) and y
(response), validated once: both 1-D, finite, float64 and of equal
length. The raw sums every bivariate formula needs are computed at
construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from colstats.core.compute.reductions import PairedSums
from colstats.core.datasource import DataSource
from colstats.core.validation import as_sequence, check_consistent_length


@dataclass(frozen=True)
class PairedDesign:
    """
    Paired sequences (x, y) for simple regression and correlation.

    Construction:
        PairedDesign.from_arrays(x, y)
        PairedDesign.from_datasource(ds, x='sat', y='gpa')
    """
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _sums: PairedSums

    @classmethod
    def from_arrays(cls, x: ArrayLike, y: ArrayLike) -> PairedDesign:
        """Build from two array-likes."""
        return cls._build(as_sequence(x, 'x'), as_sequence(y, 'y'))

    @classmethod
    def from_datasource(cls, source: DataSource, *, x: str, y: str) -> PairedDesign:
        """Build from two named columns of a DataSource."""
        return cls.from_arrays(source[x], source[y])

    @classmethod
    def _build(cls, x: NDArray, y: NDArray) -> PairedDesign:
        """Internal builder with validation."""
        check_consistent_length(x, y, names=('x', 'y'))
        return cls(_x=x, _y=y, _sums=PairedSums.from_arrays(x, y))

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """Predictor sequence (n,)."""
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Response sequence (n,)."""
        return self._y

    @property
    def n(self) -> int:
        """Number of pairs."""
        return self._sums.n

    @property
    def sums(self) -> PairedSums:
        return self._sums

    def __repr__(self) -> str:
        return f"PairedDesign(n={self.n})"
