"""
Regression solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from colstats.core.result import Result
from colstats.core.validation import as_sequence

if TYPE_CHECKING:
    from colstats.regression.design import PairedDesign


@dataclass(frozen=True)
class RegressionParams:
    """
    Parameter payload for simple linear regression.

    This is the immutable data computed by fit().
    """
    intercept: float
    slope: float
    correlation: float
    fitted_values: NDArray[np.floating[Any]]
    residuals: NDArray[np.floating[Any]]
    rss: float
    tss: float
    n: int


@dataclass
class RegressionSolution:
    """
    User-facing regression results.

    Wraps the Result and provides accessors for the fitted line,
    the correlation coefficient and the residuals.
    """
    _result: Result[RegressionParams]
    _design: 'PairedDesign'

    @property
    def intercept(self) -> float:
        return self._result.params.intercept

    @property
    def slope(self) -> float:
        return self._result.params.slope

    @property
    def coefficients(self) -> tuple[float, float]:
        """(intercept, slope)"""
        return (self.intercept, self.slope)

    @property
    def correlation(self) -> float:
        """Pearson r, NaN when y is constant."""
        return self._result.params.correlation

    @property
    def r_squared(self) -> float:
        tss = self._result.params.tss
        rss = self._result.params.rss
        if tss == 0:
            return 1.0 if rss == 0 else 0.0
        return 1.0 - rss / tss

    @property
    def fitted_values(self) -> NDArray[np.floating[Any]]:
        return self._result.params.fitted_values

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        return self._result.params.residuals

    @property
    def rss(self) -> float:
        return self._result.params.rss

    @property
    def n(self) -> int:
        return self._result.params.n

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def predict(self, x: ArrayLike) -> NDArray[np.floating[Any]]:
        """Evaluate the fitted line at new x values."""
        return self.intercept + self.slope * as_sequence(x, 'x')

    def summary(self, digits: int = 4) -> str:
        """Text report of the fitted line."""
        r = self.correlation
        r_str = "NA" if math.isnan(r) else f"{r:.{digits}f}"
        lines = [
            "Simple Linear Regression",
            "=" * 40,
            f"Observations: {self.n}",
            f"Model: y = {self.intercept:.{digits}f} + {self.slope:.{digits}f} * x",
            "",
            f"  Intercept:    {self.intercept:.{digits}f}",
            f"  Slope:        {self.slope:.{digits}f}",
            f"  Correlation:  {r_str}",
            f"  R-squared:    {self.r_squared:.{digits}f}",
            "=" * 40,
        ]
        for warning in self.warnings:
            lines.append(f"Note: {warning}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"RegressionSolution(n={self.n}, intercept={self.intercept:.6g}, "
            f"slope={self.slope:.6g}, r={self.correlation:.4f})"
        )
