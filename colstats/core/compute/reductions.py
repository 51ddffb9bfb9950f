"""
Linear-scan reductions shared by the descriptive and regression engines.

Inputs are assumed already validated (1-D, float64, finite); the public
functions in colstats.descriptive and colstats.regression do that at the
boundary. Each reduction is a numpy pass, so there is no recursion
depth limit on sequence length.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray


def total(values: NDArray[np.floating[Any]]) -> float:
    """sum(v)"""
    return float(np.sum(values))


def sum_squares(values: NDArray[np.floating[Any]]) -> float:
    """sum(v^2)"""
    return float(np.dot(values, values))


def sum_products(x: NDArray[np.floating[Any]], y: NDArray[np.floating[Any]]) -> float:
    """sum(x*y) over index-aligned sequences."""
    return float(np.dot(x, y))


def sum_squared_deviations(values: NDArray[np.floating[Any]], center: float) -> float:
    """sum((v - center)^2)"""
    deviations = values - center
    return float(np.dot(deviations, deviations))


@dataclass(frozen=True)
class PairedSums:
    """
    Sums needed by the regression and correlation formulas.

    The raw sums are kept for sum_of_products and reporting. The spread
    and cross terms are taken about the means in a second pass:

        spread_x = sum((x - mean_x)^2)
        spread_y = sum((y - mean_y)^2)
        cross    = sum((x - mean_x) * (y - mean_y))

    These are the raw-sum terms N*sum(x^2) - sum(x)^2 and
    N*sum(xy) - sum(x)*sum(y) divided by N^2, without the cancellation
    the raw form suffers when the values sit far from zero. range_x and
    range_y are max - min, zero exactly when a sequence is constant.
    """
    n: int
    sum_x: float
    sum_y: float
    sum_xx: float
    sum_yy: float
    sum_xy: float
    mean_x: float
    mean_y: float
    spread_x: float
    spread_y: float
    cross: float
    range_x: float
    range_y: float

    @classmethod
    def from_arrays(
        cls,
        x: NDArray[np.floating[Any]],
        y: NDArray[np.floating[Any]],
    ) -> PairedSums:
        n = int(x.shape[0])
        # overflow shows up as inf/nan in the fields; solvers check for it
        with np.errstate(over='ignore', invalid='ignore'):
            sum_x = total(x)
            sum_y = total(y)
            mean_x = sum_x / n if n > 0 else 0.0
            mean_y = sum_y / n if n > 0 else 0.0
            dx = x - mean_x
            dy = y - mean_y
            return cls(
                n=n,
                sum_x=sum_x,
                sum_y=sum_y,
                sum_xx=sum_squares(x),
                sum_yy=sum_squares(y),
                sum_xy=sum_products(x, y),
                mean_x=mean_x,
                mean_y=mean_y,
                spread_x=sum_squares(dx),
                spread_y=sum_squares(dy),
                cross=sum_products(dx, dy),
                range_x=float(np.ptp(x)) if n > 0 else 0.0,
                range_y=float(np.ptp(y)) if n > 0 else 0.0,
            )
