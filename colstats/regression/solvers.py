"""
Bivariate statistics over paired sequences.

Provides the sum of products, the simple least-squares line and the
Pearson correlation coefficient, plus fit() which returns all of them
at once.

Spread and cross terms are taken about the means (see PairedSums):

    slope       = cross / spread_x
    intercept   = mean(y) - slope * mean(x)
    correlation = cross / sqrt(spread_x * spread_y)

which equals the raw-sum form (N*sum(xy) - sum(x)*sum(y)) /
(N*sum(x^2) - sum(x)^2) without its cancellation on large offsets.

A constant sequence raises ZeroVarianceError and sums that overflow
double precision raise DomainError, instead of producing inf or NaN.
Sequences of unequal length raise DimensionError.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike

from colstats.core.compute import reductions
from colstats.core.compute.reductions import PairedSums
from colstats.core.compute.timing import Timer
from colstats.core.compute.tolerances import is_degenerate
from colstats.core.exceptions import DomainError, ZeroVarianceError
from colstats.core.result import Result
from colstats.regression.design import PairedDesign
from colstats.regression.solution import RegressionParams, RegressionSolution


def _ensure_design(x: ArrayLike | PairedDesign, y: ArrayLike | None) -> PairedDesign:
    """Accept either a ready PairedDesign or two sequences."""
    if isinstance(x, PairedDesign):
        return x
    return PairedDesign.from_arrays(x, y)


def _check_finite(sums: PairedSums, *fields: str) -> None:
    for name in fields:
        value = getattr(sums, name)
        if not math.isfinite(value):
            raise DomainError(
                f"{name} overflows double precision ({value!r}) "
                f"across {sums.n} observations; rescale the data"
            )


def _is_constant(sums: PairedSums, name: str) -> bool:
    if name == 'x':
        return is_degenerate(sums.spread_x, sums.range_x)
    return is_degenerate(sums.spread_y, sums.range_y)


def _check_spread(sums: PairedSums, name: str) -> float:
    _check_finite(sums, f'mean_{name}', f'spread_{name}', f'range_{name}')
    spread = sums.spread_x if name == 'x' else sums.spread_y
    if _is_constant(sums, name):
        raise ZeroVarianceError(
            f"{name}: zero variance across {sums.n} observations "
            f"(sum(({name} - mean)^2) = {spread!r}); "
            f"the statistic is undefined",
            sequence_name=name,
            denominator=spread,
            n=sums.n,
        )
    return spread


def _slope(sums: PairedSums) -> float:
    spread_x = _check_spread(sums, 'x')
    _check_finite(sums, 'mean_y', 'cross')
    slope = sums.cross / spread_x
    if not math.isfinite(slope):
        raise DomainError(f"slope overflows double precision ({slope!r})")
    return slope


def _intercept(sums: PairedSums, slope: float) -> float:
    intercept = sums.mean_y - slope * sums.mean_x
    if not math.isfinite(intercept):
        raise DomainError(f"intercept overflows double precision ({intercept!r})")
    return intercept


def _correlation(sums: PairedSums) -> float:
    spread_x = _check_spread(sums, 'x')
    spread_y = _check_spread(sums, 'y')
    _check_finite(sums, 'cross')
    r = sums.cross / (math.sqrt(spread_x) * math.sqrt(spread_y))
    # rounding can push |r| a few ulps past 1
    return float(np.clip(r, -1.0, 1.0))


def sum_of_products(x: ArrayLike, y: ArrayLike) -> float:
    """
    Sum of pairwise products, sum(x_i * y_i).

    Raises:
        DimensionError: If x and y differ in length
        DomainError: If the sum overflows double precision
    """
    sums = PairedDesign.from_arrays(x, y).sums
    _check_finite(sums, 'sum_xy')
    return sums.sum_xy


def regression_slope(x: ArrayLike, y: ArrayLike) -> float:
    """
    Least-squares slope of y on x.

    slope = (N*sum(xy) - sum(x)*sum(y)) / (N*sum(x^2) - sum(x)^2),
    evaluated about the means.

    Raises:
        DimensionError: If x and y differ in length
        ZeroVarianceError: If x is constant or has fewer than two values
        DomainError: If the sums overflow double precision

    Example:
        >>> regression_slope([1, 2, 3], [2, 4, 6])
        2.0
    """
    return _slope(PairedDesign.from_arrays(x, y).sums)


def regression_intercept(x: ArrayLike, y: ArrayLike) -> float:
    """
    Least-squares intercept of y on x: mean(y) - slope * mean(x).

    Raises:
        DimensionError: If x and y differ in length
        ZeroVarianceError: If x is constant or has fewer than two values
        DomainError: If the sums overflow double precision
    """
    sums = PairedDesign.from_arrays(x, y).sums
    return _intercept(sums, _slope(sums))


def correlation(x: ArrayLike, y: ArrayLike) -> float:
    """
    Pearson correlation coefficient.

    r = (N*sum(xy) - sum(x)*sum(y))
        / sqrt((N*sum(x^2) - sum(x)^2) * (N*sum(y^2) - sum(y)^2))

    The terms are evaluated about the means and the result is clamped
    to [-1, 1].

    Raises:
        DimensionError: If x and y differ in length
        ZeroVarianceError: If either sequence is constant or has fewer
            than two values
        DomainError: If the sums overflow double precision
    """
    return _correlation(PairedDesign.from_arrays(x, y).sums)


def fit(
    x: ArrayLike | PairedDesign,
    y: ArrayLike | None = None,
) -> RegressionSolution:
    """
    Fit the simple linear model y = intercept + slope * x.

    Parameters
    ----------
    x : array-like or PairedDesign
        Predictor sequence, or a PairedDesign (then y is ignored).
    y : array-like
        Response sequence, same length as x.

    Returns
    -------
    RegressionSolution with intercept, slope, correlation, fitted values
    and residuals.

    Raises
    ------
    DimensionError
        If x and y differ in length.
    ZeroVarianceError
        If x is constant. A constant y still fits (slope 0); its
        correlation is reported as NaN with a warning.
    DomainError
        If the sums overflow double precision.

    Example
    -------
    >>> from colstats.datasets import sat, gpa
    >>> result = fit(sat, gpa)
    >>> print(result.summary())
    """
    design = _ensure_design(x, y)
    sums = design.sums
    timer = Timer()
    timer.start()
    warnings_list: list[str] = []

    with timer.section('coefficients'):
        slope = _slope(sums)
        intercept = _intercept(sums, slope)

    with timer.section('correlation'):
        _check_finite(sums, 'spread_y', 'range_y')
        if _is_constant(sums, 'y'):
            r = math.nan
            warnings_list.append("y has zero variance: correlation is undefined")
        else:
            r = _correlation(sums)

    with timer.section('residuals'):
        fitted = intercept + slope * design.x
        residuals = design.y - fitted
        rss = reductions.sum_squares(residuals)
        tss = sums.spread_y

    timer.stop()

    params = RegressionParams(
        intercept=intercept,
        slope=slope,
        correlation=r,
        fitted_values=fitted,
        residuals=residuals,
        rss=rss,
        tss=tss,
        n=sums.n,
    )
    result = Result(
        params=params,
        info={'n': sums.n, 'method': 'centered_sums'},
        timing=timer.result(),
        backend_name='cpu_two_pass',
        warnings=tuple(warnings_list),
    )
    return RegressionSolution(_result=result, _design=design)
