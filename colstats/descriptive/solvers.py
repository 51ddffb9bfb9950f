"""
Univariate statistics.

Every function takes a 1-D numeric array-like, validates it once at the
boundary and returns a plain float (count() returns an int). Inputs are
never modified.

Conventions:
    - mean of an empty sequence is 0.0
    - variance and stddev are population statistics (divisor N), and are
      0.0 for fewer than two observations
"""

from __future__ import annotations

import math

from numpy.typing import ArrayLike

from colstats.core.compute import reductions
from colstats.core.compute.timing import Timer
from colstats.core.result import Result
from colstats.core.validation import as_sequence
from colstats.descriptive.solution import DescriptiveParams, DescriptiveSolution


def count(values: ArrayLike) -> int:
    """Number of observations."""
    return int(as_sequence(values, 'values').shape[0])


def total(values: ArrayLike) -> float:
    """Sum of the observations; 0.0 for an empty sequence."""
    return reductions.total(as_sequence(values, 'values'))


def mean(values: ArrayLike) -> float:
    """
    Arithmetic mean.

    Returns sum / N, or 0.0 when the sequence is empty.

    Example
    -------
    >>> round(mean([2.4, 2.52, 2.54]), 4)
    2.4867
    """
    arr = as_sequence(values, 'values')
    n = arr.shape[0]
    if n == 0:
        return 0.0
    return reductions.total(arr) / n


def sum_of_squares(values: ArrayLike) -> float:
    """Sum of squared observations, sum(v^2)."""
    return reductions.sum_squares(as_sequence(values, 'values'))


def sum_of_squared_deviations(values: ArrayLike) -> float:
    """Sum of squared deviations from the mean, sum((v - mean)^2)."""
    arr = as_sequence(values, 'values')
    return reductions.sum_squared_deviations(arr, mean(arr))


def variance(values: ArrayLike) -> float:
    """
    Population variance, sum((v - mean)^2) / N.

    Uses divisor N, not the Bessel-corrected N - 1. Returns 0.0 for
    sequences with fewer than two observations.
    """
    arr = as_sequence(values, 'values')
    n = arr.shape[0]
    if n <= 1:
        return 0.0
    return reductions.sum_squared_deviations(arr, mean(arr)) / n


def stddev(values: ArrayLike) -> float:
    """
    Population standard deviation, sqrt(variance(values)).

    Example
    -------
    >>> round(stddev([1714, 1664, 1760, 1685, 1693, 1764, 1764, 1792, 1850, 1735]), 4)
    52.9367
    """
    return math.sqrt(variance(values))


def describe(values: ArrayLike) -> DescriptiveSolution:
    """
    Compute every univariate statistic in one call.

    Parameters
    ----------
    values : array-like
        1-D numeric sequence.

    Returns
    -------
    DescriptiveSolution with n, sum, mean, variance, sd, sum of squares
    and sum of squared deviations populated.
    """
    arr = as_sequence(values, 'values')
    timer = Timer()
    timer.start()

    n = int(arr.shape[0])
    with timer.section('sums'):
        sum_ = reductions.total(arr)
        sum_sq = reductions.sum_squares(arr)
    with timer.section('moments'):
        mean_ = sum_ / n if n > 0 else 0.0
        ssd = reductions.sum_squared_deviations(arr, mean_)
        var_ = ssd / n if n > 1 else 0.0

    timer.stop()

    warnings_list: list[str] = []
    if n == 0:
        warnings_list.append("empty sequence: mean reported as 0")

    params = DescriptiveParams(
        n=n,
        total=sum_,
        mean=mean_,
        variance=var_,
        sd=math.sqrt(var_),
        sum_of_squares=sum_sq,
        sum_of_squared_deviations=ssd,
    )
    result = Result(
        params=params,
        info={'n': n, 'ddof': 0},
        timing=timer.result(),
        backend_name='cpu_two_pass',
        warnings=tuple(warnings_list),
    )
    return DescriptiveSolution(_result=result)
