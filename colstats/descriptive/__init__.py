"""
Descriptive statistics for a single numeric sequence.

Public API:
    mean(x)                       - arithmetic mean (0 for empty input)
    variance(x)                   - population variance (divisor N)
    stddev(x)                     - population standard deviation
    total(x), count(x)            - sum and number of observations
    sum_of_squares(x)             - sum(x^2)
    sum_of_squared_deviations(x)  - sum((x - mean)^2)
    describe(x)                   - all of the above at once
"""

from colstats.descriptive.solution import DescriptiveParams, DescriptiveSolution
from colstats.descriptive.solvers import (
    count,
    describe,
    mean,
    stddev,
    sum_of_squared_deviations,
    sum_of_squares,
    total,
    variance,
)

__all__ = [
    "count",
    "describe",
    "mean",
    "stddev",
    "sum_of_squared_deviations",
    "sum_of_squares",
    "total",
    "variance",
    "DescriptiveParams",
    "DescriptiveSolution",
]
