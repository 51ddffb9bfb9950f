"""
Simple linear regression and correlation for paired sequences.

Public API:
    sum_of_products(x, y)       - sum(x*y)
    regression_slope(x, y)      - least-squares slope of y on x
    regression_intercept(x, y)  - least-squares intercept of y on x
    correlation(x, y)           - Pearson r
    fit(x, y) -> RegressionSolution

Example:
    >>> from colstats.regression import fit
    >>> result = fit(sat, gpa)
    >>> print(result.summary())
"""

from colstats.regression.design import PairedDesign
from colstats.regression.solution import RegressionParams, RegressionSolution
from colstats.regression.solvers import (
    correlation,
    fit,
    regression_intercept,
    regression_slope,
    sum_of_products,
)

__all__ = [
    "correlation",
    "fit",
    "regression_intercept",
    "regression_slope",
    "sum_of_products",
    "PairedDesign",
    "RegressionParams",
    "RegressionSolution",
]
