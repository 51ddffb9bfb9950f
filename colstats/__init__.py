"""
colstats: column statistics for CSV data.

Loads numeric columns from comma-delimited files and computes
descriptive statistics (mean, population standard deviation) and
bivariate statistics (simple linear regression, Pearson correlation).

Submodules:
    io: CSV column loader
    descriptive: Univariate statistics
    regression: Least-squares line and correlation
    datasets: Reference data
"""

__version__ = "0.1.0"

from colstats import descriptive
from colstats import io
from colstats import regression
from colstats.core import (
    ColStatsError,
    DataFileError,
    DataSource,
    DimensionError,
    DomainError,
    FormatError,
    ParseError,
    ValidationError,
    ZeroVarianceError,
)
from colstats.descriptive import (
    count,
    describe,
    mean,
    stddev,
    sum_of_squared_deviations,
    sum_of_squares,
    total,
    variance,
)
from colstats.io import load_column, load_columns
from colstats.regression import (
    correlation,
    fit,
    regression_intercept,
    regression_slope,
    sum_of_products,
)

__all__ = [
    "__version__",
    # Submodules
    "descriptive",
    "io",
    "regression",
    # Loader
    "load_column",
    "load_columns",
    "DataSource",
    # Univariate
    "count",
    "describe",
    "mean",
    "stddev",
    "sum_of_squared_deviations",
    "sum_of_squares",
    "total",
    "variance",
    # Bivariate
    "correlation",
    "fit",
    "regression_intercept",
    "regression_slope",
    "sum_of_products",
    # Exceptions
    "ColStatsError",
    "DataFileError",
    "DimensionError",
    "DomainError",
    "FormatError",
    "ParseError",
    "ValidationError",
    "ZeroVarianceError",
]
