"""
Core infrastructure for colstats.

Shared abstractions used by the loader and the statistics engine.

Key components:
    datasource: Named column container
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and numerical tolerances
"""

from colstats.core.datasource import DataSource
from colstats.core.result import Result
from colstats.core.exceptions import (
    ColStatsError,
    DataFileError,
    ValidationError,
    FormatError,
    ParseError,
    DomainError,
    DimensionError,
    ZeroVarianceError,
)

__all__ = [
    "DataSource",
    "Result",
    # Exceptions
    "ColStatsError",
    "DataFileError",
    "ValidationError",
    "FormatError",
    "ParseError",
    "DomainError",
    "DimensionError",
    "ZeroVarianceError",
]
