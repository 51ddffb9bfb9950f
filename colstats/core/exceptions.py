"""
Exception hierarchy for colstats.

All exceptions inherit from ColStatsError to allow catching any
library-specific error. Loader and engine code raise the most specific
class below; callers pick the level of the tree they care about.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from __future__ import annotations


class ColStatsError(Exception):
    """Base exception for all colstats errors."""
    pass


class DataFileError(ColStatsError, OSError):
    """
    A data file could not be opened or read.

    Also an OSError, so code written against plain file I/O keeps working.

    Attributes:
        path: The path that failed to open
    """

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class ValidationError(ColStatsError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class FormatError(ValidationError):
    """
    A CSV row has fewer fields than the requested column needs.

    Attributes:
        path: File being read
        line_number: 1-based physical line number in the file
        column_index: 0-based column that was requested
        n_fields: Number of fields actually present on the line
    """

    def __init__(
        self,
        message: str,
        path: str | None = None,
        line_number: int | None = None,
        column_index: int | None = None,
        n_fields: int | None = None,
    ):
        super().__init__(message)
        self.path = path
        self.line_number = line_number
        self.column_index = column_index
        self.n_fields = n_fields


class ParseError(ValidationError):
    """
    A selected CSV field is not a numeric literal.

    Attributes:
        path: File being read
        line_number: 1-based physical line number in the file
        column_index: 0-based column of the offending field
        field: The raw field text
    """

    def __init__(
        self,
        message: str,
        path: str | None = None,
        line_number: int | None = None,
        column_index: int | None = None,
        field: str | None = None,
    ):
        super().__init__(message)
        self.path = path
        self.line_number = line_number
        self.column_index = column_index
        self.field = field


class DomainError(ColStatsError):
    """
    A statistic is undefined for the given inputs.

    Base class for errors where the inputs are well-formed numbers but
    the formula cannot be evaluated on them.
    """
    pass


class DimensionError(DomainError):
    """
    Sequence dimensions are incorrect or inconsistent.

    Raised when paired sequences differ in length or an input is not
    one-dimensional.
    """
    pass


class ZeroVarianceError(DomainError):
    """
    A denominator built from a sequence's spread is zero.

    Raised by slope, intercept and correlation when a sequence is constant
    (every value equal, including fewer than two observations) or its
    deviations underflow to zero.

    Attributes:
        sequence_name: Name of the degenerate sequence ('x' or 'y')
        denominator: The offending value of sum((v - mean)^2)
        n: Number of observations
    """

    def __init__(
        self,
        message: str,
        sequence_name: str | None = None,
        denominator: float | None = None,
        n: int | None = None,
    ):
        super().__init__(message)
        self.sequence_name = sequence_name
        self.denominator = denominator
        self.n = n
