"""
Descriptive statistics solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from colstats.core.result import Result


@dataclass(frozen=True)
class DescriptiveParams:
    """Parameter payload for univariate statistics of one sequence."""
    n: int
    total: float
    mean: float
    variance: float
    sd: float
    sum_of_squares: float
    sum_of_squared_deviations: float


@dataclass
class DescriptiveSolution:
    """
    User-facing descriptive statistics results.

    Wraps Result[DescriptiveParams] and provides convenient accessors.
    """
    _result: Result[DescriptiveParams]

    @property
    def n(self) -> int:
        return self._result.params.n

    @property
    def total(self) -> float:
        return self._result.params.total

    @property
    def mean(self) -> float:
        """Arithmetic mean (0.0 for an empty sequence)."""
        return self._result.params.mean

    @property
    def variance(self) -> float:
        """Population variance (divisor N)."""
        return self._result.params.variance

    @property
    def sd(self) -> float:
        """Population standard deviation."""
        return self._result.params.sd

    @property
    def sum_of_squares(self) -> float:
        return self._result.params.sum_of_squares

    @property
    def sum_of_squared_deviations(self) -> float:
        return self._result.params.sum_of_squared_deviations

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

    def summary(self, digits: int = 4) -> str:
        """Aligned text block of the statistics."""
        rows = [
            ("N", f"{self.n}"),
            ("Sum", f"{self.total:.{digits}f}"),
            ("Mean", f"{self.mean:.{digits}f}"),
            ("Variance", f"{self.variance:.{digits}f}"),
            ("Std. Dev.", f"{self.sd:.{digits}f}"),
        ]
        label_width = max(len(label) for label, _ in rows)
        value_width = max(len(value) for _, value in rows)
        lines = ["Descriptive Statistics (population, divisor N)"]
        for label, value in rows:
            lines.append(f"  {label.ljust(label_width)}  {value.rjust(value_width)}")
        for warning in self.warnings:
            lines.append(f"  Note: {warning}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"DescriptiveSolution(n={self.n}, mean={self.mean:.6g}, "
            f"sd={self.sd:.6g})"
        )
