"""
Generic result container for colstats computations.

describe() and fit() both return their numbers inside a Result envelope,
so timing and metadata are reported the same way for every statistic.

Design decisions:
    - Generic over parameter payload P
    - info dict for flexible metadata (n, computed statistics)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True)
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific payload (DescriptiveParams, RegressionParams)
        info: Structured metadata (n, which statistics were computed)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the code path that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=RegressionParams(intercept=-1.59, slope=0.0025, ...),
        ...     info={'n': 10},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='cpu_two_pass'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
