"""
Numerical tolerances.

is_degenerate decides when a spread term (the sum of squared deviations
about the mean) makes a denominator zero. A sequence is degenerate when
all of its values are equal, or when its deviations are so small that
their squares underflow to zero.

The ToleranceTier constants are the comparison levels the test suite
uses against independent references (scipy, numpy).
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Engine results against scipy/numpy reference implementations
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='double precision, agrees with scipy/numpy references',
)

# Values quoted to 4 decimal places
FOUR_DECIMALS = ToleranceTier(
    rtol=0.0,
    atol=5e-5,
    name='four_decimals',
    description='agreement after rounding to 4 decimal places',
)


def is_degenerate(spread: float, value_range: float) -> bool:
    """
    True when a spread term cannot serve as a denominator.

    Args:
        spread: sum((v - mean)^2)
        value_range: max(v) - min(v), 0.0 for an empty sequence
    """
    if value_range == 0.0:
        return True
    return not spread > 0.0
