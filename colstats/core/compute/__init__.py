"""
Shared compute infrastructure for colstats.

Submodules:
    reductions: Sums over validated sequences
    timing: Execution timing utilities
    tolerances: Degeneracy test and comparison tiers
"""

from colstats.core.compute.reductions import PairedSums
from colstats.core.compute.timing import Timer
from colstats.core.compute.tolerances import (
    ToleranceTier,
    is_degenerate,
)

__all__ = [
    "PairedSums",
    "Timer",
    "ToleranceTier",
    "is_degenerate",
]
