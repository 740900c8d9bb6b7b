"""Hypothesis strategies for filter range testing."""

from ._frequencies import frequencies
from ._ranges import (
    band_pass_ranges,
    band_stop_ranges,
    high_pass_ranges,
    low_pass_ranges,
    pass_ranges,
)

__all__ = [
    # Numeric strategies
    "frequencies",
    # Range strategies
    "low_pass_ranges",
    "high_pass_ranges",
    "band_pass_ranges",
    "band_stop_ranges",
    "pass_ranges",
]
