"""Composable frequency range specifications for FIR filters.

A filter specification is built by adding primitive ranges (low-pass,
high-pass, band-pass, band-stop) one at a time. Ranges of the same category
are kept sorted and merged, pass and stop ranges are checked for overlap as
soon as they meet, and the final specification is synthesized into FIR
coefficients by summing the kernels of its ranges.

Examples
--------
>>> from torchbands.filter_range import BandPass, BandStop, HighPass, LowPass
>>> spec = LowPass(10).add(BandPass(20, 30)).add(HighPass(10000))
>>> spec = spec.add(BandStop(35, 38))
>>> str(spec)
'[0, 10] [20, 30] [10000, inf) stop:[35, 38]'
"""

from ._add import Specification, add, from_ranges
from ._aggregate import PassAggregate, StopAggregate
from ._combined import CombinedSpecification
from ._compare import (
    GREATER,
    LESS,
    OVERLAP,
    compare_ranges,
    intersection,
    overlaps,
)
from ._exceptions import (
    FilterRangeError,
    InvalidBoundError,
    RangeConflictError,
    UnsupportedVariantError,
)
from ._primitive_range import (
    PASS,
    STOP,
    AllRange,
    BandPass,
    BandStop,
    HighPass,
    LowPass,
    PrimitiveRange,
)
from ._render import render
from ._synthesize import design_online_filter, synthesize

__all__ = [
    # Primitive ranges
    "AllRange",
    "BandPass",
    "BandStop",
    "HighPass",
    "LowPass",
    "PrimitiveRange",
    "PASS",
    "STOP",
    # Specifications
    "CombinedSpecification",
    "PassAggregate",
    "Specification",
    "StopAggregate",
    # Operations
    "add",
    "from_ranges",
    "render",
    "synthesize",
    "design_online_filter",
    # Ordering
    "compare_ranges",
    "intersection",
    "overlaps",
    "GREATER",
    "LESS",
    "OVERLAP",
    # Exceptions
    "FilterRangeError",
    "InvalidBoundError",
    "RangeConflictError",
    "UnsupportedVariantError",
]
