"""Sorted, merged collections of same-category ranges."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Sequence

from ._compare import GREATER, LESS, compare_ranges
from ._exceptions import UnsupportedVariantError
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


@dataclass(frozen=True)
class PassAggregate:
    """Two or more disjoint pass ranges, sorted ascending.

    Aggregates are normally obtained from :func:`add`, which keeps the
    invariant; constructing one directly validates it.

    Parameters
    ----------
    ranges : tuple of PrimitiveRange
        Pass ranges (not :class:`AllRange`), sorted ascending, no two of
        which overlap.

    Examples
    --------
    >>> from torchbands.filter_range import BandPass, LowPass
    >>> spec = LowPass(10).add(BandPass(20, 30))
    >>> spec.ranges
    (LowPass(cutoff=10.0), BandPass(low=20.0, high=30.0))
    """

    ranges: tuple[PrimitiveRange, ...]

    category = PASS

    def __post_init__(self):
        ranges = tuple(normalize(r) for r in self.ranges)
        _check_members(ranges, PASS, type(self).__name__)
        object.__setattr__(self, "ranges", ranges)

    def add(self, other: PrimitiveRange):
        """Return the specification holding these ranges and ``other``."""
        from ._add import add

        return add(self, other)

    def __str__(self) -> str:
        return " ".join(r.label for r in self.ranges)


@dataclass(frozen=True)
class StopAggregate:
    """Two or more disjoint :class:`BandStop` ranges, sorted ascending."""

    ranges: tuple[BandStop, ...]

    category = STOP

    def __post_init__(self):
        ranges = tuple(self.ranges)
        _check_members(ranges, STOP, type(self).__name__)
        object.__setattr__(self, "ranges", ranges)

    def add(self, other: PrimitiveRange):
        """Return the specification holding these ranges and ``other``."""
        from ._add import add

        return add(self, other)

    def __str__(self) -> str:
        return " ".join(r.label for r in self.ranges)


def merge(
    ranges: Sequence[PrimitiveRange],
    new: PrimitiveRange,
    union: Callable[[PrimitiveRange, PrimitiveRange], PrimitiveRange],
) -> tuple[PrimitiveRange, ...]:
    """
    Insert ``new`` into sorted disjoint ``ranges``.

    Entries below ``new`` are kept in front, entries above it behind, and
    every entry overlapping it is folded into it with ``union``. The result
    is again sorted and pairwise disjoint. ``new`` itself always passes
    through ``union``, so its variant matches its bounds even when nothing
    overlaps it.
    """
    before = []
    after = []
    merged = union(new, new)
    for r in ranges:
        order = compare_ranges(r, new)
        if order == LESS:
            before.append(r)
        elif order == GREATER:
            after.append(r)
        else:
            merged = union(merged, r)
    return (*before, merged, *after)


def union_pass(x: PrimitiveRange, y: PrimitiveRange) -> PrimitiveRange:
    """Smallest pass range covering two overlapping pass ranges."""
    low = min(x.low, y.low)
    high = max(x.high, y.high)
    if high == math.inf:
        if low == 0:
            return AllRange()
        return HighPass(low)
    if low == 0:
        return LowPass(high)
    return BandPass(low, high)


def normalize(r):
    """
    Return the variant of a pass range that matches its bounds.

    A pass range starting at 0 is a :class:`LowPass`, one reaching infinity
    is a :class:`HighPass`, and one doing both is :class:`AllRange`. Stop
    ranges and non-range values are returned unchanged.

    Examples
    --------
    >>> from torchbands.filter_range import BandPass, HighPass
    >>> from torchbands.filter_range._aggregate import normalize
    >>> normalize(BandPass(0, 5))
    LowPass(cutoff=5.0)
    >>> normalize(HighPass(0))
    AllRange()
    """
    if (
        isinstance(r, PrimitiveRange)
        and not isinstance(r, AllRange)
        and r.category == PASS
        and (r.low == 0 or r.high == math.inf)
    ):
        return union_pass(r, r)
    return r


def union_stop(x: BandStop, y: BandStop) -> BandStop:
    """Smallest stop range covering two overlapping stop ranges."""
    return BandStop(min(x.low, y.low), max(x.high, y.high))


def pass_shape(ranges: tuple[PrimitiveRange, ...]):
    """Wrap merged pass ranges in the smallest fitting handle."""
    # A union reaching AllRange has swallowed every other range
    if len(ranges) == 1:
        return ranges[0]
    return PassAggregate(ranges)


def stop_shape(ranges: tuple[BandStop, ...]):
    """Wrap merged stop ranges in the smallest fitting handle."""
    if len(ranges) == 1:
        return ranges[0]
    return StopAggregate(ranges)


def _check_members(
    ranges: tuple[PrimitiveRange, ...], category: str, owner: str
) -> None:
    for r in ranges:
        if (
            not isinstance(r, PrimitiveRange)
            or isinstance(r, AllRange)
            or r.category != category
        ):
            raise UnsupportedVariantError(
                f"{owner} cannot hold {r!r}; expected {category} ranges"
            )
    if len(ranges) < 2:
        raise ValueError(
            f"{owner} needs at least two ranges, got {len(ranges)}"
        )
    for x, y in zip(ranges, ranges[1:]):
        if compare_ranges(x, y) != LESS:
            raise ValueError(
                f"{owner} ranges must be sorted and disjoint, got "
                f"{x.label} before {y.label}"
            )
