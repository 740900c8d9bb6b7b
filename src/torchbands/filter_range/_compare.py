"""Three-way ordering of frequency ranges with overlap detection."""

from __future__ import annotations

import functools

from ._exceptions import RangeConflictError

LESS = -1
OVERLAP = 0
GREATER = 1


def compare_ranges(x, y) -> int:
    """
    Compare two ranges by position on the frequency axis.

    Parameters
    ----------
    x, y : PrimitiveRange
        Ranges with ``low`` and ``high`` bounds.

    Returns
    -------
    int
        ``LESS`` (-1) if ``x`` lies entirely below ``y``, ``GREATER`` (1) if
        entirely above, ``OVERLAP`` (0) otherwise. Ranges sharing only an
        endpoint overlap.

    Notes
    -----
    This predicate is not a total order on arbitrary ranges, but it is one
    on any collection of pairwise non-overlapping ranges, which is the only
    place it is used for sorting.

    Examples
    --------
    >>> from torchbands.filter_range import BandPass, LowPass, compare_ranges
    >>> compare_ranges(LowPass(10), BandPass(20, 30))
    -1
    >>> compare_ranges(LowPass(20), BandPass(20, 30))
    0
    """
    if x.high < y.low:
        return LESS
    if x.low > y.high:
        return GREATER
    return OVERLAP


range_sort_key = functools.cmp_to_key(compare_ranges)


def overlaps(x, y) -> bool:
    """Return True if ``x`` and ``y`` share at least one frequency."""
    return compare_ranges(x, y) == OVERLAP


def intersection(x, y) -> tuple[float, float]:
    """Bounds of the interval shared by two overlapping ranges."""
    return max(x.low, y.low), min(x.high, y.high)


def check_disjoint(pass_range, stop_range) -> None:
    """
    Raise if a pass range and a stop range overlap.

    Raises
    ------
    RangeConflictError
        Carrying the overlapping interval ``[low, high]``.
    """
    if overlaps(pass_range, stop_range):
        low, high = intersection(pass_range, stop_range)
        raise RangeConflictError(pass_range, stop_range, low, high)
