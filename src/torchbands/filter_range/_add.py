"""Adding primitive ranges to filter specifications."""

from __future__ import annotations

import functools
from typing import Callable, Optional, Union

from ._aggregate import (
    PassAggregate,
    StopAggregate,
    merge,
    normalize,
    pass_shape,
    stop_shape,
    union_pass,
    union_stop,
)
from ._combined import CombinedSpecification
from ._compare import check_disjoint
from ._exceptions import UnsupportedVariantError
from ._primitive_range import AllRange, PrimitiveRange

Specification = Union[
    PrimitiveRange, PassAggregate, StopAggregate, CombinedSpecification
]


def add(
    specification: Specification, new_range: PrimitiveRange
) -> Specification:
    """
    Add a primitive range to a filter specification.

    Parameters
    ----------
    specification : PrimitiveRange, PassAggregate, StopAggregate or CombinedSpecification
        The current specification handle. It is not modified.
    new_range : PrimitiveRange
        The range to add.

    Returns
    -------
    Specification
        The new handle. Its type depends on both inputs: same-category
        ranges are merged (overlapping or touching ranges coalesce, disjoint
        ones form an aggregate), a pass and a stop side form a
        :class:`CombinedSpecification`, and pass ranges covering the whole
        axis collapse to :class:`AllRange`.

    Raises
    ------
    RangeConflictError
        If ``new_range`` overlaps a range of the opposite category. The
        error names the overlapping interval.
    UnsupportedVariantError
        If either argument is not a known range or specification shape.

    Examples
    --------
    >>> from torchbands.filter_range import BandPass, HighPass, LowPass, add
    >>> spec = add(LowPass(10), BandPass(20, 30))
    >>> str(add(spec, HighPass(10000)))
    '[0, 10] [20, 30] [10000, inf)'
    >>> str(add(spec, BandPass(5, 25)))
    '[0, 30]'
    """
    if not isinstance(new_range, PrimitiveRange):
        raise UnsupportedVariantError(
            f"Only primitive ranges can be added, got {new_range!r}"
        )

    # Pass ranges touching 0 or infinity take the variant their bounds imply
    specification = normalize(specification)
    new_range = normalize(new_range)

    rule = _RULES.get((_shape(specification), _kind(new_range)))
    if rule is None:
        raise UnsupportedVariantError(
            f"Cannot add {new_range!r} to {specification!r}"
        )
    return rule(specification, new_range)


def from_ranges(first: PrimitiveRange, *rest: PrimitiveRange) -> Specification:
    """
    Build a specification by adding ranges in order.

    Examples
    --------
    >>> from torchbands.filter_range import BandStop, LowPass, from_ranges
    >>> str(from_ranges(LowPass(10), BandStop(35, 38)))
    '[0, 10] stop:[35, 38]'
    """
    if not isinstance(first, PrimitiveRange):
        raise UnsupportedVariantError(
            f"Only primitive ranges can be added, got {first!r}"
        )
    return functools.reduce(add, rest, normalize(first))


def _absorb(specification, new_range):
    return AllRange()


def _merge_pass(specification, new_range):
    return pass_shape(merge(specification.ranges, new_range, union_pass))


def _merge_stop(specification, new_range):
    return stop_shape(merge(specification.ranges, new_range, union_stop))


def _with_stop(specification, new_range):
    # The constructor rejects overlaps, including AllRange against any stop
    return CombinedSpecification(specification, new_range)


def _with_pass(specification, new_range):
    return CombinedSpecification(new_range, specification)


def _combined_with_pass(specification, new_range):
    for stop in specification.stop_side.ranges:
        check_disjoint(new_range, stop)
    pass_side = add(specification.pass_side, new_range)
    return CombinedSpecification(pass_side, specification.stop_side)


def _combined_with_stop(specification, new_range):
    for passed in specification.pass_side.ranges:
        check_disjoint(passed, new_range)
    stop_side = add(specification.stop_side, new_range)
    return CombinedSpecification(specification.pass_side, stop_side)


# (shape of the specification, kind of the new range) -> rule
_RULES: dict[tuple[str, str], Callable] = {
    ("all", "all"): _absorb,
    ("all", "pass"): _absorb,
    ("all", "stop"): _with_stop,
    ("pass", "all"): _absorb,
    ("pass", "pass"): _merge_pass,
    ("pass", "stop"): _with_stop,
    ("stop", "all"): _with_pass,
    ("stop", "pass"): _with_pass,
    ("stop", "stop"): _merge_stop,
    ("pass_aggregate", "all"): _absorb,
    ("pass_aggregate", "pass"): _merge_pass,
    ("pass_aggregate", "stop"): _with_stop,
    ("stop_aggregate", "all"): _with_pass,
    ("stop_aggregate", "pass"): _with_pass,
    ("stop_aggregate", "stop"): _merge_stop,
    ("combined", "all"): _combined_with_pass,
    ("combined", "pass"): _combined_with_pass,
    ("combined", "stop"): _combined_with_stop,
}


def _kind(new_range: PrimitiveRange) -> str:
    if isinstance(new_range, AllRange):
        return "all"
    return new_range.category


def _shape(specification) -> Optional[str]:
    if isinstance(specification, PrimitiveRange):
        return _kind(specification)
    if isinstance(specification, PassAggregate):
        return "pass_aggregate"
    if isinstance(specification, StopAggregate):
        return "stop_aggregate"
    if isinstance(specification, CombinedSpecification):
        return "combined"
    return None
