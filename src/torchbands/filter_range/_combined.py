"""Specifications holding both pass and stop ranges."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ._aggregate import PassAggregate, StopAggregate, normalize
from ._compare import check_disjoint
from ._exceptions import UnsupportedVariantError
from ._primitive_range import PASS, BandStop, PrimitiveRange

PassSide = Union[PrimitiveRange, PassAggregate]
StopSide = Union[BandStop, StopAggregate]


@dataclass(frozen=True)
class CombinedSpecification:
    """
    A pass side and a stop side that share no frequency.

    Parameters
    ----------
    pass_side : PrimitiveRange or PassAggregate
        A single pass range or an aggregate of pass ranges.
    stop_side : BandStop or StopAggregate
        A single stop range or an aggregate of stop ranges.

    Raises
    ------
    RangeConflictError
        If any pass range overlaps any stop range. The check runs at
        construction, so every instance satisfies the invariant.

    Examples
    --------
    >>> from torchbands.filter_range import BandPass, BandStop, LowPass
    >>> spec = LowPass(10).add(BandPass(20, 30)).add(BandStop(35, 38))
    >>> str(spec)
    '[0, 10] [20, 30] stop:[35, 38]'
    """

    pass_side: PassSide
    stop_side: StopSide

    def __post_init__(self):
        object.__setattr__(self, "pass_side", normalize(self.pass_side))
        if not _is_pass_side(self.pass_side):
            raise UnsupportedVariantError(
                f"pass side must be a pass range or PassAggregate, "
                f"got {self.pass_side!r}"
            )
        if not isinstance(self.stop_side, (BandStop, StopAggregate)):
            raise UnsupportedVariantError(
                f"stop side must be a BandStop or StopAggregate, "
                f"got {self.stop_side!r}"
            )
        for stop in self.stop_side.ranges:
            for passed in self.pass_side.ranges:
                check_disjoint(passed, stop)

    @property
    def ranges(self) -> tuple[PrimitiveRange, ...]:
        """Pass ranges followed by stop ranges, each side sorted."""
        return self.pass_side.ranges + self.stop_side.ranges

    def add(self, other: PrimitiveRange):
        """Return the specification holding these ranges and ``other``."""
        from ._add import add

        return add(self, other)

    def __str__(self) -> str:
        return " ".join(r.label for r in self.ranges)


def _is_pass_side(side) -> bool:
    if isinstance(side, PassAggregate):
        return True
    return isinstance(side, PrimitiveRange) and side.category == PASS
