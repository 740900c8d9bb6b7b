"""Human-readable rendering of filter specifications."""

from __future__ import annotations

from ._aggregate import PassAggregate, StopAggregate, normalize
from ._combined import CombinedSpecification
from ._exceptions import UnsupportedVariantError
from ._primitive_range import PrimitiveRange


def render(specification) -> tuple[str, ...]:
    """
    Describe every range of a specification.

    Labels follow the stored order: ascending position, with all pass
    ranges of a :class:`CombinedSpecification` before its stop ranges.

    Examples
    --------
    >>> from torchbands.filter_range import BandStop, HighPass, LowPass, render
    >>> render(LowPass(10).add(HighPass(10000)).add(BandStop(35, 38)))
    ('[0, 10]', '[10000, inf)', 'stop:[35, 38]')
    """
    if not isinstance(
        specification,
        (PrimitiveRange, PassAggregate, StopAggregate, CombinedSpecification),
    ):
        raise UnsupportedVariantError(
            f"Cannot render {specification!r}; expected a range specification"
        )
    return tuple(r.label for r in normalize(specification).ranges)
