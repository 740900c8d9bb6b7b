"""Primitive frequency ranges."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Optional

import torch
from torch import Tensor

from .._constants import DEFAULT_WINDOW
from ..filter._band_kernel import (
    Window,
    bandpass_kernel,
    bandstop_kernel,
    highpass_kernel,
    lowpass_kernel,
)
from ._exceptions import InvalidBoundError, _format_frequency

PASS = "pass"
STOP = "stop"


class PrimitiveRange:
    """An atomic band description on the frequency axis [0, inf).

    Every primitive has a ``category`` (``"pass"`` or ``"stop"``) and the
    bounds ``low`` and ``high`` of the interval it describes; ``high`` is
    ``math.inf`` for unbounded ranges. Primitives are immutable.

    A primitive is also a specification handle: ``add`` combines it with
    another primitive and returns the resulting handle, which may be a
    primitive, an aggregate, a combined specification or :class:`AllRange`.
    """

    category: str

    @property
    def label(self) -> str:
        """Human-readable description of the range."""
        raise NotImplementedError

    @property
    def ranges(self) -> tuple[PrimitiveRange, ...]:
        """Member primitives of this handle, i.e. ``(self,)``."""
        return (self,)

    def add(self, other: PrimitiveRange):
        """Return the specification holding this range and ``other``."""
        from ._add import add

        return add(self, other)

    def coefficients(
        self,
        sample_rate: float,
        half_order: int,
        window: Window = DEFAULT_WINDOW,
        *,
        dtype: Optional[torch.dtype] = None,
        device: Optional[torch.device] = None,
    ) -> Optional[Tensor]:
        """FIR coefficients of this band alone.

        Returns a tensor of shape (2 * half_order + 1,), or None when the
        band has no finite FIR representation.
        """
        raise NotImplementedError

    def __str__(self) -> str:
        return self.label


@dataclass(frozen=True)
class LowPass(PrimitiveRange):
    """Pass range [0, cutoff].

    Parameters
    ----------
    cutoff : float
        Upper edge of the pass band. Must be finite and non-negative.

    Examples
    --------
    >>> from torchbands.filter_range import LowPass
    >>> LowPass(10).label
    '[0, 10]'
    """

    cutoff: float

    category = PASS

    def __post_init__(self):
        object.__setattr__(
            self, "cutoff", _check_frequency("cutoff", self.cutoff)
        )

    @property
    def low(self) -> float:
        return 0.0

    @property
    def high(self) -> float:
        return self.cutoff

    @property
    def label(self) -> str:
        return f"[0, {_format_frequency(self.cutoff)}]"

    def coefficients(
        self,
        sample_rate: float,
        half_order: int,
        window: Window = DEFAULT_WINDOW,
        *,
        dtype: Optional[torch.dtype] = None,
        device: Optional[torch.device] = None,
    ) -> Optional[Tensor]:
        return lowpass_kernel(
            self.cutoff,
            sample_rate,
            half_order,
            window,
            dtype=dtype,
            device=device,
        )


@dataclass(frozen=True)
class HighPass(PrimitiveRange):
    """Pass range [cutoff, inf).

    Parameters
    ----------
    cutoff : float
        Lower edge of the pass band. Must be finite and non-negative.
    """

    cutoff: float

    category = PASS

    def __post_init__(self):
        object.__setattr__(
            self, "cutoff", _check_frequency("cutoff", self.cutoff)
        )

    @property
    def low(self) -> float:
        return self.cutoff

    @property
    def high(self) -> float:
        return math.inf

    @property
    def label(self) -> str:
        return f"[{_format_frequency(self.cutoff)}, inf)"

    def coefficients(
        self,
        sample_rate: float,
        half_order: int,
        window: Window = DEFAULT_WINDOW,
        *,
        dtype: Optional[torch.dtype] = None,
        device: Optional[torch.device] = None,
    ) -> Optional[Tensor]:
        return highpass_kernel(
            self.cutoff,
            sample_rate,
            half_order,
            window,
            dtype=dtype,
            device=device,
        )


@dataclass(frozen=True)
class BandPass(PrimitiveRange):
    """Pass range [low, high] with ``0 <= low <= high``."""

    low: float
    high: float

    category = PASS

    def __post_init__(self):
        low, high = _check_band(self.low, self.high)
        object.__setattr__(self, "low", low)
        object.__setattr__(self, "high", high)

    @property
    def label(self) -> str:
        return (
            f"[{_format_frequency(self.low)}, {_format_frequency(self.high)}]"
        )

    def coefficients(
        self,
        sample_rate: float,
        half_order: int,
        window: Window = DEFAULT_WINDOW,
        *,
        dtype: Optional[torch.dtype] = None,
        device: Optional[torch.device] = None,
    ) -> Optional[Tensor]:
        return bandpass_kernel(
            self.low,
            self.high,
            sample_rate,
            half_order,
            window,
            dtype=dtype,
            device=device,
        )


@dataclass(frozen=True)
class BandStop(PrimitiveRange):
    """Stop range rejecting [low, high] with ``0 <= low <= high``.

    Stop ranges are compared with each other and with pass ranges through
    the interval [low, high]; the synthesized kernel passes [0, low] and
    [high, Nyquist].
    """

    low: float
    high: float

    category = STOP

    def __post_init__(self):
        low, high = _check_band(self.low, self.high)
        object.__setattr__(self, "low", low)
        object.__setattr__(self, "high", high)

    @property
    def label(self) -> str:
        return (
            f"stop:[{_format_frequency(self.low)}, "
            f"{_format_frequency(self.high)}]"
        )

    def coefficients(
        self,
        sample_rate: float,
        half_order: int,
        window: Window = DEFAULT_WINDOW,
        *,
        dtype: Optional[torch.dtype] = None,
        device: Optional[torch.device] = None,
    ) -> Optional[Tensor]:
        return bandstop_kernel(
            self.low,
            self.high,
            sample_rate,
            half_order,
            window,
            dtype=dtype,
            device=device,
        )


class AllRange(PrimitiveRange):
    """The whole frequency axis [0, inf) as a single pass range.

    ``AllRange()`` always returns the same instance. It absorbs every pass
    range and conflicts with every stop range. Its kernel is the identity,
    which has no finite coefficient vector that could be summed with other
    bands, so :meth:`coefficients` returns None.
    """

    _instance: Optional[AllRange] = None

    category = PASS
    low = 0.0
    high = math.inf

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def label(self) -> str:
        return "all"

    def coefficients(
        self,
        sample_rate: float,
        half_order: int,
        window: Window = DEFAULT_WINDOW,
        *,
        dtype: Optional[torch.dtype] = None,
        device: Optional[torch.device] = None,
    ) -> Optional[Tensor]:
        return None

    def __repr__(self) -> str:
        return "AllRange()"


def _check_frequency(name: str, value) -> float:
    """Validate a single band edge and return it as a float."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidBoundError(f"{name} must be a real number, got {value!r}")
    value = float(value)
    if math.isnan(value) or math.isinf(value) or value < 0:
        raise InvalidBoundError(
            f"{name} must be a finite non-negative frequency, got {value}"
        )
    return value


def _check_band(low, high) -> tuple[float, float]:
    low = _check_frequency("low", low)
    high = _check_frequency("high", high)
    if low > high:
        raise InvalidBoundError(
            f"Band edges must satisfy low <= high, got low={low}, high={high}"
        )
    return low, high
