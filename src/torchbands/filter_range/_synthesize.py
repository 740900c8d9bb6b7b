"""FIR coefficient synthesis for filter specifications."""

from __future__ import annotations

import math
from typing import Optional

import torch
from torch import Tensor

from .._constants import DEFAULT_DTYPE, DEFAULT_WINDOW
from ..filter import OnlineFirFilter
from ..filter._band_kernel import Window
from ._aggregate import normalize
from ._render import render


def synthesize(
    specification,
    sample_rate: float,
    half_order: int,
    window: Window = DEFAULT_WINDOW,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Optional[Tensor]:
    """
    Synthesize FIR coefficients for a filter specification.

    Each range of the specification is synthesized on its own with the same
    parameters and the resulting kernels are summed elementwise.

    Parameters
    ----------
    specification : PrimitiveRange, PassAggregate, StopAggregate or CombinedSpecification
        The specification to synthesize.
    sample_rate : float
        Sampling frequency, in the units of the range bounds.
    half_order : int
        Half the number of taps, excluding the center tap.
    window : str or tuple or callable, optional
        Window applied to every band kernel. Default is "rectangular".
    dtype : torch.dtype, optional
        Output dtype. Defaults to torch.float64.
    device : torch.device, optional
        Output device. Defaults to CPU.

    Returns
    -------
    h : Tensor or None
        Coefficients of shape (2 * half_order + 1,), or None if any range
        has no finite FIR representation (such as :class:`AllRange`).

    Raises
    ------
    ValueError
        If ``sample_rate`` is not positive and finite, or ``half_order`` is
        not a non-negative integer.

    Examples
    --------
    >>> from torchbands.filter_range import BandPass, LowPass, synthesize
    >>> spec = LowPass(100).add(BandPass(200, 300))
    >>> synthesize(spec, 1000.0, 16).shape
    torch.Size([33])
    """
    # Rejects unknown shapes before any kernel runs
    render(specification)

    if not sample_rate > 0 or math.isinf(sample_rate):
        raise ValueError(
            f"sample_rate must be positive and finite, got {sample_rate}"
        )
    if (
        isinstance(half_order, bool)
        or int(half_order) != half_order
        or half_order < 0
    ):
        raise ValueError(
            f"half_order must be a non-negative integer, got {half_order}"
        )
    half_order = int(half_order)

    if dtype is None:
        dtype = DEFAULT_DTYPE
    if device is None:
        device = torch.device("cpu")

    h = torch.zeros(2 * half_order + 1, dtype=dtype, device=device)
    for r in normalize(specification).ranges:
        coefficients = r.coefficients(
            sample_rate, half_order, window, dtype=dtype, device=device
        )
        if coefficients is None:
            return None
        h = h + coefficients

    return h


def design_online_filter(
    specification,
    sample_rate: float,
    half_order: int,
    window: Window = DEFAULT_WINDOW,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Optional[OnlineFirFilter]:
    """
    Build a streaming FIR filter for a specification.

    Returns None when :func:`synthesize` returns None.

    Examples
    --------
    >>> from torchbands.filter_range import LowPass, design_online_filter
    >>> fir = design_online_filter(LowPass(100), 1000.0, 8)
    >>> fir.num_taps
    17
    """
    coefficients = synthesize(
        specification,
        sample_rate,
        half_order,
        window,
        dtype=dtype,
        device=device,
    )
    if coefficients is None:
        return None
    return OnlineFirFilter(coefficients)
