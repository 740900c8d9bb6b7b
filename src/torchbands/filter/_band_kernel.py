"""Windowed-sinc FIR kernels for single frequency bands."""

from __future__ import annotations

import math
import warnings
from typing import Callable, Optional, Union

import torch
from torch import Tensor

from .._constants import DEFAULT_DTYPE, DEFAULT_WINDOW

Window = Union[str, tuple[str, float], Callable[[int], Tensor]]


def lowpass_kernel(
    cutoff: float,
    sample_rate: float,
    half_order: int,
    window: Window = DEFAULT_WINDOW,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    FIR kernel passing the band [0, cutoff].

    Parameters
    ----------
    cutoff : float
        Cutoff frequency, in the same units as ``sample_rate``.
    sample_rate : float
        Sampling frequency of the system.
    half_order : int
        Half the kernel length, excluding the center tap. The kernel has
        ``2 * half_order + 1`` coefficients.
    window : str or tuple or callable, optional
        Window applied to the truncated sinc. One of "rectangular",
        "hamming", "hann", "blackman", "bartlett", ``("kaiser", beta)`` or a
        callable taking the number of taps. Default is "rectangular".
    dtype : torch.dtype, optional
        Output dtype. Defaults to torch.float64.
    device : torch.device, optional
        Output device. Defaults to CPU.

    Returns
    -------
    h : Tensor
        Kernel coefficients, shape (2 * half_order + 1,).

    Notes
    -----
    With ``nu = 2 * cutoff / sample_rate`` and ``t = n - half_order`` the
    unwindowed kernel is ``nu * sinc(nu * t)``. No gain normalization is
    applied, so kernels of disjoint bands can be summed.

    Examples
    --------
    >>> from torchbands.filter import lowpass_kernel
    >>> h = lowpass_kernel(100.0, 1000.0, 25)
    >>> h.shape
    torch.Size([51])
    """
    t, win = _prepare(sample_rate, half_order, window, device)
    nu = _normalize(cutoff, sample_rate)
    h = _sinc_lowpass(t, nu) * win
    return _finish(h, dtype)


def highpass_kernel(
    cutoff: float,
    sample_rate: float,
    half_order: int,
    window: Window = DEFAULT_WINDOW,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    FIR kernel passing the band [cutoff, Nyquist].

    Computed by spectral inversion of :func:`lowpass_kernel`. See
    :func:`lowpass_kernel` for the parameters.
    """
    t, win = _prepare(sample_rate, half_order, window, device)
    nu = _normalize(cutoff, sample_rate)
    h = (_delta(t) - _sinc_lowpass(t, nu)) * win
    return _finish(h, dtype)


def bandpass_kernel(
    low: float,
    high: float,
    sample_rate: float,
    half_order: int,
    window: Window = DEFAULT_WINDOW,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    FIR kernel passing the band [low, high].

    The difference of two low-pass kernels. ``low`` must not exceed
    ``high``. See :func:`lowpass_kernel` for the remaining parameters.
    """
    if low > high:
        raise ValueError(
            f"Band edges must satisfy low <= high, got [{low}, {high}]"
        )
    t, win = _prepare(sample_rate, half_order, window, device)
    nu_low = _normalize(low, sample_rate)
    nu_high = _normalize(high, sample_rate)
    h = (_sinc_lowpass(t, nu_high) - _sinc_lowpass(t, nu_low)) * win
    return _finish(h, dtype)


def bandstop_kernel(
    low: float,
    high: float,
    sample_rate: float,
    half_order: int,
    window: Window = DEFAULT_WINDOW,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    FIR kernel rejecting the band [low, high].

    Spectral inversion of :func:`bandpass_kernel`, passing [0, low] and
    [high, Nyquist].
    """
    if low > high:
        raise ValueError(
            f"Band edges must satisfy low <= high, got [{low}, {high}]"
        )
    t, win = _prepare(sample_rate, half_order, window, device)
    nu_low = _normalize(low, sample_rate)
    nu_high = _normalize(high, sample_rate)
    band = _sinc_lowpass(t, nu_high) - _sinc_lowpass(t, nu_low)
    h = (_delta(t) - band) * win
    return _finish(h, dtype)


def _prepare(
    sample_rate: float,
    half_order: int,
    window: Window,
    device: Optional[torch.device],
) -> tuple[Tensor, Tensor]:
    """Validate common arguments, return tap offsets and the window."""
    if not sample_rate > 0 or math.isinf(sample_rate):
        raise ValueError(
            f"sample_rate must be positive and finite, got {sample_rate}"
        )
    if int(half_order) != half_order or half_order < 0:
        raise ValueError(
            f"half_order must be a non-negative integer, got {half_order}"
        )
    half_order = int(half_order)

    if device is None:
        device = torch.device("cpu")

    num_taps = 2 * half_order + 1
    n = torch.arange(num_taps, dtype=torch.float64, device=device)
    t = n - half_order
    win = _get_window(window, num_taps, torch.float64, device)
    return t, win


def _normalize(frequency: float, sample_rate: float) -> float:
    """Normalize a frequency to Nyquist units, clipping at Nyquist."""
    nu = 2.0 * frequency / sample_rate
    if nu > 1.0:
        warnings.warn(
            f"Frequency {frequency} exceeds the Nyquist frequency "
            f"{sample_rate / 2.0}; clipping to Nyquist",
            UserWarning,
            stacklevel=3,
        )
        nu = 1.0
    return nu


def _sinc_lowpass(t: Tensor, nu: float) -> Tensor:
    # nu * sinc(nu * t) == sin(pi * nu * t) / (pi * t), with value nu at t == 0
    if nu <= 0:
        return torch.zeros_like(t)
    return nu * torch.sinc(nu * t)


def _delta(t: Tensor) -> Tensor:
    return (t == 0).to(t.dtype)


def _finish(h: Tensor, dtype: Optional[torch.dtype]) -> Tensor:
    if dtype is None:
        dtype = DEFAULT_DTYPE
    return h.to(dtype)


# Generalized cosine windows: w[n] = sum_k (-1)^k a_k cos(2 pi k n / (N - 1))
_COSINE_WINDOWS = {
    "hamming": (0.54, 0.46),
    "hann": (0.5, 0.5),
    "blackman": (0.42, 0.5, 0.08),
}


def _get_window(
    window: Window,
    num_taps: int,
    dtype: torch.dtype,
    device: torch.device,
) -> Tensor:
    """Symmetric window of length ``num_taps``."""
    if callable(window):
        return window(num_taps).to(dtype=dtype, device=device)

    name, beta = window if isinstance(window, tuple) else (window, None)
    name = name.lower()

    if name not in _COSINE_WINDOWS and name not in (
        "rectangular",
        "boxcar",
        "bartlett",
        "kaiser",
    ):
        raise ValueError(f"Unknown window type: {name}")

    # A single tap, or no taper at all
    if num_taps == 1 or name in ("rectangular", "boxcar"):
        return torch.ones(num_taps, dtype=dtype, device=device)

    # Position in [-1, 1] across the window
    x = torch.linspace(-1.0, 1.0, num_taps, dtype=dtype, device=device)

    if name in _COSINE_WINDOWS:
        return sum(
            a * torch.cos(math.pi * k * x)
            for k, a in enumerate(_COSINE_WINDOWS[name])
        )

    if name == "bartlett":
        return 1.0 - x.abs()

    if beta is None:
        beta = 8.6
    beta = torch.tensor(beta, dtype=dtype, device=device)
    return torch.special.i0(beta * torch.sqrt(1.0 - x**2)) / torch.special.i0(
        beta
    )
