"""Frequency response computation for FIR filters."""

import math
from typing import Optional, Tuple, Union

import torch
from torch import Tensor


def frequency_response_fir(
    coefficients: Tensor,
    frequencies: Union[Tensor, int] = 512,
    whole: bool = False,
    sampling_frequency: Optional[float] = None,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tuple[Tensor, Tensor]:
    """
    Compute frequency response of an FIR filter.

    Parameters
    ----------
    coefficients : Tensor
        FIR filter coefficients, shape (num_taps,).
    frequencies : Tensor or int, default 512
        If int: Number of frequency points to compute.
        If Tensor: Specific frequency points at which to evaluate.
    whole : bool, default False
        If True and frequencies is int, compute from 0 to the sampling
        frequency instead of 0 to Nyquist.
    sampling_frequency : float, optional
        If None: frequencies are normalized [0, 1] where 1 = Nyquist.
        If provided: frequencies are in Hz.
    dtype : torch.dtype, optional
        Output dtype for the frequency points. Defaults to the dtype of
        ``coefficients``.
    device : torch.device, optional
        Output device. Defaults to the device of ``coefficients``.

    Returns
    -------
    frequencies : Tensor
        Frequency points.
    response : Tensor
        Complex frequency response H(e^{jw}).

    Notes
    -----
    The response is evaluated directly as

    .. math::
        H(e^{j\\omega}) = \\sum_{k=0}^{N-1} h_k e^{-j\\omega k}

    Examples
    --------
    >>> import torch
    >>> from torchbands.filter import frequency_response_fir
    >>> h = torch.tensor([1/3, 1/3, 1/3], dtype=torch.float64)
    >>> freqs, response = frequency_response_fir(h, 8)
    >>> freqs.shape
    torch.Size([8])
    """
    if dtype is None:
        dtype = coefficients.dtype
    if device is None:
        device = coefficients.device

    nyquist = 1.0 if sampling_frequency is None else sampling_frequency / 2.0

    if isinstance(frequencies, int):
        upper = 2.0 if whole else 1.0
        freqs = (
            torch.arange(frequencies, dtype=dtype, device=device)
            * upper
            / frequencies
            * nyquist
        )
    else:
        freqs = frequencies.to(dtype=dtype, device=device)

    # Angular frequency in rad/sample
    w = math.pi * freqs / nyquist

    h = coefficients.to(device=device)
    k = torch.arange(h.shape[-1], dtype=w.dtype, device=device)
    phase = torch.exp(-1j * w.unsqueeze(-1) * k)
    response = torch.sum(h.to(phase.dtype) * phase, dim=-1)

    return freqs, response
