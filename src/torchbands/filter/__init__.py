"""Per-band FIR kernels and online filters.

This module provides the windowed-sinc kernels used to synthesize the
coefficients of individual frequency bands, an FIR frequency response helper
and stateful sample-by-sample filters.
"""

from ._band_kernel import (
    bandpass_kernel,
    bandstop_kernel,
    highpass_kernel,
    lowpass_kernel,
)
from ._frequency_response_fir import frequency_response_fir
from ._online_filter import (
    OnlineFilter,
    OnlineFirFilter,
    OnlineMedianFilter,
    SequentialOnlineFilter,
)

__all__ = [
    # Kernels
    "bandpass_kernel",
    "bandstop_kernel",
    "highpass_kernel",
    "lowpass_kernel",
    # Analysis
    "frequency_response_fir",
    # Online filters
    "OnlineFilter",
    "OnlineFirFilter",
    "OnlineMedianFilter",
    "SequentialOnlineFilter",
]
