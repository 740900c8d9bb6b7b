"""torchbands: composable frequency range specifications for FIR filters."""

from . import (
    filter,
    filter_range,
)
from ._constants import (
    SAMPLE_RATE_CD,
    SAMPLE_RATE_DAT,
    SAMPLE_RATE_DEFAULT_AUDIO,
    SAMPLE_RATE_PROFESSIONAL,
    SAMPLE_RATE_TELEPHONY,
    SAMPLE_RATE_WIDEBAND,
)

__all__ = [
    # Submodules
    "filter",
    "filter_range",
    # Constants
    "SAMPLE_RATE_CD",
    "SAMPLE_RATE_DAT",
    "SAMPLE_RATE_DEFAULT_AUDIO",
    "SAMPLE_RATE_PROFESSIONAL",
    "SAMPLE_RATE_TELEPHONY",
    "SAMPLE_RATE_WIDEBAND",
]

__version__ = "0.1.0"
