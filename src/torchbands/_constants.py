"""Constants for filter range synthesis."""

import torch

# Standard sample rates (Hz)
SAMPLE_RATE_TELEPHONY: float = 8000.0
SAMPLE_RATE_WIDEBAND: float = 16000.0
SAMPLE_RATE_CD: float = 44100.0
SAMPLE_RATE_DAT: float = 48000.0
SAMPLE_RATE_PROFESSIONAL: float = 96000.0

# Default sample rate for audio processing
SAMPLE_RATE_DEFAULT_AUDIO: float = SAMPLE_RATE_CD

# Plain truncated sinc keeps per-band kernels exactly additive
DEFAULT_WINDOW: str = "rectangular"

DEFAULT_DTYPE: torch.dtype = torch.float64
