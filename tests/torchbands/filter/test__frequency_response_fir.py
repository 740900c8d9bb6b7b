"""Tests for FIR frequency response evaluation."""

import math

import numpy as np
import torch
from numpy.testing import assert_allclose
from scipy import signal

from torchbands.filter import frequency_response_fir, lowpass_kernel


class TestFrequencyResponseFir:
    def test_matches_scipy_freqz(self):
        h = lowpass_kernel(100, 1000, 8, "hamming")
        freqs, response = frequency_response_fir(h, 8)
        w, h_scipy = signal.freqz(h.numpy(), worN=8)
        assert_allclose(freqs.numpy() * math.pi, w, rtol=1e-12)
        assert_allclose(response.numpy(), h_scipy, rtol=1e-10, atol=1e-12)

    def test_matches_scipy_freqz_hz(self):
        h = lowpass_kernel(100, 1000, 8)
        freqs, response = frequency_response_fir(
            h, 16, sampling_frequency=1000.0
        )
        w, h_scipy = signal.freqz(h.numpy(), worN=16, fs=1000.0)
        assert_allclose(freqs.numpy(), w, rtol=1e-12)
        assert_allclose(response.numpy(), h_scipy, rtol=1e-10, atol=1e-12)

    def test_whole(self):
        h = torch.tensor([0.25, 0.5, 0.25], dtype=torch.float64)
        freqs, _ = frequency_response_fir(h, 4, whole=True)
        torch.testing.assert_close(
            freqs, torch.tensor([0.0, 0.5, 1.0, 1.5], dtype=torch.float64)
        )

    def test_moving_average_dc_gain(self):
        h = torch.full((5,), 0.2, dtype=torch.float64)
        _, response = frequency_response_fir(
            h, torch.tensor([0.0], dtype=torch.float64)
        )
        assert abs(response[0].item() - 1.0) < 1e-12

    def test_explicit_frequencies(self):
        h = torch.tensor([0.5, 0.5], dtype=torch.float64)
        freqs = torch.tensor([0.0, 250.0, 500.0], dtype=torch.float64)
        _, response = frequency_response_fir(
            h, freqs, sampling_frequency=1000.0
        )
        assert_allclose(
            np.abs(response.numpy()),
            [1.0, math.sqrt(0.5), 0.0],
            atol=1e-12,
        )
