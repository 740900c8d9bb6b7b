"""Benchmarks for filter specification synthesis.

This module compares torchbands synthesis against summed scipy.signal.firwin
designs, and streaming FIR filtering against scipy.signal.lfilter.
"""

from __future__ import annotations

import time
from typing import Any, Callable

import numpy as np
import torch

# scipy imports - handle optional dependency
try:
    from scipy import signal as scipy_signal

    SCIPY_AVAILABLE = True
except ImportError:
    SCIPY_AVAILABLE = False

from torchbands.filter import OnlineFirFilter
from torchbands.filter_range import (
    BandPass,
    BandStop,
    HighPass,
    LowPass,
    from_ranges,
    synthesize,
)

SAMPLE_RATE = 48000.0


_UNITS = ((1.0, "s"), (1e-3, "ms"), (1e-6, "us"), (1e-9, "ns"))


def time_calls(
    func: Callable, *args: Any, warmup: int = 3, iterations: int = 10
) -> np.ndarray:
    """Wall-clock seconds of ``iterations`` calls after ``warmup`` calls."""
    for _ in range(warmup):
        func(*args)

    times = np.empty(iterations)
    for i in range(iterations):
        start = time.perf_counter()
        func(*args)
        times[i] = time.perf_counter() - start
    return times


def describe(times: np.ndarray) -> str:
    """Mean and spread of ``times`` in the largest unit below the mean."""
    mean = times.mean()
    scale, unit = next(
        ((s, u) for s, u in _UNITS if mean >= s), _UNITS[-1]
    )
    return f"{mean / scale:.3f}{unit} +/- {times.std() / scale:.3f}{unit}"


def report(name: str, timings: dict[str, np.ndarray]) -> None:
    """Print one line per library, with the ratio to the first entry."""
    print(f"\n{name}")
    print("-" * len(name))
    reference = None
    for library, times in timings.items():
        line = f"  {library:<11} {describe(times)}"
        if reference is None:
            reference = times.mean()
        else:
            line += f"  ({times.mean() / reference:.2f}x torchbands)"
        print(line)


def _firwin_sum(spec, num_taps: int) -> np.ndarray:
    """Sum unscaled boxcar firwin designs for every band of ``spec``."""
    h = np.zeros(num_taps)
    for r in spec.ranges:
        if isinstance(r, LowPass):
            h += scipy_signal.firwin(
                num_taps, r.high, window="boxcar", scale=False, fs=SAMPLE_RATE
            )
        elif isinstance(r, HighPass):
            h += scipy_signal.firwin(
                num_taps,
                r.low,
                window="boxcar",
                pass_zero=False,
                scale=False,
                fs=SAMPLE_RATE,
            )
        else:
            h += scipy_signal.firwin(
                num_taps,
                [r.low, r.high],
                window="boxcar",
                pass_zero=isinstance(r, BandStop),
                scale=False,
                fs=SAMPLE_RATE,
            )
    return h


class BenchSynthesize:
    """Benchmarks for specification synthesis and streaming filtering."""

    def __init__(self, warmup: int = 3, iterations: int = 10):
        self.warmup = warmup
        self.iterations = iterations
        self.spec = from_ranges(
            LowPass(300),
            BandPass(1000, 2000),
            HighPass(12000),
            BandStop(5000, 6000),
        )

    def _compare(self, name: str, ours: Callable, scipy: Callable) -> None:
        timings = {"torchbands": self._time(ours)}
        if SCIPY_AVAILABLE:
            timings["scipy"] = self._time(scipy)
        report(name, timings)

    def _time(self, func: Callable) -> np.ndarray:
        return time_calls(
            func, warmup=self.warmup, iterations=self.iterations
        )

    def bench_synthesize(self, half_order: int = 50) -> None:
        """Benchmark synthesize vs a sum of scipy.signal.firwin designs.

        Parameters
        ----------
        half_order : int, optional
            Half the kernel length. Default is 50.
        """
        self._compare(
            f"synthesize (half_order={half_order})",
            lambda: synthesize(self.spec, SAMPLE_RATE, half_order),
            lambda: _firwin_sum(self.spec, 2 * half_order + 1),
        )

    def bench_online_fir(
        self, half_order: int = 50, num_samples: int = 48000
    ) -> None:
        """Benchmark OnlineFirFilter vs scipy.signal.lfilter.

        Parameters
        ----------
        half_order : int, optional
            Half the kernel length. Default is 50.
        num_samples : int, optional
            Signal length. Default is 48000.
        """
        h = synthesize(self.spec, SAMPLE_RATE, half_order)
        x = torch.randn(num_samples, dtype=torch.float64)
        h_np, x_np = h.numpy(), x.numpy()

        self._compare(
            f"OnlineFirFilter (half_order={half_order}, n={num_samples})",
            lambda: OnlineFirFilter(h).process_samples(x),
            lambda: scipy_signal.lfilter(h_np, [1.0], x_np),
        )

    def run_all(self) -> None:
        """Run all synthesis benchmarks."""
        print("SYNTHESIS BENCHMARKS")
        self.bench_synthesize()
        self.bench_online_fir()

    def run_scaling(self) -> None:
        """Time synthesis for growing kernel lengths."""
        print("HALF ORDER SCALING")
        for half_order in (8, 32, 128, 512):
            self.bench_synthesize(half_order=half_order)


if __name__ == "__main__":
    bench = BenchSynthesize(warmup=5, iterations=20)
    bench.run_all()
    print()
    bench.run_scaling()
