"""Sample-by-sample (online) filters."""

from __future__ import annotations

import bisect
from collections import deque
from typing import Iterable

import torch
from torch import Tensor


class OnlineFilter:
    """Base class for stateful filters processing one sample at a time.

    Subclasses implement :meth:`process_sample` and :meth:`reset`;
    :meth:`process_samples` feeds a block through :meth:`process_sample` and
    may be overridden with a vectorized equivalent.
    """

    def process_sample(self, sample: float) -> float:
        """Filter a single sample and return the output sample."""
        raise NotImplementedError

    def process_samples(self, samples: Tensor) -> Tensor:
        """Filter a 1-D block of samples, continuing from the current state."""
        # Integer input still yields fractional outputs
        if not samples.is_floating_point():
            samples = samples.to(torch.get_default_dtype())
        out = torch.empty_like(samples)
        for i, sample in enumerate(samples.tolist()):
            out[i] = self.process_sample(sample)
        return out

    def reset(self) -> None:
        """Return the filter to its initial state."""
        raise NotImplementedError


class OnlineFirFilter(OnlineFilter):
    """Causal FIR filter ``y[n] = sum_k h[k] x[n - k]``.

    Parameters
    ----------
    coefficients : Tensor
        FIR coefficients ``h``, shape (num_taps,).

    Examples
    --------
    >>> import torch
    >>> from torchbands.filter import OnlineFirFilter
    >>> fir = OnlineFirFilter(torch.tensor([0.5, 0.5], dtype=torch.float64))
    >>> fir.process_sample(1.0)
    0.5
    >>> fir.process_sample(1.0)
    1.0
    """

    def __init__(self, coefficients: Tensor):
        if coefficients.ndim != 1 or coefficients.numel() == 0:
            raise ValueError(
                "coefficients must be a non-empty 1-D tensor, got shape "
                f"{tuple(coefficients.shape)}"
            )
        self.coefficients = coefficients
        # Previous num_taps - 1 inputs, oldest first
        self._history = torch.zeros(
            coefficients.numel() - 1,
            dtype=coefficients.dtype,
            device=coefficients.device,
        )

    @property
    def num_taps(self) -> int:
        return self.coefficients.numel()

    def process_sample(self, sample: float) -> float:
        x = torch.tensor(
            [sample],
            dtype=self.coefficients.dtype,
            device=self.coefficients.device,
        )
        return self.process_samples(x).item()

    def process_samples(self, samples: Tensor) -> Tensor:
        samples = samples.to(
            dtype=self.coefficients.dtype, device=self.coefficients.device
        )
        if samples.numel() == 0:
            return samples.clone()
        n = self.num_taps
        full = torch.cat([self._history, samples])
        # Row i holds full[i : i + n]; its last entry is the current input
        frames = full.unfold(0, n, 1)
        out = frames @ self.coefficients.flip(0)
        if n > 1:
            self._history = full[-(n - 1) :].clone()
        return out

    def reset(self) -> None:
        self._history.zero_()


class OnlineMedianFilter(OnlineFilter):
    """Running median over the last ``2 * half_window_size + 1`` samples.

    While fewer samples than the window size have been seen, the median of
    the samples seen so far is returned. The median of an even number of
    samples is the mean of the two middle values.

    Parameters
    ----------
    half_window_size : int
        Half the window length, excluding the center sample.
    """

    def __init__(self, half_window_size: int):
        if half_window_size < 0:
            raise ValueError(
                f"half_window_size must be non-negative, got {half_window_size}"
            )
        self.window_size = 2 * half_window_size + 1
        self._buffer: deque[float] = deque()
        self._ordered: list[float] = []

    def process_sample(self, sample: float) -> float:
        if len(self._buffer) == self.window_size:
            oldest = self._buffer.popleft()
            del self._ordered[bisect.bisect_left(self._ordered, oldest)]
        self._buffer.append(sample)
        bisect.insort(self._ordered, sample)

        count = len(self._ordered)
        mid = count // 2
        if count % 2 == 0:
            return (self._ordered[mid - 1] + self._ordered[mid]) / 2
        return self._ordered[mid]

    def reset(self) -> None:
        self._buffer.clear()
        self._ordered.clear()


class SequentialOnlineFilter(OnlineFilter):
    """Chain of online filters, each fed the output of the previous one.

    Parameters
    ----------
    filters : iterable of OnlineFilter
        Filters in application order.
    """

    def __init__(self, filters: Iterable[OnlineFilter]):
        self.filters = tuple(filters)

    def process_sample(self, sample: float) -> float:
        for f in self.filters:
            sample = f.process_sample(sample)
        return sample

    def process_samples(self, samples: Tensor) -> Tensor:
        # Causal filters: filtering the whole block stage by stage is
        # equivalent to interleaving them per sample.
        for f in self.filters:
            samples = f.process_samples(samples)
        return samples

    def reset(self) -> None:
        for f in self.filters:
            f.reset()
