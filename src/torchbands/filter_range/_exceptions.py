"""Exceptions for the filter range algebra."""


class FilterRangeError(Exception):
    """Base exception for filter range errors."""

    pass


class InvalidBoundError(FilterRangeError, ValueError):
    """Raised when a primitive range receives an invalid bound.

    This occurs when:
    - A cutoff or band edge is negative, NaN, infinite or not a number
    - For band-pass/band-stop, low > high
    """

    pass


class RangeConflictError(FilterRangeError, ValueError):
    """Raised when a pass range and a stop range overlap.

    Parameters
    ----------
    pass_range : PrimitiveRange
        The pass-category range involved in the conflict.
    stop_range : BandStop
        The stop-category range involved in the conflict.
    low, high : float
        Bounds of the overlapping interval.
    """

    def __init__(self, pass_range, stop_range, low: float, high: float):
        self.pass_range = pass_range
        self.stop_range = stop_range
        self.low = low
        self.high = high
        interval = f"[{_format_frequency(low)}, {_format_frequency(high)}]"
        super().__init__(
            f"Pass/stop range overlap: {pass_range.label} and "
            f"{stop_range.label} share {interval}"
        )


class UnsupportedVariantError(FilterRangeError, TypeError):
    """Raised when an operation receives a range shape it cannot combine."""

    pass


def _format_frequency(value: float) -> str:
    if value == float("inf"):
        return "inf"
    if float(value).is_integer():
        return str(int(value))
    return str(value)
