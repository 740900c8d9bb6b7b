"""Testing helpers for torchbands."""

from . import strategies

__all__ = ["strategies"]
