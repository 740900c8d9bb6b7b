"""Benchmarks for filter specification synthesis.

This module compares torchbands synthesis and streaming filtering against
scipy baselines.
"""

from .bench_synthesize import BenchSynthesize

__all__ = [
    "BenchSynthesize",
]
