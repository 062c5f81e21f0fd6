"""Classify popularity scores as monotonic or fluctuating."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise


def popularity_analysis(scores: Sequence[int]) -> bool:
    """Return True if ``scores`` never decrease or never increase."""
    if not scores:
        raise ValueError("no scores given")
    pairs = list(pairwise(scores))
    increasing = all(a <= b for a, b in pairs)
    decreasing = all(a >= b for a, b in pairs)
    return increasing or decreasing