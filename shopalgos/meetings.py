"""Find overlapping time ranges between two meeting schedules."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def overlap(start_a: int, start_b: int, end_a: int, end_b: int) -> tuple[int, int] | None:
    """Return the intersection of [start_a, end_a] and [start_b, end_b].

    Ranges that merely touch do not count as overlapping.
    """
    start = max(start_a, start_b)
    end = min(end_a, end_b)
    if start < end:
        return (start, end)
    return None


def overlapping_meetings(
    meetings_a: Iterable[Sequence[int]], meetings_b: Iterable[Sequence[int]]
) -> list[tuple[int, int]]:
    """Return every overlap between a meeting of ``meetings_a`` and one of ``meetings_b``."""
    meetings_b = list(meetings_b)
    result = []
    for start_a, end_a in meetings_a:
        for start_b, end_b in meetings_b:
            common = overlap(start_a, start_b, end_a, end_b)
            if common is not None:
                result.append(common)
    return result