"""Find the longest run of consecutive working slots."""

from __future__ import annotations

from collections.abc import Iterable


def longest_period(working_slots: Iterable[int]) -> int:
    """Return the length of the longest run of consecutive slot numbers."""
    slots = set(working_slots)
    longest = 0
    for slot in slots:
        if slot - 1 in slots:
            continue
        end = slot
        while end + 1 in slots:
            end += 1
        longest = max(longest, end - slot + 1)
    return longest


def longest_busy_time(working_slots: Iterable[Iterable[int]]) -> int:
    """Return the index of the first employee with the longest non-stop run."""
    periods = [longest_period(slots) for slots in working_slots]
    if not periods:
        raise ValueError("no schedules given")
    return periods.index(max(periods))