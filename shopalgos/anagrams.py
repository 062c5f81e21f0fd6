"""Group words that are anagrams of one another."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_LETTERS = 26


def _signature(word: str) -> tuple[int, ...]:
    """Return the letter-frequency signature of ``word``, ignoring case."""
    counts = [0] * _LETTERS
    for ch in word.lower():
        if not "a" <= ch <= "z":
            raise ValueError(f"word {word!r} contains a non a-z character {ch!r}")
        counts[ord(ch) - ord("a")] += 1
    return tuple(counts)


def word_grouping(words: Iterable[str]) -> list[list[str]]:
    """Group words sharing the same letters (case-insensitive).

    Groups appear in the order their first word was seen; words keep
    their original spelling and order within a group.
    """
    groups: dict[tuple[int, ...], list[str]] = {}
    for word in words:
        groups.setdefault(_signature(word), []).append(word)
    return list(groups.values())


def find_group(groups: Iterable[Sequence[str]], word: str) -> Sequence[str] | None:
    """Return the first group that contains ``word`` exactly, or None."""
    return next((group for group in groups if word in group), None)