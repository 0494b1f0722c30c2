"""Small phrasing helpers shared by the narration clauses."""

from __future__ import annotations

from collections.abc import Iterable

_ORDINAL_WORDS = ("first", "second", "third")


def join_phrases(items: Iterable[str]) -> str:
    """Join phrases as ``a``, ``a and b`` or ``a, b and c``.

    Empty phrases are dropped so the result never carries a dangling "and".
    """

    phrases = [item for item in items if item]
    if not phrases:
        return ""
    if len(phrases) == 1:
        return phrases[0]
    return f"{', '.join(phrases[:-1])} and {phrases[-1]}"


def pluralize(noun: str, count: int) -> str:
    return noun if count == 1 else f"{noun}s"


def count_phrase(count: int, noun: str) -> str:
    """Return ``"1 cup"`` or ``"3 cups"``."""

    return f"{count} {pluralize(noun, count)}"


def _numeric_ordinal(position: int) -> str:
    if 10 <= position % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(position % 10, "th")
    return f"{position}{suffix}"


def ordinal(index: int, count: int) -> str:
    """Return the spoken ordinal for instance ``index`` (zero-based) of ``count``.

    Two instances read as "one" and "another"; three or more as "first",
    "second", "third", "4th" and so on. A lone instance has no ordinal.
    """

    if count <= 1:
        return ""
    if count == 2:
        return "one" if index == 0 else "another"
    if index < len(_ORDINAL_WORDS):
        return _ORDINAL_WORDS[index]
    return _numeric_ordinal(index + 1)
