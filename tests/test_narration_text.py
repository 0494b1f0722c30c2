"""Tests for shared phrasing helpers."""

from __future__ import annotations

from narration.text import count_phrase, join_phrases, ordinal


def test_join_phrases_rules() -> None:
    assert join_phrases(["person"]) == "person"
    assert join_phrases(["person", "cup"]) == "person and cup"
    assert join_phrases(["person", "cup", "chair"]) == "person, cup and chair"


def test_join_phrases_drops_empty_items() -> None:
    assert join_phrases([]) == ""
    assert join_phrases(["", "cup", ""]) == "cup"


def test_count_phrase_pluralizes_above_one() -> None:
    assert count_phrase(1, "cup") == "1 cup"
    assert count_phrase(3, "cup") == "3 cups"


def test_ordinals_by_group_size() -> None:
    assert ordinal(0, 1) == ""
    assert [ordinal(index, 2) for index in range(2)] == ["one", "another"]
    assert [ordinal(index, 5) for index in range(5)] == ["first", "second", "third", "4th", "5th"]
    assert ordinal(20, 30) == "21st"
    assert ordinal(11, 30) == "12th"
