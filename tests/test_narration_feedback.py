"""Tests for spoken feedback composition."""

from __future__ import annotations

from narration.feedback import compose_feedback, prepare_text_for_speech


def test_feedback_falls_back_when_no_objects() -> None:
    assert compose_feedback("") == "No objects detected"


def test_feedback_appends_recognized_text() -> None:
    assert (
        compose_feedback("I can see 1 object: 1 sign", "EXIT")
        == "I can see 1 object: 1 sign. I also found text: EXIT"
    )


def test_placeholder_text_is_not_spoken() -> None:
    assert compose_feedback("Scene", "No text detected in image") == "Scene"
    assert prepare_text_for_speech("No meaningful text detected") == ""
    assert prepare_text_for_speech("   ") == ""


def test_long_text_is_truncated() -> None:
    spoken = prepare_text_for_speech("a" * 200)

    assert spoken == "a" * 147 + "... and more text"
    assert prepare_text_for_speech("b" * 150) == "b" * 150
