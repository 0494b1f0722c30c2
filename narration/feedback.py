"""Compose the final spoken feedback from narration and recognized text."""

from __future__ import annotations

MAX_SPOKEN_TEXT = 150
TRUNCATION_SUFFIX = "... and more text"
NO_OBJECTS_FEEDBACK = "No objects detected"

_PLACEHOLDER_TEXTS = ("No text detected", "No meaningful text detected")


def prepare_text_for_speech(recognized_text: str) -> str:
    """Return recognized text trimmed for speech, or ``""`` when meaningless."""

    text = (recognized_text or "").strip()
    if not text or any(placeholder in text for placeholder in _PLACEHOLDER_TEXTS):
        return ""
    if len(text) > MAX_SPOKEN_TEXT:
        return text[: MAX_SPOKEN_TEXT - len("...")] + TRUNCATION_SUFFIX
    return text


def compose_feedback(objects_summary: str, recognized_text: str = "") -> str:
    """Combine the object narration with any recognized text.

    Args:
        objects_summary: Narration for the detected objects, possibly empty.
        recognized_text: Raw text recognized in the same frame.

    Returns:
        A single string for the speech collaborator.
    """

    feedback = objects_summary.strip() or NO_OBJECTS_FEEDBACK
    spoken_text = prepare_text_for_speech(recognized_text)
    if spoken_text:
        feedback += f". I also found text: {spoken_text}"
    return feedback
