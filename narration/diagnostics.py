"""Diagnostics routines for the narration subsystem."""

from __future__ import annotations

from diagnostics.models import DiagnosticResult, DiagnosticStatus
from narration.config import NarrationConfig, load_narration_config
from narration.narrator import SceneNarrator
from vision.detections import BoundingBox, Detection

_SAMPLE_SCENE = [
    Detection(
        label="person",
        confidence=0.92,
        bbox=BoundingBox(top=0.2, left=0.3, bottom=0.8, right=0.7),
    ),
    Detection(
        label="cup",
        confidence=0.85,
        bbox=BoundingBox(top=0.1, left=0.1, bottom=0.3, right=0.3),
    ),
]


def probe(config: NarrationConfig | None = None) -> DiagnosticResult:
    """Validate narration settings and narrate a canned scene.

    Args:
        config: Optional config to check instead of the YAML-loaded one.

    Returns:
        Diagnostic result with the sample narration in its details.
    """

    name = "narration"
    try:
        narration_config = config if config is not None else load_narration_config()
    except ValueError as exc:
        return DiagnosticResult(
            name=name,
            status=DiagnosticStatus.FAIL,
            details=f"Invalid narration config: {exc}",
        )

    text = SceneNarrator(narration_config).describe(_SAMPLE_SCENE)
    if text == narration_config.no_objects_phrase:
        return DiagnosticResult(
            name=name,
            status=DiagnosticStatus.WARN,
            details=(
                "Sample scene filtered out at threshold "
                f"{narration_config.confidence_threshold:.2f}"
            ),
        )
    return DiagnosticResult(
        name=name,
        status=DiagnosticStatus.PASS,
        details=f"Sample narration: {text}",
    )
