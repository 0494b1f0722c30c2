"""Stable detection schemas handed over by the capture pipeline.

Bounding boxes are expressed as ``(top, left, bottom, right)`` in the same unit
as the accompanying :class:`FrameSize`. Boxes that are already normalized use
the implicit unit frame ``FrameSize(1.0, 1.0)``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import Any


def _finite(value: float) -> float:
    value = float(value)
    if math.isnan(value) or math.isinf(value):
        return 0.0
    return value


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned box in frame coordinates."""

    top: float
    left: float
    bottom: float
    right: float

    @property
    def width(self) -> float:
        return max(0.0, self.right - self.left)

    @property
    def height(self) -> float:
        return max(0.0, self.bottom - self.top)

    @property
    def center_x(self) -> float:
        return (self.left + self.right) / 2

    @property
    def center_y(self) -> float:
        return (self.top + self.bottom) / 2

    @property
    def area(self) -> float:
        return self.width * self.height

    def is_degenerate(self) -> bool:
        """Return whether the box has no usable area."""

        return self.width <= 0.0 or self.height <= 0.0

    def clamped(self) -> "BoundingBox":
        """Return a copy with finite coordinates and non-negative extent."""

        top = _finite(self.top)
        left = _finite(self.left)
        return BoundingBox(
            top=top,
            left=left,
            bottom=max(top, _finite(self.bottom)),
            right=max(left, _finite(self.right)),
        )


@dataclass(frozen=True)
class FrameSize:
    """Reference frame the bounding boxes are measured against."""

    width: float = 1.0
    height: float = 1.0

    @property
    def area(self) -> float:
        return self.width * self.height

    def is_degenerate(self) -> bool:
        return not (self.width > 0.0 and self.height > 0.0)


UNIT_FRAME = FrameSize()


@dataclass(frozen=True)
class Detection:
    """Single object detection result."""

    label: str
    confidence: float
    bbox: BoundingBox
    metadata: dict[str, Any] = field(default_factory=dict)

    def clamped(self) -> "Detection":
        """Return a copy with confidence in ``[0, 1]`` and a sanitized box."""

        confidence = min(1.0, max(0.0, _finite(self.confidence)))
        return Detection(
            label=self.label,
            confidence=confidence,
            bbox=self.bbox.clamped(),
            metadata=self.metadata,
        )


@dataclass(frozen=True)
class DetectionEvent:
    """Detection snapshot for one processed frame or sampling instant."""

    timestamp_ms: int
    detections: list[Detection]
    frame: FrameSize = UNIT_FRAME
    frame_id: int | None = None
    source: str = "camera"


def detection_from_dict(record: dict[str, Any]) -> Detection:
    """Build a detection from a ``{label, confidence, boundingBox}`` record.

    Both ``boundingBox`` and ``bbox`` keys are accepted for the box mapping.
    """

    box = record.get("boundingBox", record.get("bbox")) or {}
    return Detection(
        label=str(record.get("label", "")),
        confidence=float(record.get("confidence", 0.0)),
        bbox=BoundingBox(
            top=float(box.get("top", 0.0)),
            left=float(box.get("left", 0.0)),
            bottom=float(box.get("bottom", 0.0)),
            right=float(box.get("right", 0.0)),
        ),
    )
