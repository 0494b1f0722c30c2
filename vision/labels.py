"""COCO label lookup and raw detector output parsing."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from core.logging import logger
from vision.detections import BoundingBox, Detection

COCO_LABELS: tuple[str, ...] = (
    "person", "bicycle", "car", "motorcycle", "airplane", "bus", "train", "truck", "boat",
    "traffic light", "fire hydrant", "stop sign", "parking meter", "bench", "bird", "cat",
    "dog", "horse", "sheep", "cow", "elephant", "bear", "zebra", "giraffe", "backpack",
    "umbrella", "handbag", "tie", "suitcase", "frisbee", "skis", "snowboard", "sports ball",
    "kite", "baseball bat", "baseball glove", "skateboard", "surfboard", "tennis racket",
    "bottle", "wine glass", "cup", "fork", "knife", "spoon", "bowl", "banana", "apple",
    "sandwich", "orange", "broccoli", "carrot", "hot dog", "pizza", "donut", "cake", "chair",
    "couch", "potted plant", "bed", "dining table", "toilet", "tv", "laptop", "mouse",
    "remote", "keyboard", "cell phone", "microwave", "oven", "toaster", "sink",
    "refrigerator", "book", "clock", "vase", "scissors", "teddy bear", "hair drier",
    "toothbrush",
)

UNKNOWN_LABEL = "unknown"
PLACEHOLDER_LABEL = "???"


def label_for_index(class_index: int, labels: Sequence[str] = COCO_LABELS) -> str:
    """Return the label for a class index, or ``"unknown"``.

    Placeholder entries (``"???"``) found in some label files also map to
    ``"unknown"``.
    """

    if 0 <= class_index < len(labels):
        label = labels[class_index].strip()
        return UNKNOWN_LABEL if label == PLACEHOLDER_LABEL else label
    return UNKNOWN_LABEL


def load_labels(text: str) -> list[str]:
    """Split a newline-delimited label file into a label list."""

    return [line.strip() for line in text.splitlines()]


def parse_detections(
    raw_result: dict[str, Any],
    confidence_threshold: float = 0.5,
    labels: Sequence[str] = COCO_LABELS,
) -> list[Detection]:
    """Convert raw detector output into detections above the threshold.

    Args:
        raw_result: Mapping with a ``detections`` list of
            ``{"score", "class", "bbox": {"top", "left", "bottom", "right"}}``
            entries, or an ``error`` key when inference failed.
        confidence_threshold: Minimum score to keep (inclusive).
        labels: Label table indexed by class id.

    Returns:
        Parsed detections in detector order.
    """

    if "error" in raw_result:
        logger.warning("[LABELS] detector reported error: %s", raw_result["error"])
        return []

    parsed: list[Detection] = []
    for entry in raw_result.get("detections") or []:
        score = float(entry.get("score", 0.0))
        if score < confidence_threshold:
            continue
        bbox = entry.get("bbox") or {}
        parsed.append(
            Detection(
                label=label_for_index(int(entry.get("class", -1)), labels),
                confidence=score,
                bbox=BoundingBox(
                    top=float(bbox.get("top", 0.0)),
                    left=float(bbox.get("left", 0.0)),
                    bottom=float(bbox.get("bottom", 0.0)),
                    right=float(bbox.get("right", 0.0)),
                ),
            )
        )
    return parsed


def detections_to_string(detections: Sequence[Detection]) -> str:
    """Return a short confidence listing such as ``Detected 1 object: cup (85%)``."""

    if not detections:
        return "No objects detected"
    items = ", ".join(
        f"{detection.label} ({int(detection.confidence * 100)}%)" for detection in detections
    )
    suffix = "s" if len(detections) > 1 else ""
    return f"Detected {len(detections)} object{suffix}: {items}"
