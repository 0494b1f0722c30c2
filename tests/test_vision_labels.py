"""Tests for label lookup and raw detector parsing."""

from __future__ import annotations

from vision.detections import BoundingBox, Detection
from vision.labels import (
    COCO_LABELS,
    detections_to_string,
    label_for_index,
    load_labels,
    parse_detections,
)


def _raw(score: float, class_index: int) -> dict:
    return {
        "score": score,
        "class": class_index,
        "bbox": {"top": 0.1, "left": 0.2, "bottom": 0.5, "right": 0.6},
    }


def test_coco_table_has_eighty_labels() -> None:
    assert len(COCO_LABELS) == 80
    assert label_for_index(0) == "person"
    assert label_for_index(41) == "cup"


def test_out_of_range_and_placeholder_labels_are_unknown() -> None:
    assert label_for_index(80) == "unknown"
    assert label_for_index(-1) == "unknown"
    assert label_for_index(1, load_labels("person\n???\ncar\n")) == "unknown"


def test_parse_detections_filters_inclusively_and_maps_labels() -> None:
    detections = parse_detections(
        {"detections": [_raw(0.9, 0), _raw(0.5, 41), _raw(0.49, 56)]},
        confidence_threshold=0.5,
    )

    assert [item.label for item in detections] == ["person", "cup"]
    assert detections[0].bbox == BoundingBox(top=0.1, left=0.2, bottom=0.5, right=0.6)


def test_parse_detections_error_result_is_empty() -> None:
    assert parse_detections({"error": "interpreter closed"}) == []
    assert parse_detections({}) == []


def test_detections_to_string() -> None:
    box = BoundingBox(top=0.0, left=0.0, bottom=1.0, right=1.0)

    assert detections_to_string([]) == "No objects detected"
    assert detections_to_string([Detection("cup", 0.5, box)]) == "Detected 1 object: cup (50%)"
    assert (
        detections_to_string([Detection("cup", 0.5, box), Detection("dog", 0.25, box)])
        == "Detected 2 objects: cup (50%), dog (25%)"
    )
