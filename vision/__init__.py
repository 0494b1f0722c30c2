"""Vision package exports."""

from vision.detections import BoundingBox, Detection, DetectionEvent, FrameSize, UNIT_FRAME
from vision.labels import COCO_LABELS, detections_to_string, label_for_index, parse_detections

__all__ = [
    "BoundingBox",
    "COCO_LABELS",
    "Detection",
    "DetectionEvent",
    "FrameSize",
    "UNIT_FRAME",
    "detections_to_string",
    "label_for_index",
    "parse_detections",
]
