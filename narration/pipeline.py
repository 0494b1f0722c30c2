"""Filter, group and rank stages feeding the narrator."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from vision.detections import Detection


@dataclass(frozen=True)
class RankedCategory:
    """All detections sharing one label, with their best confidence."""

    label: str
    detections: tuple[Detection, ...]
    max_confidence: float

    @property
    def count(self) -> int:
        return len(self.detections)

    @property
    def primary(self) -> Detection:
        return self.detections[0]


def filter_detections(detections: Iterable[Detection], threshold: float = 0.5) -> list[Detection]:
    """Return clamped detections whose confidence is at least ``threshold``."""

    threshold = min(1.0, max(0.0, float(threshold)))
    kept: list[Detection] = []
    for detection in detections:
        detection = detection.clamped()
        if detection.confidence >= threshold:
            kept.append(detection)
    return kept


def group_detections(detections: Iterable[Detection]) -> dict[str, list[Detection]]:
    """Bucket detections by label in first-seen label order."""

    groups: dict[str, list[Detection]] = {}
    for detection in detections:
        groups.setdefault(detection.label, []).append(detection)
    return groups


def rank_categories(groups: Mapping[str, list[Detection]]) -> list[RankedCategory]:
    """Order categories by best confidence, keeping insertion order on ties."""

    categories = [
        RankedCategory(
            label=label,
            detections=tuple(members),
            max_confidence=max(member.confidence for member in members),
        )
        for label, members in groups.items()
        if members
    ]
    return sorted(categories, key=lambda category: category.max_confidence, reverse=True)
