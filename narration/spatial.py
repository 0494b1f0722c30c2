"""Coarse spatial classification of bounding boxes within a frame."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from core.logging import logger
from narration.config import DEFAULT_CONFIG, FAR_AWAY, NarrationConfig
from narration.text import join_phrases, ordinal
from vision.detections import BoundingBox, FrameSize, UNIT_FRAME


class Horizontal(str, Enum):
    """Horizontal third of the frame."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"

    @property
    def phrase(self) -> str:
        return _HORIZONTAL_PHRASES[self]


class Vertical(str, Enum):
    """Vertical third of the frame."""

    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"

    @property
    def phrase(self) -> str:
        return _VERTICAL_PHRASES[self]


_HORIZONTAL_PHRASES = {
    Horizontal.LEFT: "on the left side",
    Horizontal.CENTER: "in the center",
    Horizontal.RIGHT: "on the right side",
}

_VERTICAL_PHRASES = {
    Vertical.TOP: "at the top",
    Vertical.MIDDLE: "in the middle",
    Vertical.BOTTOM: "at the bottom",
}

_HORIZONTAL_FOOTPRINTS = {
    frozenset({Horizontal.LEFT, Horizontal.CENTER, Horizontal.RIGHT}): "across the entire view",
    frozenset({Horizontal.LEFT, Horizontal.RIGHT}): "on both sides",
    frozenset({Horizontal.LEFT, Horizontal.CENTER}): "from the left to the center",
    frozenset({Horizontal.CENTER, Horizontal.RIGHT}): "from the center to the right",
    frozenset({Horizontal.LEFT}): "on the left side",
    frozenset({Horizontal.RIGHT}): "on the right side",
    frozenset({Horizontal.CENTER}): "in the center",
}

# Middle alone adds nothing to the horizontal phrase and is left unsaid.
_VERTICAL_FOOTPRINTS = {
    frozenset({Vertical.TOP, Vertical.MIDDLE, Vertical.BOTTOM}): "throughout the view",
    frozenset({Vertical.TOP, Vertical.BOTTOM}): "from top to bottom",
    frozenset({Vertical.TOP, Vertical.MIDDLE}): "in the upper part",
    frozenset({Vertical.MIDDLE, Vertical.BOTTOM}): "in the lower part",
    frozenset({Vertical.TOP}): "at the top",
    frozenset({Vertical.BOTTOM}): "at the bottom",
}


@dataclass(frozen=True)
class SpatialZone:
    """3x3 grid cell plus distance band for one box."""

    horizontal: Horizontal
    vertical: Vertical
    distance: str

    def describe(self) -> str:
        """Return e.g. ``on the left side at the top, very close``."""

        return f"{self.horizontal.phrase} {self.vertical.phrase}, {self.distance}"


def center_fraction(box: BoundingBox, frame: FrameSize = UNIT_FRAME) -> tuple[float, float]:
    """Return the box center as fractions of the frame width and height."""

    if frame.is_degenerate():
        return 0.5, 0.5
    return box.center_x / frame.width, box.center_y / frame.height


def horizontal_zone(fraction: float, config: NarrationConfig = DEFAULT_CONFIG) -> Horizontal:
    if fraction < config.zone_low:
        zone = Horizontal.LEFT
    elif fraction > config.zone_high:
        zone = Horizontal.RIGHT
    else:
        return Horizontal.CENTER
    if config.mirrored:
        return Horizontal.RIGHT if zone is Horizontal.LEFT else Horizontal.LEFT
    return zone


def vertical_zone(fraction: float, config: NarrationConfig = DEFAULT_CONFIG) -> Vertical:
    if fraction < config.zone_low:
        return Vertical.TOP
    if fraction > config.zone_high:
        return Vertical.BOTTOM
    return Vertical.MIDDLE


def distance_band(
    box: BoundingBox,
    frame: FrameSize = UNIT_FRAME,
    config: NarrationConfig = DEFAULT_CONFIG,
) -> str:
    """Return the distance phrase for the share of the frame the box covers."""

    if box.is_degenerate() or frame.is_degenerate():
        logger.warning("[NARRATION] degenerate geometry box=%s frame=%s", box, frame)
        return FAR_AWAY
    area_ratio = box.area / frame.area
    for min_ratio, phrase in config.distance_bands:
        if area_ratio > min_ratio:
            return phrase
    return FAR_AWAY


def classify(
    box: BoundingBox,
    frame: FrameSize = UNIT_FRAME,
    config: NarrationConfig = DEFAULT_CONFIG,
) -> SpatialZone:
    """Classify a box into its grid cell and distance band."""

    center_x, center_y = center_fraction(box, frame)
    return SpatialZone(
        horizontal=horizontal_zone(center_x, config),
        vertical=vertical_zone(center_y, config),
        distance=distance_band(box, frame, config),
    )


def describe_footprint(zones: Sequence[SpatialZone]) -> str:
    """Summarize where several instances sit, e.g. ``on both sides at the top``."""

    horizontal = _HORIZONTAL_FOOTPRINTS.get(frozenset(zone.horizontal for zone in zones), "")
    vertical = _VERTICAL_FOOTPRINTS.get(frozenset(zone.vertical for zone in zones), "")
    return " ".join(part for part in (horizontal, vertical) if part)


def describe_instances(zones: Sequence[SpatialZone]) -> str:
    """Place each instance individually, prefixed with its ordinal."""

    count = len(zones)
    return join_phrases(
        " ".join(part for part in (ordinal(index, count), zone.describe()) if part)
        for index, zone in enumerate(zones)
    )


def relation(
    box_a: BoundingBox,
    box_b: BoundingBox,
    frame: FrameSize = UNIT_FRAME,
    mirrored: bool = False,
) -> str:
    """Return where ``box_b`` lies relative to ``box_a`` along the dominant axis.

    Equal horizontal and vertical offsets, including coincident centers,
    resolve to the vertical phrase.
    """

    ax, ay = center_fraction(box_a, frame)
    bx, by = center_fraction(box_b, frame)
    dx = bx - ax
    dy = by - ay
    if abs(dx) > abs(dy):
        to_right = dx > 0
        if mirrored:
            to_right = not to_right
        return "to the right" if to_right else "to the left"
    return "below" if dy > 0 else "above"
