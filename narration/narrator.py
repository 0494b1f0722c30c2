"""Turn detections into a spoken scene description."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from core.logging import logger
from narration.config import DEFAULT_CONFIG, MultiInstanceStyle, NarrationConfig
from narration.pipeline import (
    RankedCategory,
    filter_detections,
    group_detections,
    rank_categories,
)
from narration.spatial import classify, describe_footprint, describe_instances, relation
from narration.text import count_phrase, join_phrases
from vision.detections import Detection, FrameSize, UNIT_FRAME


class SceneNarrator:
    """Stateless narrator bound to one narration config.

    Each :meth:`describe` call depends only on its arguments, so one narrator
    can be shared between callers.
    """

    def __init__(self, config: NarrationConfig | None = None) -> None:
        self.config = config if config is not None else DEFAULT_CONFIG

    def describe(
        self,
        detections: Iterable[Detection],
        frame: FrameSize | None = None,
        threshold: float | None = None,
    ) -> str:
        """Return the narration for one frame's detections.

        Args:
            detections: Detections in detector order.
            frame: Reference frame for the boxes; the unit frame when omitted.
            threshold: Minimum confidence, defaulting to the configured one.

        Returns:
            Clauses joined by ``". "``, or the no-objects phrase.
        """

        frame = frame if frame is not None else UNIT_FRAME
        if threshold is None:
            threshold = self.config.confidence_threshold

        filtered = filter_detections(detections, threshold)
        ranked = rank_categories(group_detections(filtered))
        if not ranked:
            logger.debug("[NARRATION] nothing above threshold %.2f", threshold)
            return self.config.no_objects_phrase

        clauses = [
            self._overview(len(filtered), ranked),
            self._main_clause(ranked[0], frame),
        ]
        if len(ranked) > 1:
            clauses.append(self._secondary_clause(ranked[0], ranked[1], frame))

        logger.debug(
            "[NARRATION] detections=%d categories=%d top=%s",
            len(filtered),
            len(ranked),
            ranked[0].label,
        )
        return ". ".join(clause for clause in clauses if clause)

    def _overview(self, total: int, ranked: Sequence[RankedCategory]) -> str:
        listed = join_phrases(
            count_phrase(category.count, category.label)
            for category in ranked[: self.config.max_categories]
        )
        return f"I can see {count_phrase(total, 'object')}: {listed}"

    def _main_clause(self, category: RankedCategory, frame: FrameSize) -> str:
        zones = [classify(detection.bbox, frame, self.config) for detection in category.detections]
        if category.count == 1:
            return f"The {category.label} is {zones[0].describe()}"

        subject = f"There are {count_phrase(category.count, category.label)}"
        if self.config.multi_instance_style is MultiInstanceStyle.ORDINAL:
            return f"{subject}: {describe_instances(zones)}"
        footprint = describe_footprint(zones)
        return f"{subject} {footprint}" if footprint else subject

    def _secondary_clause(
        self,
        main: RankedCategory,
        secondary: RankedCategory,
        frame: FrameSize,
    ) -> str:
        if secondary.count > 1:
            return f"There are also {count_phrase(secondary.count, secondary.label)} nearby"
        direction = relation(
            main.primary.bbox,
            secondary.primary.bbox,
            frame,
            mirrored=self.config.mirrored,
        )
        return f"There is a {secondary.label} {direction}"


def describe(
    detections: Iterable[Detection],
    frame: FrameSize | None = None,
    threshold: float | None = None,
    config: NarrationConfig | None = None,
) -> str:
    """Describe a scene with a throwaway narrator."""

    return SceneNarrator(config).describe(detections, frame=frame, threshold=threshold)
