"""Scene narration pipeline exports."""

from narration.config import NarrationConfig, MultiInstanceStyle, load_narration_config
from narration.feedback import compose_feedback
from narration.narrator import SceneNarrator, describe
from narration.pipeline import RankedCategory, filter_detections, group_detections, rank_categories
from narration.spatial import Horizontal, SpatialZone, Vertical, classify, relation

__all__ = [
    "Horizontal",
    "MultiInstanceStyle",
    "NarrationConfig",
    "RankedCategory",
    "SceneNarrator",
    "SpatialZone",
    "Vertical",
    "classify",
    "compose_feedback",
    "describe",
    "filter_detections",
    "group_detections",
    "load_narration_config",
    "rank_categories",
    "relation",
]
