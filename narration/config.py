"""Tunable thresholds and phrasing choices for scene narration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

import yaml

from core.logging import log_warning

DistanceBands = tuple[tuple[float, str], ...]

FAR_AWAY = "far away"

FIVE_TIER_DISTANCES: DistanceBands = (
    (0.3, "very close"),
    (0.1, "close"),
    (0.05, "nearby"),
    (0.01, "at medium distance"),
)

COARSE_DISTANCES: DistanceBands = (
    (0.5, "very close"),
    (0.25, "close"),
    (0.1, "at a moderate distance"),
)

DISTANCE_TABLES: dict[str, DistanceBands] = {
    "five_tier": FIVE_TIER_DISTANCES,
    "coarse": COARSE_DISTANCES,
}

DEFAULT_DISTANCE_TABLE = "five_tier"


class MultiInstanceStyle(str, Enum):
    """How a category with several instances is placed in the frame."""

    AGGREGATE = "aggregate"
    ORDINAL = "ordinal"


@dataclass(frozen=True)
class NarrationConfig:
    """Configuration values for the narration pipeline.

    ``distance_bands`` lists ``(min_area_ratio, phrase)`` pairs in descending
    order; a box whose area ratio exceeds none of them is ``far away``.
    """

    confidence_threshold: float = 0.5
    zone_low: float = 0.33
    zone_high: float = 0.66
    distance_bands: DistanceBands = DISTANCE_TABLES[DEFAULT_DISTANCE_TABLE]
    mirrored: bool = False
    max_categories: int = 3
    multi_instance_style: MultiInstanceStyle = MultiInstanceStyle.AGGREGATE
    no_objects_phrase: str = "No objects detected in view"

    def __post_init__(self) -> None:
        if not 0.0 <= self.confidence_threshold <= 1.0:
            raise ValueError(
                f"confidence_threshold must be within [0, 1], got {self.confidence_threshold}"
            )
        if not 0.0 <= self.zone_low < self.zone_high <= 1.0:
            raise ValueError(
                f"zone bounds must satisfy 0 <= low < high <= 1, got {self.zone_low}, {self.zone_high}"
            )
        if self.max_categories < 1:
            raise ValueError(f"max_categories must be positive, got {self.max_categories}")
        ratios = [ratio for ratio, _ in self.distance_bands]
        if ratios != sorted(ratios, reverse=True):
            raise ValueError("distance_bands must be ordered by descending area ratio")
        object.__setattr__(
            self, "multi_instance_style", MultiInstanceStyle(self.multi_instance_style)
        )

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "NarrationConfig":
        """Build a config from a normalized ``narration`` config section."""

        defaults = cls()
        table_name = str(values.get("distance_table", DEFAULT_DISTANCE_TABLE))
        if table_name not in DISTANCE_TABLES:
            raise ValueError(
                f"Unknown distance_table {table_name!r}; expected one of {sorted(DISTANCE_TABLES)}"
            )
        return cls(
            confidence_threshold=float(
                values.get("confidence_threshold", defaults.confidence_threshold)
            ),
            zone_low=float(values.get("zone_low", defaults.zone_low)),
            zone_high=float(values.get("zone_high", defaults.zone_high)),
            distance_bands=DISTANCE_TABLES[table_name],
            mirrored=bool(values.get("mirrored", defaults.mirrored)),
            max_categories=int(values.get("max_categories", defaults.max_categories)),
            multi_instance_style=MultiInstanceStyle(
                values.get("multi_instance_style", defaults.multi_instance_style.value)
            ),
            no_objects_phrase=str(values.get("no_objects_phrase", defaults.no_objects_phrase)),
        )


DEFAULT_CONFIG = NarrationConfig()


def load_config_mapping() -> dict[str, Any]:
    """Return the YAML-backed application config, or ``{}`` when unavailable."""

    try:
        from config import ConfigController

        return ConfigController.get_instance().get_config()
    except (OSError, yaml.YAMLError) as exc:
        log_warning(f"[NARRATION] config unavailable, using defaults: {exc}")
        return {}


def load_narration_config(config: Mapping[str, Any] | None = None) -> NarrationConfig:
    """Build narration settings from the ``narration`` config section.

    Args:
        config: Already loaded application config; read from YAML when omitted.
    """

    if config is None:
        config = load_config_mapping()
    return NarrationConfig.from_mapping(config.get("narration") or {})
