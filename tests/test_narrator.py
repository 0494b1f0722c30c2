"""End-to-end tests for scene narration."""

from __future__ import annotations

from narration import MultiInstanceStyle, NarrationConfig, SceneNarrator, describe
from vision.detections import BoundingBox, Detection, FrameSize


def _detection(
    label: str,
    confidence: float,
    left: float = 0.4,
    top: float = 0.4,
    right: float = 0.6,
    bottom: float = 0.6,
) -> Detection:
    return Detection(
        label=label,
        confidence=confidence,
        bbox=BoundingBox(top=top, left=left, bottom=bottom, right=right),
    )


def _person_and_cup() -> list[Detection]:
    return [
        _detection("person", 0.92, left=0.3, top=0.2, right=0.7, bottom=0.8),
        _detection("cup", 0.85, left=0.1, top=0.1, right=0.3, bottom=0.3),
    ]


def test_person_and_cup_scene() -> None:
    text = describe(_person_and_cup(), FrameSize(width=1, height=1), threshold=0.5)

    assert text == (
        "I can see 2 objects: 1 person and 1 cup. "
        "The person is in the center in the middle, close. "
        "There is a cup above"
    )


def test_describe_is_deterministic() -> None:
    narrator = SceneNarrator()
    detections = _person_and_cup()

    assert narrator.describe(detections) == narrator.describe(detections)


def test_empty_input_returns_no_objects_phrase() -> None:
    assert describe([], FrameSize(width=100, height=100)) == "No objects detected in view"


def test_everything_below_threshold_returns_no_objects_phrase() -> None:
    assert describe(_person_and_cup(), threshold=0.95) == "No objects detected in view"


def test_single_category_overview_has_no_and() -> None:
    text = describe([_detection("person", 0.9)])

    assert text.startswith("I can see 1 object: 1 person. ")
    assert " and " not in text


def test_three_categories_join_with_commas_and_final_and() -> None:
    text = describe(
        [_detection("chair", 0.7), _detection("person", 0.9), _detection("cup", 0.8)]
    )

    assert text.startswith("I can see 3 objects: 1 person, 1 cup and 1 chair. ")


def test_overview_lists_at_most_three_categories_but_counts_all() -> None:
    text = describe(
        [
            _detection("person", 0.9),
            _detection("cup", 0.8),
            _detection("chair", 0.7),
            _detection("book", 0.6),
        ]
    )

    assert text.startswith("I can see 4 objects: 1 person, 1 cup and 1 chair. ")
    assert "book" not in text


def test_equal_confidence_keeps_input_order() -> None:
    text = describe([_detection("cat", 0.9), _detection("dog", 0.9)])

    assert "1 cat and 1 dog" in text
    assert "The cat is" in text


def test_threshold_is_inclusive() -> None:
    text = describe([_detection("person", 0.5)], threshold=0.5)

    assert text.startswith("I can see 1 object: 1 person")


def test_multiple_instances_use_aggregate_footprint() -> None:
    text = describe(
        [
            _detection("person", 0.9, left=0.0, top=0.0, right=0.2, bottom=0.2),
            _detection("person", 0.8, left=0.8, top=0.8, right=1.0, bottom=1.0),
        ]
    )

    assert text == (
        "I can see 2 objects: 2 persons. There are 2 persons on both sides from top to bottom"
    )


def test_multiple_instances_in_middle_row_skip_vertical_phrase() -> None:
    text = describe(
        [
            _detection("chair", 0.9, left=0.0, top=0.4, right=0.2, bottom=0.6),
            _detection("chair", 0.8, left=0.4, top=0.4, right=0.6, bottom=0.6),
        ]
    )

    assert text.endswith("There are 2 chairs from the left to the center")


def test_ordinal_style_places_each_instance() -> None:
    narrator = SceneNarrator(NarrationConfig(multi_instance_style=MultiInstanceStyle.ORDINAL))

    text = narrator.describe(
        [
            _detection("person", 0.9, left=0.0, top=0.0, right=0.2, bottom=0.2),
            _detection("person", 0.8, left=0.8, top=0.8, right=1.0, bottom=1.0),
        ]
    )

    assert text.endswith(
        "There are 2 persons: one on the left side at the top, at medium distance "
        "and another on the right side at the bottom, at medium distance"
    )


def test_plural_secondary_category_skips_direction() -> None:
    text = describe(
        [
            _detection("person", 0.95),
            _detection("cup", 0.7, left=0.0, top=0.0, right=0.1, bottom=0.1),
            _detection("cup", 0.6, left=0.9, top=0.9, right=1.0, bottom=1.0),
        ]
    )

    assert text.endswith("There are also 2 cups nearby")


def test_secondary_relation_in_pixel_frame() -> None:
    frame = FrameSize(width=640, height=480)
    text = describe(
        [
            _detection("person", 0.9, left=260, top=100, right=380, bottom=400),
            _detection("dog", 0.8, left=500, top=300, right=620, bottom=420),
        ],
        frame,
    )

    assert text.endswith("There is a dog to the right")


def test_mirrored_config_flips_sides() -> None:
    narrator = SceneNarrator(NarrationConfig(mirrored=True))

    text = narrator.describe(
        [
            _detection("person", 0.9, left=0.0, top=0.4, right=0.2, bottom=0.6),
            _detection("dog", 0.8, left=0.8, top=0.4, right=1.0, bottom=0.6),
        ]
    )

    assert "The person is on the right side in the middle" in text
    assert text.endswith("There is a dog to the left")


def test_zero_width_box_is_narrated_far_away() -> None:
    text = describe([_detection("pole", 0.9, left=0.5, top=0.1, right=0.5, bottom=0.9)])

    assert text.endswith("The pole is in the center in the middle, far away")


def test_malformed_values_never_leak_into_text() -> None:
    text = describe(
        [
            Detection(
                label="box",
                confidence=2.0,
                bbox=BoundingBox(top=float("nan"), left=0.2, bottom=0.1, right=float("inf")),
            )
        ]
    )

    assert text.startswith("I can see 1 object: 1 box. The box is")
    assert "nan" not in text
    assert "inf" not in text
    assert text.endswith("far away")


def test_labels_pass_through_verbatim() -> None:
    text = describe([_detection("unknown", 0.9)])

    assert "The unknown is in the center in the middle" in text


def test_custom_no_objects_phrase() -> None:
    narrator = SceneNarrator(NarrationConfig(no_objects_phrase="Nothing around you"))

    assert narrator.describe([]) == "Nothing around you"
