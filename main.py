"""Command-line entry point for narrating detection snapshots."""

from __future__ import annotations

import argparse
from dataclasses import replace
import json
from pathlib import Path
import sys
from typing import Any

from core.logging import (
    disable_file_logging,
    enable_file_logging,
    log_error,
    log_info,
    log_narration,
    logger,
    set_level,
)
from narration import MultiInstanceStyle, SceneNarrator, compose_feedback, load_narration_config
from narration.config import load_config_mapping
from vision.detections import DetectionEvent, FrameSize, detection_from_dict
from vision.labels import COCO_LABELS, load_labels, parse_detections


def parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Raw command-line arguments.

    Returns:
        Parsed arguments namespace.
    """

    parser = argparse.ArgumentParser(
        description="Describe a detection snapshot as an accessible narration."
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="JSON file with detections, or - for stdin.",
    )
    parser.add_argument("--width", type=float, help="Frame width in box units.")
    parser.add_argument("--height", type=float, help="Frame height in box units.")
    parser.add_argument("--threshold", type=float, help="Minimum detection confidence.")
    parser.add_argument(
        "--mirrored",
        action="store_true",
        help="Swap left and right for a mirrored front camera.",
    )
    parser.add_argument(
        "--style",
        choices=[style.value for style in MultiInstanceStyle],
        help="How to place several instances of the main object.",
    )
    parser.add_argument(
        "--raw",
        action="store_true",
        help="Input is raw detector output with class indices and scores.",
    )
    parser.add_argument(
        "--labels",
        type=Path,
        default=None,
        help="Newline-delimited label file for --raw class indices (COCO by default).",
    )
    parser.add_argument("--text", default="", help="Recognized text to append.")
    parser.add_argument("--log-level", default=None, help="Logger level, e.g. DEBUG.")
    parser.add_argument("--log-file", type=Path, default=None, help="Also log to this file.")
    parser.add_argument(
        "--diagnostics",
        action="store_true",
        help="Run diagnostics probes and exit.",
    )
    return parser.parse_args(argv)


def load_event(payload: Any, args: argparse.Namespace, threshold: float) -> DetectionEvent:
    """Build a detection event from decoded JSON and command-line overrides."""

    frame_values: dict[str, Any] = {}
    if isinstance(payload, list):
        records = payload
    elif isinstance(payload, dict):
        records = payload.get("detections") or []
        frame_values = payload.get("frame") or {}
    else:
        raise ValueError("Expected a JSON list of detections or an object with 'detections'")

    if args.raw:
        if not isinstance(payload, dict):
            raise ValueError("Raw detector output must be a JSON object")
        labels = (
            load_labels(args.labels.read_text(encoding="utf-8"))
            if args.labels is not None
            else COCO_LABELS
        )
        detections = parse_detections(payload, confidence_threshold=threshold, labels=labels)
    else:
        detections = [detection_from_dict(record) for record in records]

    frame = FrameSize(
        width=float(args.width if args.width is not None else frame_values.get("width", 1.0)),
        height=float(args.height if args.height is not None else frame_values.get("height", 1.0)),
    )
    return DetectionEvent(
        timestamp_ms=int(payload.get("timestamp_ms", 0)) if isinstance(payload, dict) else 0,
        detections=detections,
        frame=frame,
        source="cli",
    )


def _read_payload(source: str) -> Any:
    if source == "-":
        return json.load(sys.stdin)
    with Path(source).open("r", encoding="utf-8") as file:
        return json.load(file)


def _run(args: argparse.Namespace, app_config: dict[str, Any]) -> int:
    if args.diagnostics:
        from diagnostics.run import main as diagnostics_main

        return diagnostics_main([])

    try:
        config = load_narration_config(app_config)
    except ValueError as exc:
        log_error(f"Invalid narration config: {exc}")
        return 2
    if args.mirrored:
        config = replace(config, mirrored=True)
    if args.style:
        config = replace(config, multi_instance_style=MultiInstanceStyle(args.style))
    threshold = args.threshold if args.threshold is not None else config.confidence_threshold

    try:
        event = load_event(_read_payload(args.input), args, threshold)
    except (OSError, ValueError, TypeError, AttributeError, OverflowError) as exc:
        log_error(f"Could not read detections from {args.input}: {exc}")
        return 2

    narration = SceneNarrator(config).describe(event.detections, frame=event.frame, threshold=threshold)
    feedback = compose_feedback(narration, args.text)
    logger.debug("[NARRATION] %d detections from %s", len(event.detections), event.source)
    log_narration(feedback)
    print(feedback)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Application entry point.

    Args:
        argv: Optional list of command-line arguments.

    Returns:
        Process exit code.
    """

    if argv is None:
        argv = sys.argv[1:]

    args = parse_args(argv)
    app_config = load_config_mapping()
    set_level(args.log_level or app_config.get("logging_level", "INFO"))
    if args.log_file is not None:
        enable_file_logging(args.log_file)
        log_info(f"[NARRATION] logging to {args.log_file}")

    try:
        return _run(args, app_config)
    finally:
        if args.log_file is not None:
            disable_file_logging()


if __name__ == "__main__":
    raise SystemExit(main())
