"""Command-line entry point for running diagnostics."""

from __future__ import annotations

import argparse
from collections.abc import Callable
from pathlib import Path
import tempfile

from config.diagnostics import probe as config_probe
from core.diagnostics import probe as core_probe
from diagnostics.models import DiagnosticResult, DiagnosticStatus
from diagnostics.runner import format_results, overall_status, run_diagnostics
from narration.config import NarrationConfig
from narration.diagnostics import probe as narration_probe


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""

    parser = argparse.ArgumentParser(description="Run diagnostics probes.")
    parser.add_argument(
        "--offline",
        action="store_true",
        help="Run probes against a temporary offline directory.",
    )
    parser.add_argument(
        "--base-dir",
        type=Path,
        default=None,
        help="Optional base directory for offline diagnostics.",
    )
    return parser.parse_args(argv)


def collect_probes(base_dir: Path | None, offline: bool = False) -> list[Callable[[], DiagnosticResult]]:
    """Return the probes to run for the given base directory."""

    def config_probe_with_base() -> DiagnosticResult:
        return config_probe(base_dir=base_dir)

    def narration_probe_configured() -> DiagnosticResult:
        if offline:
            return narration_probe(config=NarrationConfig())
        return narration_probe()

    return [config_probe_with_base, core_probe, narration_probe_configured]


def main(argv: list[str] | None = None) -> int:
    """Run diagnostics and return an exit code."""

    args = parse_args(argv)
    base_dir = args.base_dir

    if args.offline and base_dir is None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            tmp_base = Path(tmp_dir)
            config_dir = tmp_base / "config"
            config_dir.mkdir(parents=True, exist_ok=True)
            (config_dir / "default.yaml").write_text("{}", encoding="utf-8")
            results = run_diagnostics(collect_probes(tmp_base, offline=True))
    else:
        results = run_diagnostics(collect_probes(base_dir, offline=args.offline))

    print(format_results(results))

    return 1 if overall_status(results) is DiagnosticStatus.FAIL else 0


if __name__ == "__main__":
    raise SystemExit(main())
