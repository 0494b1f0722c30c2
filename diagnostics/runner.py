"""Diagnostics runner utilities."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from core.logging import logger as LOGGER
from diagnostics.models import DiagnosticResult, DiagnosticStatus


def format_results(results: Iterable[DiagnosticResult]) -> str:
    """Return a human-friendly diagnostics report."""

    lines = ["Scene narrator diagnostics", "-" * 60]
    for result in results:
        status = result.status.value
        name = result.name
        details = result.details
        lines.append(f"[{status}] {name}: {details}")
    lines.append("-" * 60)
    return "\n".join(lines)


def run_diagnostics(probes: Iterable[Callable[[], DiagnosticResult]]) -> list[DiagnosticResult]:
    """Run diagnostics probes and return results."""

    results: list[DiagnosticResult] = []
    for probe in probes:
        try:
            result = probe()
        except Exception as exc:  # noqa: BLE001 - diagnostics must keep running
            LOGGER.exception("Probe failed: %s", probe)
            result = DiagnosticResult(
                name=getattr(probe, "__name__", "unknown_probe"),
                status=DiagnosticStatus.FAIL,
                details=f"Probe raised exception: {exc}",
            )
        results.append(result)
    return results


def overall_status(results: Iterable[DiagnosticResult]) -> DiagnosticStatus:
    """Return the worst status across results, ``PASS`` when empty."""

    statuses = {result.status for result in results}
    for status in (DiagnosticStatus.FAIL, DiagnosticStatus.WARN):
        if status in statuses:
            return status
    return DiagnosticStatus.PASS
