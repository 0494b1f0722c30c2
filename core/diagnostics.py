"""Diagnostics routines for the core subsystem."""

from __future__ import annotations

import importlib.util
import logging

from diagnostics.models import DiagnosticResult, DiagnosticStatus


def probe() -> DiagnosticResult:
    """Check that the narration logger is configured.

    Returns:
        Diagnostic result indicating logging readiness.
    """

    name = "core"
    from core import logging as core_logging

    logger = core_logging.logger
    if logger is None or not logger.handlers:
        return DiagnosticResult(
            name=name,
            status=DiagnosticStatus.FAIL,
            details="Narration logger has no handlers",
        )
    rich_available = importlib.util.find_spec("rich") is not None
    handler_kind = "rich" if rich_available else "plain stream (rich not installed)"
    return DiagnosticResult(
        name=name,
        status=DiagnosticStatus.PASS if rich_available else DiagnosticStatus.WARN,
        details=f"Logger {logger.name} at {logging.getLevelName(logger.level)} using {handler_kind}",
    )
