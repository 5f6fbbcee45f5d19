"""
Delivery failure reports for the notification pipeline.

Each batch with failed sends gets its own timestamped file. Writing a report
is best effort: an unwritable directory is logged, never raised, so a batch
that already went out is still reported as sent.
"""

import logging
import os
from datetime import datetime
from typing import Any, Iterable, Optional

from models.notification import SendResult

logger = logging.getLogger(__name__)

SEPARATOR = "=" * 60


def _report_dir() -> str:
    return os.getenv(
        "NOTIFICATION_LOG_DIR", os.path.join(os.path.dirname(__file__), "logs")
    )


def format_report(
    error_type: str,
    error_message: str,
    context: Optional[dict[str, Any]] = None,
    failures: Iterable[SendResult] = (),
) -> str:
    lines = [
        f"Notification Error Report - {datetime.now()}",
        SEPARATOR,
        "",
        f"Error Type: {error_type}",
        f"Error Message: {error_message}",
    ]

    if context:
        lines += ["", "Context:"]
        lines += [f"  {key}: {value}" for key, value in context.items()]

    failures = list(failures)
    if failures:
        lines += ["", f"Failed recipients ({len(failures)}):"]
        lines += [f"  {r.email}: {r.error or 'unknown error'}" for r in failures]

    return "\n".join(lines) + "\n"


def log_notification_error(
    error_type: str,
    error_message: str,
    context: Optional[dict[str, Any]] = None,
    failures: Iterable[SendResult] = (),
) -> Optional[str]:
    """
    Write a notification error report to a timestamped file.

    Args:
        error_type: Type of error (e.g., 'sending', 'verification')
        error_message: Summary of what went wrong
        context: Notification fields that identify the batch
        failures: Failed SendResults, one line each in the report

    Returns:
        Path to the report file, or None if it could not be written
    """
    report = format_report(error_type, error_message, context, failures)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")

    try:
        report_dir = _report_dir()
        os.makedirs(report_dir, exist_ok=True)
        path = os.path.join(report_dir, f"notification_error_{timestamp}.txt")
        with open(path, "w", encoding="utf-8") as f:
            f.write(report)
    except OSError:
        logger.exception("Could not write notification error report")
        return None

    return path
