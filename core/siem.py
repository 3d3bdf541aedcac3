"""SIEM-compatible event logging.

Writes one JSON object per line, suitable for ingestion by Splunk, ELK or
QRadar. Evaluation events record the variant, score and label only. The
password and anything derived from its content stay out of the log.

Rotation is handled by a RotatingFileHandler configured on first use.
"""

import json
import logging
import os
from datetime import datetime
from logging.handlers import RotatingFileHandler
from threading import Lock
from typing import Optional

from core.config import (
    SIEM_LOG_FILE,
    SIEM_LOG_ENABLED,
    SIEM_LOG_MAX_BYTES,
    SIEM_LOG_BACKUP_COUNT,
)
from core.storage import ensure_directories, read_lines


# Module-level state
_logger = logging.getLogger("password_meter.siem")
_handler: Optional[RotatingFileHandler] = None
_config_lock = Lock()


def _configure_logging() -> logging.Logger:
    """Attach the rotating JSON-lines handler on first use."""
    global _handler
    with _config_lock:
        if _handler is not None:
            return _logger

        log_dir = os.path.dirname(SIEM_LOG_FILE)
        if log_dir:
            ensure_directories(log_dir)

        handler = RotatingFileHandler(
            SIEM_LOG_FILE,
            maxBytes=SIEM_LOG_MAX_BYTES,
            backupCount=SIEM_LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        handler.setFormatter(logging.Formatter("%(message)s"))

        _logger.setLevel(logging.INFO)
        _logger.addHandler(handler)
        # Keep JSON lines out of the application's root handlers
        _logger.propagate = False

        _handler = handler
        return _logger


def shutdown_logging() -> None:
    """Detach and close the event log handler.

    The next event reconfigures logging, picking up the current log path.
    """
    global _handler
    with _config_lock:
        if _handler is None:
            return
        _logger.removeHandler(_handler)
        _handler.close()
        _handler = None


def log_siem_event(
    event_type: str,
    status: str,
    source: str = "cli",
    details: Optional[dict] = None
) -> None:
    """Log event in JSON format suitable for SIEM tools.

    Args:
        event_type: Type of event (e.g., 'password_evaluation')
        status: Event status (e.g., 'SUCCESS', 'REJECTED')
        source: Consumer that produced the event ('cli' or 'api')
        details: Optional additional event details
    """
    if not SIEM_LOG_ENABLED:
        return

    event = {
        "timestamp": datetime.now().isoformat(),
        "event_type": event_type,
        "status": status,
        "source": source,
        "app": "password_meter",
    }

    if details:
        event["details"] = details

    _configure_logging().info(json.dumps(event))


def log_evaluation(variant: str, score: int, label: str, criteria_met: int,
                   source: str = "cli") -> None:
    """Record that a password was scored.

    Args:
        variant: Rule variant name
        score: Resulting score
        label: Strength label shown to the user
        criteria_met: Number of criteria the password satisfied
        source: Consumer that requested the evaluation
    """
    log_siem_event(
        "password_evaluation",
        "SUCCESS",
        source=source,
        details={
            "variant": variant,
            "score": score,
            "label": label,
            "criteria_met": criteria_met,
        },
    )


def log_rejected_configuration(value: str, source: str = "api") -> None:
    """Record a request for an unknown rule variant."""
    log_siem_event(
        "password_evaluation",
        "REJECTED",
        source=source,
        details={"variant": str(value)[:64]},
    )


def get_siem_events(limit: int = 100) -> list[dict]:
    """Read and parse SIEM log events.

    Args:
        limit: Maximum number of events to return

    Returns:
        List of parsed event dictionaries, oldest first
    """
    if _handler is not None:
        _handler.flush()

    events = []
    for line in read_lines(SIEM_LOG_FILE):
        try:
            events.append(json.loads(line))
        except json.JSONDecodeError:
            continue

    return events[-limit:]


def count_events_by_status(event_type: Optional[str] = None) -> dict[str, int]:
    """Count SIEM events grouped by status.

    Args:
        event_type: Optional filter by event type

    Returns:
        Dictionary mapping status to count
    """
    events = get_siem_events(limit=10000)
    counts = {}

    for event in events:
        if event_type and event.get("event_type") != event_type:
            continue

        status = event.get("status", "UNKNOWN")
        counts[status] = counts.get(status, 0) + 1

    return counts
