"""Shared fixtures."""

import pytest

import core.siem as siem


@pytest.fixture(autouse=True)
def siem_log(tmp_path, monkeypatch):
    """Point the event log at a temporary file for every test."""
    log_file = tmp_path / "logs" / "siem_events.jsonl"
    siem.shutdown_logging()
    monkeypatch.setattr(siem, "SIEM_LOG_FILE", str(log_file))
    monkeypatch.setattr(siem, "SIEM_LOG_ENABLED", True)
    yield log_file
    siem.shutdown_logging()
