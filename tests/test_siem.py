"""Tests for SIEM event logging."""

import json

import core.siem as siem
from core import count_events_by_status, get_siem_events, log_evaluation, log_siem_event
from core.storage import ensure_directories


class TestEventLogging:
    """JSON-lines event log."""

    def test_evaluation_event_written(self, siem_log):
        """Evaluation events are written as one JSON object per line."""
        log_evaluation("standard", 5, "Very Strong", 5, source="cli")
        siem.shutdown_logging()

        lines = siem_log.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 1
        event = json.loads(lines[0])
        assert event["event_type"] == "password_evaluation"
        assert event["status"] == "SUCCESS"
        assert event["source"] == "cli"
        assert event["details"] == {
            "variant": "standard",
            "score": 5,
            "label": "Very Strong",
            "criteria_met": 5,
        }
        assert "timestamp" in event

    def test_get_siem_events_limit(self):
        """Only the most recent events are returned."""
        for score in range(5):
            log_evaluation("extended", score, "Weak", score)
        events = get_siem_events(limit=2)
        assert [event["details"]["score"] for event in events] == [3, 4]

    def test_count_events_by_status(self):
        """Events are grouped by status and filterable by type."""
        log_evaluation("standard", 1, "Weak", 1)
        log_evaluation("standard", 2, "Weak", 2)
        siem.log_rejected_configuration("bogus")
        log_siem_event("service_start", "SUCCESS", source="api")

        assert count_events_by_status("password_evaluation") == {"SUCCESS": 2, "REJECTED": 1}
        assert count_events_by_status() == {"SUCCESS": 3, "REJECTED": 1}

    def test_disabled_logging(self, siem_log, monkeypatch):
        """No file is created when logging is disabled."""
        monkeypatch.setattr(siem, "SIEM_LOG_ENABLED", False)
        log_evaluation("standard", 0, "Very Weak", 0)
        assert not siem_log.exists()
        assert get_siem_events() == []

    def test_corrupt_lines_skipped(self, siem_log):
        """Lines that are not JSON are ignored when reading."""
        siem_log.parent.mkdir(parents=True, exist_ok=True)
        siem_log.write_text('not json\n{"status": "SUCCESS"}\n', encoding="utf-8")
        assert get_siem_events() == [{"status": "SUCCESS"}]

    def test_shutdown_is_idempotent(self):
        """Shutting down twice is harmless."""
        log_evaluation("standard", 0, "Very Weak", 0)
        siem.shutdown_logging()
        siem.shutdown_logging()
        assert len(get_siem_events()) == 1


class TestStorage:
    """Log directory helpers."""

    def test_ensure_directories_creates_nested(self, tmp_path):
        """Nested log directories are created, repeated calls are harmless."""
        target = tmp_path / "a" / "b"
        ensure_directories(str(target))
        ensure_directories(str(target))
        assert target.is_dir()
