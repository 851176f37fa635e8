"""Tests for the logging module.

Tests for LogEntry, StateLogger and the module-level helpers.
"""

import logging
from datetime import datetime, timezone

from scopedstate.utils.logging import (
    ActionType,
    LogEntry,
    LogLevel,
    StateLogger,
    log_error_with_details,
    log_handle_created,
)
from scopedstate.utils.validation import InvalidArgumentError


class TestLogEntry:
    """Tests for LogEntry dataclass."""

    def test_defaults(self):
        """Test details default to an empty dict and error info to None."""
        timestamp = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        entry = LogEntry(
            timestamp=timestamp,
            level=LogLevel.INFO,
            action=ActionType.SCENARIO,
            subject="counter.single_increment",
            message="passed",
        )

        assert entry.timestamp == timestamp
        assert entry.details == {}
        assert entry.error_info is None

    def test_entries_do_not_share_details(self):
        """Test each entry gets its own details dict."""
        first = LogEntry(
            timestamp=datetime.now(timezone.utc),
            level=LogLevel.INFO,
            action=ActionType.CREATE,
            subject="a",
            message="m",
        )
        second = LogEntry(
            timestamp=datetime.now(timezone.utc),
            level=LogLevel.INFO,
            action=ActionType.CREATE,
            subject="b",
            message="m",
        )
        first.details["x"] = 1
        assert second.details == {}


class TestStateLogger:
    """Tests for StateLogger."""

    def test_scenario_pass_logged_at_info(self, caplog):
        """Test passing scenarios are logged at INFO with details."""
        caplog.set_level(logging.DEBUG, logger="scopedstate")
        state_logger = StateLogger()

        state_logger.log_scenario_result("counter", 1, 1, True)

        entries = state_logger.get_log_entries()
        assert len(entries) == 1
        assert entries[0].level == LogLevel.INFO
        assert entries[0].action == ActionType.SCENARIO
        assert "[SCENARIO] counter: passed (expected=1, actual=1)" in caplog.text

    def test_scenario_failure_logged_at_error(self, caplog):
        """Test failing scenarios are logged at ERROR."""
        caplog.set_level(logging.DEBUG, logger="scopedstate")
        state_logger = StateLogger()

        state_logger.log_scenario_result("counter", 1, 2, False)

        assert state_logger.get_log_entries()[0].level == LogLevel.ERROR
        assert any(
            r.levelno == logging.ERROR and "FAILED" in r.getMessage() for r in caplog.records
        )

    def test_log_error_includes_kind(self, caplog):
        """Test errors carrying a kind record it in error info."""
        caplog.set_level(logging.DEBUG, logger="scopedstate")
        state_logger = StateLogger()

        state_logger.log_error("create", InvalidArgumentError("initial", ["bad"]))

        entry = state_logger.get_log_entries()[0]
        assert entry.error_info["error_type"] == "InvalidArgumentError"
        assert entry.error_info["kind"] == "InvalidArgument"
        assert "Error occurred: InvalidArgumentError" in caplog.text

    def test_log_error_without_kind(self):
        """Test plain exceptions have no kind in error info."""
        state_logger = StateLogger()
        state_logger.log_error("create", RuntimeError("boom"))
        assert "kind" not in state_logger.get_log_entries()[0].error_info

    def test_entries_are_per_logger(self):
        """Test two loggers keep separate entry lists."""
        first = StateLogger()
        second = StateLogger()
        first.log_scenario_result("a", 1, 1, True)
        assert len(first.get_log_entries()) == 1
        assert second.get_log_entries() == []

    def test_get_log_entries_returns_copy(self):
        """Test mutating the returned list does not affect the logger."""
        state_logger = StateLogger()
        state_logger.log_scenario_result("a", 1, 1, True)
        state_logger.get_log_entries().clear()
        assert len(state_logger.get_log_entries()) == 1

    def test_run_banners(self, caplog):
        """Test run start and summary lines."""
        caplog.set_level(logging.INFO, logger="scopedstate")
        state_logger = StateLogger(run_name="demo")

        state_logger.log_run_start()
        state_logger.log_run_complete(total=5, passed=4)

        assert "SCOPED STATE SCENARIOS - START demo" in caplog.text
        assert "Total scenarios: 5" in caplog.text
        assert "Failed: 1" in caplog.text


class TestModuleHelpers:
    """Tests for module-level logging helpers."""

    def test_log_handle_created(self, caplog):
        caplog.set_level(logging.DEBUG, logger="scopedstate")
        log_handle_created("IdGenerator", 3)
        assert "[CREATE] IdGenerator initial=3" in caplog.text

    def test_log_handle_created_with_details(self, caplog):
        caplog.set_level(logging.DEBUG, logger="scopedstate")
        log_handle_created("StatefulHandle", 0, thread_safe=False)
        assert "[CREATE] StatefulHandle initial=0 (thread_safe=False)" in caplog.text

    def test_log_error_with_details(self, caplog):
        caplog.set_level(logging.DEBUG, logger="scopedstate")
        log_error_with_details("memoize", TypeError("unhashable"), {"parameter": "fn"})
        record = caplog.records[0]
        assert record.levelno == logging.ERROR
        assert record.getMessage() == (
            "[ERROR] memoize: TypeError - unhashable (context: parameter=fn)"
        )
