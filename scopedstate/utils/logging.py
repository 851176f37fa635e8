"""Logging for scoped state operations.

Provides a structured StateLogger that records every entry it emits, for
callers that want to report on a run afterwards, plus module-level helpers
used by the factories.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)


class LogLevel(Enum):
    """Log levels for scoped state operations."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class ActionType(Enum):
    """Types of actions that can be logged."""

    CREATE = "CREATE"
    CAPTURE = "CAPTURE"
    CACHE_HIT = "CACHE_HIT"
    CACHE_MISS = "CACHE_MISS"
    SCENARIO = "SCENARIO"
    ERROR = "ERROR"


@dataclass
class LogEntry:
    """Structured log entry."""

    timestamp: datetime
    level: LogLevel
    action: ActionType
    subject: str
    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    error_info: Optional[Dict[str, Any]] = None


class StateLogger:
    """Structured logger for a run of scoped state operations.

    Each instance keeps its own list of entries; entries are never shared
    between loggers.
    """

    def __init__(self, run_name: str = ""):
        self.run_name = run_name
        self._log_entries: List[LogEntry] = []

    def _create_entry(
        self,
        level: LogLevel,
        action: ActionType,
        subject: str,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        error_info: Optional[Dict[str, Any]] = None,
    ) -> LogEntry:
        return LogEntry(
            timestamp=datetime.now(timezone.utc),
            level=level,
            action=action,
            subject=subject,
            message=message,
            details=dict(details) if details else {},
            error_info=error_info,
        )

    def _log(self, entry: LogEntry) -> None:
        """Emit entry and store it for reporting."""
        self._log_entries.append(entry)

        log_message = f"[{entry.action.value}] {entry.subject}: {entry.message}"
        if entry.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in entry.details.items())
            log_message += f" ({detail_str})"

        if entry.level == LogLevel.DEBUG:
            logger.debug(log_message)
        elif entry.level == LogLevel.INFO:
            logger.info(log_message)
        elif entry.level == LogLevel.WARNING:
            logger.warning(log_message)
        elif entry.level == LogLevel.ERROR:
            if entry.error_info:
                log_message += f" - Error: {entry.error_info}"
            logger.error(log_message)
        elif entry.level == LogLevel.CRITICAL:
            logger.critical(log_message)

    def log_scenario_result(
        self,
        name: str,
        expected: Any,
        actual: Any,
        passed: bool,
    ) -> None:
        """Log the outcome of one scenario; failures are logged at ERROR."""
        self._log(
            self._create_entry(
                level=LogLevel.INFO if passed else LogLevel.ERROR,
                action=ActionType.SCENARIO,
                subject=name,
                message="passed" if passed else "FAILED",
                details={"expected": expected, "actual": actual},
            )
        )

    def log_error(
        self,
        subject: str,
        error: Exception,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Log error with detailed information."""
        error_info = {
            "error_type": type(error).__name__,
            "error_message": str(error),
        }
        kind = getattr(error, "kind", None)
        if kind:
            error_info["kind"] = kind

        self._log(
            self._create_entry(
                level=LogLevel.ERROR,
                action=ActionType.ERROR,
                subject=subject,
                message=f"Error occurred: {type(error).__name__}",
                details=details,
                error_info=error_info,
            )
        )

    def log_run_start(self) -> None:
        """Log start of a scenario run."""
        logger.info("=" * 60)
        logger.info(f"SCOPED STATE SCENARIOS - START {self.run_name}".rstrip())
        logger.info("=" * 60)

    def log_run_complete(self, total: int, passed: int) -> None:
        """Log completion of a scenario run with summary."""
        logger.info("-" * 40)
        logger.info(f"Total scenarios: {total}")
        logger.info(f"Passed: {passed}")
        logger.info(f"Failed: {total - passed}")
        logger.info("=" * 60)

    def get_log_entries(self) -> List[LogEntry]:
        """Get all log entries for reporting."""
        return self._log_entries.copy()


# Convenience functions for module-level logging


def log_handle_created(kind: str, initial: Any, **details: Any) -> None:
    """Log creation of a closure-backed object at DEBUG level."""
    message = f"[{ActionType.CREATE.value}] {kind} initial={initial!r}"
    if details:
        message += f" ({', '.join(f'{k}={v}' for k, v in details.items())})"
    logger.debug(message)


def log_error_with_details(
    subject: str,
    error: Exception,
    context: Optional[Dict[str, Any]] = None,
) -> None:
    """Log error with detailed information at module level."""
    message = f"[ERROR] {subject}: {type(error).__name__} - {error}"

    if context:
        context_str = ", ".join(f"{k}={v}" for k, v in context.items())
        message += f" (context: {context_str})"

    logger.error(message)
