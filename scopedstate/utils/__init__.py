"""Utility modules for configuration, logging and input validation."""

from scopedstate.utils.config import ConfigurationError, ScopedStateConfig, configure_logging
from scopedstate.utils.logging import (
    ActionType,
    LogEntry,
    LogLevel,
    StateLogger,
    log_error_with_details,
    log_handle_created,
)
from scopedstate.utils.validation import (
    InputValidator,
    InvalidArgumentError,
    ValidationResult,
    require_valid,
)

__all__ = [
    "ConfigurationError",
    "ScopedStateConfig",
    "configure_logging",
    "ActionType",
    "LogEntry",
    "LogLevel",
    "StateLogger",
    "log_error_with_details",
    "log_handle_created",
    "InputValidator",
    "InvalidArgumentError",
    "ValidationResult",
    "require_valid",
]
