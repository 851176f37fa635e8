"""Configuration management for scoped state handles.

Configuration is read from environment variables:
- SCOPEDSTATE_INITIAL_VALUE: Initial counter value for configured handles
- SCOPEDSTATE_THREAD_SAFE: Guard each configured handle with its own lock
- SCOPEDSTATE_ID_START: Starting point for configured ID generators
- SCOPEDSTATE_CAPTURE_COUNT: Number of callbacks built by the capture scenario
- LOG_LEVEL: Configurable log level
"""

import logging
import os
from dataclasses import dataclass
from typing import List, Optional

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

# Module logger for configuration warnings
_config_logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Exception raised for configuration validation errors."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        self.message = message
        self.errors = errors or []
        super().__init__(self.message)


def _parse_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if not value:
        return default
    try:
        return int(value.strip())
    except ValueError:
        raise ConfigurationError(f"Invalid {name}: '{value}' is not a valid integer")


def _log_level_from_environment() -> str:
    value = os.environ.get("LOG_LEVEL", "INFO").upper().strip()
    if value not in VALID_LOG_LEVELS:
        _config_logger.warning(f"Invalid LOG_LEVEL '{value}', defaulting to INFO")
        return "INFO"
    return value


@dataclass
class ScopedStateConfig:
    """Configuration for handles built from the environment.

    Attributes:
        initial_value: Counter value for handles built by create_from_config.
            Any integer is accepted.
        thread_safe: When True, configured handles serialise their operations
            with a per-handle lock.
        id_start: Value the configured ID generator counts up from.
        capture_count: Number of callbacks the capture scenario builds.
        log_level: Log level for output.
    """

    initial_value: int = 0
    thread_safe: bool = False
    id_start: int = 0
    capture_count: int = 10
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls, validate: bool = True) -> "ScopedStateConfig":
        """Create configuration from environment variables.

        Args:
            validate: If True, validates the configuration and raises
                ConfigurationError if invalid.

        Returns:
            ScopedStateConfig instance populated from environment variables.

        Raises:
            ConfigurationError: If SCOPEDSTATE_INITIAL_VALUE or SCOPEDSTATE_ID_START
                is not an integer, or validation is enabled and fails.
        """
        config = cls()

        config.initial_value = _parse_int("SCOPEDSTATE_INITIAL_VALUE", 0)
        config.id_start = _parse_int("SCOPEDSTATE_ID_START", 0)

        thread_safe_value = os.environ.get("SCOPEDSTATE_THREAD_SAFE", "false").lower().strip()
        config.thread_safe = thread_safe_value in ("true", "1", "yes")

        config.log_level = _log_level_from_environment()

        capture_value = os.environ.get("SCOPEDSTATE_CAPTURE_COUNT", "10").strip()
        try:
            config.capture_count = int(capture_value)
        except ValueError:
            _config_logger.warning(
                f"Invalid SCOPEDSTATE_CAPTURE_COUNT '{capture_value}' "
                "(not a valid integer), defaulting to 10"
            )
            config.capture_count = 10

        if validate:
            errors = config.validate()
            if errors:
                raise ConfigurationError(
                    f"Configuration validation failed: {errors}", errors=errors
                )

        return config

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors.

        Returns:
            List of error messages. Empty list if configuration is valid.
        """
        errors = []

        if self.id_start < 0:
            errors.append("SCOPEDSTATE_ID_START must not be negative")

        if self.capture_count < 1:
            errors.append("SCOPEDSTATE_CAPTURE_COUNT must be a positive integer (at least 1)")

        if self.log_level not in VALID_LOG_LEVELS:
            errors.append(f"Invalid LOG_LEVEL: {self.log_level}")

        return errors

    def get_numeric_log_level(self) -> int:
        """Get the numeric log level for use with logging module."""
        return getattr(logging, self.log_level, logging.INFO)


def configure_logging(config: Optional[ScopedStateConfig] = None) -> logging.Logger:
    """Install the root handler and set the scopedstate logger level.

    Only LOG_LEVEL is read when no config is given, so this also works after
    from_environment() has rejected the other variables.

    Returns:
        The "scopedstate" package logger.
    """
    if config is None:
        config = ScopedStateConfig(log_level=_log_level_from_environment())
    level = config.get_numeric_log_level()

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,
    )

    package_logger = logging.getLogger("scopedstate")
    package_logger.setLevel(level)
    return package_logger
