"""Input validation for scoped state construction.

Validators return a ValidationResult instead of raising, so callers decide
whether an invalid value is fatal. The public factory operations turn an
invalid result into an InvalidArgumentError at construction time.
"""

from dataclasses import dataclass
from typing import Any, List, Optional

from scopedstate.utils.logging import log_error_with_details


class InvalidArgumentError(ValueError):
    """Raised when a construction parameter has the wrong type."""

    kind = "InvalidArgument"

    def __init__(self, parameter: str, errors: Optional[List[str]] = None):
        self.parameter = parameter
        self.errors = errors or []
        message = f"Invalid argument '{parameter}'"
        if self.errors:
            message += f": {'; '.join(self.errors)}"
        self.message = message
        super().__init__(self.message)


@dataclass
class ValidationResult:
    """Result of input validation."""

    is_valid: bool
    errors: List[str]
    sanitized_value: Optional[Any] = None

    @classmethod
    def valid(cls, sanitized_value: Any = None) -> "ValidationResult":
        """Create a valid result."""
        return cls(is_valid=True, errors=[], sanitized_value=sanitized_value)

    @classmethod
    def invalid(cls, errors: List[str]) -> "ValidationResult":
        """Create an invalid result."""
        return cls(is_valid=False, errors=errors)

    def raise_if_invalid(self, parameter: str) -> Any:
        """Return the sanitized value, or raise InvalidArgumentError."""
        if not self.is_valid:
            raise InvalidArgumentError(parameter, self.errors)
        return self.sanitized_value


class InputValidator:
    """Type checks for the parameters accepted by the closure factories."""

    @staticmethod
    def validate_integer(value: Any) -> ValidationResult:
        """
        Validate an integer parameter.

        Bools are rejected even though bool subclasses int. No range check
        is applied.

        Args:
            value: The value to validate

        Returns:
            ValidationResult with validation status and any errors
        """
        if isinstance(value, bool) or not isinstance(value, int):
            return ValidationResult.invalid(
                [f"expected an integer, got {type(value).__name__}"]
            )
        return ValidationResult.valid(value)

    @staticmethod
    def validate_callable(value: Any) -> ValidationResult:
        """Validate that a value can be called."""
        if not callable(value):
            return ValidationResult.invalid(
                [f"expected a callable, got {type(value).__name__}"]
            )
        return ValidationResult.valid(value)

    @staticmethod
    def validate_text(value: Any) -> ValidationResult:
        """Validate a string parameter."""
        if not isinstance(value, str):
            return ValidationResult.invalid(
                [f"expected a string, got {type(value).__name__}"]
            )
        return ValidationResult.valid(value)


def require_valid(result: ValidationResult, parameter: str, subject: str) -> Any:
    """Return the validated value or log and raise InvalidArgumentError.

    Args:
        result: Outcome of an InputValidator check
        parameter: Name of the parameter that was checked
        subject: Name of the object being constructed, for the log line

    Raises:
        InvalidArgumentError: If ``result`` is invalid.
    """
    try:
        return result.raise_if_invalid(parameter)
    except InvalidArgumentError as e:
        log_error_with_details(subject, e, {"parameter": parameter})
        raise
