"""GitView error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Input (violated preconditions on engine entry points)

Malformed diff text or odd commit histories are never errors; the engine
degrades to no-ops for those. Only programming errors surface here.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002
    CONFIG_FILE_NOT_FOUND = 2004

    # Input (3xxx)
    INPUT_NOT_A_STRING = 3001
    INPUT_NOT_A_SEQUENCE = 3002


@dataclass(frozen=True, slots=True)
class GitViewError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'INPUT_NOT_A_STRING')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(GitViewError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )

    @classmethod
    def file_not_found(cls, path: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_FILE_NOT_FOUND,
            message=f"Config file not found: {path}",
            details={"path": path},
        )


class InputError(GitViewError):
    """Caller passed a value of the wrong type to an engine entry point."""

    @classmethod
    def not_a_string(cls, operation: str, argument: str, value: Any) -> "InputError":
        return cls(
            code=ErrorCode.INPUT_NOT_A_STRING,
            message=f"{operation}() expects str for '{argument}', got {type(value).__name__}",
            details={"operation": operation, "argument": argument, "type": type(value).__name__},
        )

    @classmethod
    def not_a_sequence(cls, operation: str, argument: str, value: Any) -> "InputError":
        return cls(
            code=ErrorCode.INPUT_NOT_A_SEQUENCE,
            message=f"{operation}() expects a sequence for '{argument}', got {type(value).__name__}",
            details={"operation": operation, "argument": argument, "type": type(value).__name__},
        )


def require_str(operation: str, argument: str, value: Any) -> str:
    """Return value unchanged if it is a str, else raise InputError."""
    if not isinstance(value, str):
        raise InputError.not_a_string(operation, argument, value)
    return value
