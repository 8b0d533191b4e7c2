"""Core module exports."""

from gitview.core.errors import (
    ConfigError,
    ErrorCode,
    GitViewError,
    InputError,
)
from gitview.core.logging import configure_logging, get_logger, get_module_logger

__all__ = [
    # Errors
    "ErrorCode",
    "GitViewError",
    "ConfigError",
    "InputError",
    # Logging
    "configure_logging",
    "get_logger",
    "get_module_logger",
]
