"""Config module exports."""

from gitview.config.loader import load_config
from gitview.config.models import (
    GitViewConfig,
    LimitsConfig,
    LoggingConfig,
    LogOutputConfig,
)

__all__ = [
    "load_config",
    "GitViewConfig",
    "LimitsConfig",
    "LoggingConfig",
    "LogOutputConfig",
]
