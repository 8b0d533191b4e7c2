"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (GITVIEW__SECTION__KEY)
3. YAML file (explicit path, or ~/.config/gitview/config.yaml)
4. Built-in defaults (this file)

Examples:
    GITVIEW__LOGGING__LEVEL=DEBUG
    GITVIEW__LIMITS__MAX_DIFF_LINES=50000
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration."""

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        GITVIEW__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG logs one event per engine call.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class LimitsConfig(BaseModel):
    """Caller-side input size limits.

    The engine itself never truncates; these values feed the helpers in
    gitview.diff.limits so callers can refuse oversized input up front.

    Env vars:
        GITVIEW__LIMITS__MAX_DIFF_LINES: Largest unified diff worth parsing
        GITVIEW__LIMITS__MAX_WORD_DIFF_CELLS: Largest word-diff DP table
    """

    max_diff_lines: int = Field(
        default=20_000,
        description="Raw unified-diff line count above which callers should skip parsing.",
    )
    max_word_diff_cells: int = Field(
        default=250_000,
        description="Upper bound on old_tokens * new_tokens for a word diff. "
        "The DP table is allocated in full, so memory grows with this value.",
    )

    @field_validator("max_diff_lines", "max_word_diff_cells")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"Limit must be >= 1, got {v}")
        return v


class GitViewConfig(BaseModel):
    """Root configuration object."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    limits: LimitsConfig = Field(default_factory=LimitsConfig)
