"""Tests for structured logging."""

import json
import logging
from pathlib import Path

import pytest
import structlog

from gitview.config.models import LoggingConfig, LogOutputConfig
from gitview.core.logging import configure_logging, get_logger
from gitview.diff.parser import parse_unified_diff
from gitview.diff.words import compute_word_diff
from gitview.graph.lanes import assign_lanes
from gitview.graph.models import CommitEntry


class TestLoggingConfiguration:
    """Logging configuration tests."""

    def setup_method(self) -> None:
        """Reset structlog and stdlib logging before each test."""
        structlog.reset_defaults()
        logging.getLogger().handlers.clear()

    def teardown_method(self) -> None:
        for handler in logging.getLogger().handlers:
            handler.close()
        logging.getLogger().handlers.clear()
        logging.getLogger().setLevel(logging.WARNING)
        structlog.reset_defaults()

    def test_given_json_format_when_log_then_valid_json_output(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """JSON format produces valid JSON with required fields."""
        # Given
        configure_logging(json_format=True, level="INFO")
        logger = get_logger("test")

        # When
        logger.info("test message", key="value")

        # Then
        captured = capsys.readouterr()
        lines = [line for line in captured.err.strip().split("\n") if line]
        data = json.loads(lines[-1])
        assert data["event"] == "test message"
        assert data["key"] == "value"
        assert data["logger"] == "test"
        assert "timestamp" in data
        assert data["level"] == "info"

    def test_given_config_object_when_configure_then_takes_precedence(self, tmp_path: Path) -> None:
        """LoggingConfig object takes precedence over simple params."""
        # Given
        log_file = tmp_path / "test.log"
        config = LoggingConfig(
            level="DEBUG",
            outputs=[LogOutputConfig(format="json", destination=str(log_file))],
        )

        # When - config's DEBUG should override the level="ERROR" param
        configure_logging(config=config, json_format=False, level="ERROR")
        get_logger().debug("debug msg")

        # Then
        assert "debug msg" in log_file.read_text()

    def test_given_multi_output_config_when_configure_then_logs_to_all(
        self, tmp_path: Path
    ) -> None:
        """Multiple outputs receive logs according to their levels."""
        # Given
        debug_file = tmp_path / "debug.log"
        info_file = tmp_path / "info.log"
        config = LoggingConfig(
            level="DEBUG",
            outputs=[
                LogOutputConfig(format="json", destination=str(info_file), level="INFO"),
                LogOutputConfig(format="json", destination=str(debug_file)),
            ],
        )

        # When
        configure_logging(config=config)
        logger = get_logger()
        logger.debug("debug only")
        logger.info("info msg")

        # Then
        info_content = info_file.read_text()
        assert "info msg" in info_content
        assert "debug only" not in info_content
        debug_content = debug_file.read_text()
        assert "debug only" in debug_content
        assert "info msg" in debug_content

    def test_given_debug_level_when_engine_runs_then_emits_event(self, tmp_path: Path) -> None:
        """Engine modules log through the configured pipeline."""
        # Given
        log_file = tmp_path / "engine.log"
        configure_logging(
            config=LoggingConfig(
                level="DEBUG",
                outputs=[LogOutputConfig(format="json", destination=str(log_file))],
            )
        )

        # When
        parse_unified_diff("")

        # Then
        events = [json.loads(line) for line in log_file.read_text().splitlines() if line]
        parsed = [e for e in events if e["event"] == "unified_diff_parsed"]
        assert parsed
        assert parsed[-1]["files"] == 0

    def test_given_nested_file_destination_when_configure_then_creates_parent(
        self, tmp_path: Path
    ) -> None:
        """File outputs create missing parent directories."""
        log_file = tmp_path / "nested" / "dir" / "out.log"
        configure_logging(
            config=LoggingConfig(outputs=[LogOutputConfig(destination=str(log_file))])
        )
        assert log_file.parent.is_dir()


class TestUnconfiguredLogging:
    """Engine calls stay silent when the host never configures logging."""

    def setup_method(self) -> None:
        structlog.reset_defaults()
        logging.getLogger().handlers.clear()
        logging.getLogger().setLevel(logging.WARNING)

    def teardown_method(self) -> None:
        for handler in logging.getLogger().handlers:
            handler.close()
        logging.getLogger().handlers.clear()
        logging.getLogger().setLevel(logging.WARNING)
        structlog.reset_defaults()

    def test_given_default_structlog_when_engine_runs_then_no_output(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Debug events are not printed to stdout or stderr."""
        # Given
        capsys.readouterr()

        # When
        assign_lanes([CommitEntry("a")])
        parse_unified_diff("diff --git a/f b/f\n@@ -1 +1 @@\n-a\n+b\n")
        compute_word_diff("a b", "a c")

        # Then
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_given_module_logger_when_configured_later_then_routes_to_output(
        self, tmp_path: Path
    ) -> None:
        """Loggers created at import time follow a later configure_logging."""
        # Given
        log_file = tmp_path / "late.log"

        # When
        configure_logging(
            config=LoggingConfig(
                level="DEBUG",
                outputs=[LogOutputConfig(format="json", destination=str(log_file))],
            )
        )
        compute_word_diff("a b", "a c")

        # Then
        events = [json.loads(line) for line in log_file.read_text().splitlines() if line]
        assert any(e["event"] == "word_diff_computed" for e in events)
