"""Tests for config and logging."""

import json
import logging
import os
from datetime import date, datetime
from unittest.mock import patch

import pytest

from nocobuilds.comparison import ComparisonSet
from nocobuilds.config import DirectoryConfig
from nocobuilds.exceptions import ConfigurationError
from nocobuilds.logging import JsonFormatter, get_logger, setup_logging


class TestDirectoryConfig:
    """Tests for DirectoryConfig."""

    def test_default_values(self) -> None:
        config = DirectoryConfig()

        assert config.log_level == "INFO"
        assert config.log_format == "standard"
        assert config.expiring_soon_days == 30
        assert config.seed is None
        assert config.locale == "en_US"
        assert config.sample_builders == 25

    def test_negative_window_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            DirectoryConfig(expiring_soon_days=-1)

    def test_incentive_criteria(self) -> None:
        criteria = DirectoryConfig(expiring_soon_days=14).incentive_criteria()
        assert criteria.expiring_soon_days == 14
        assert criteria.hide_expired is True

    def test_from_env_defaults(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            config = DirectoryConfig.from_env()

        assert config == DirectoryConfig()

    def test_from_env_custom(self) -> None:
        env = {
            "NOCO_LOG_LEVEL": "DEBUG",
            "NOCO_LOG_FORMAT": "json",
            "NOCO_EXPIRING_SOON_DAYS": "14",
            "NOCO_SEED": "42",
            "NOCO_LOCALE": "en_GB",
            "NOCO_SAMPLE_BUILDERS": "5",
        }
        with patch.dict(os.environ, env, clear=True):
            config = DirectoryConfig.from_env()

        assert config.log_level == "DEBUG"
        assert config.log_format == "json"
        assert config.expiring_soon_days == 14
        assert config.seed == 42
        assert config.locale == "en_GB"
        assert config.sample_builders == 5

    def test_from_env_invalid_integer(self) -> None:
        with patch.dict(os.environ, {"NOCO_EXPIRING_SOON_DAYS": "soon"}, clear=True):
            with pytest.raises(ConfigurationError, match="NOCO_EXPIRING_SOON_DAYS"):
                DirectoryConfig.from_env()


class TestLogging:
    """Tests for logging setup."""

    def test_setup_standard(self) -> None:
        setup_logging(level="DEBUG")

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert logging.getLogger("nocobuilds").level == logging.DEBUG

    def test_setup_json(self) -> None:
        setup_logging(level="INFO", format_type="json")
        assert isinstance(logging.getLogger().handlers[0].formatter, JsonFormatter)

    def test_unknown_level_falls_back_to_info(self) -> None:
        setup_logging(level="LOUD")
        assert logging.getLogger().level == logging.INFO

    def test_json_formatter(self) -> None:
        record = logging.LogRecord(
            name="nocobuilds.test",
            level=logging.INFO,
            pathname="test.py",
            lineno=1,
            msg="Matched %d builders",
            args=(3,),
            exc_info=None,
        )
        data = json.loads(JsonFormatter().format(record))

        assert data["level"] == "INFO"
        assert data["logger"] == "nocobuilds.test"
        assert data["message"] == "Matched 3 builders"
        assert "timestamp" in data

    def test_json_formatter_context_fields(self) -> None:
        record = logging.LogRecord(
            name="nocobuilds.comparison.manager",
            level=logging.INFO,
            pathname="manager.py",
            lineno=1,
            msg="Comparison recorded",
            args=(),
            exc_info=None,
        )
        record.builder_ids = ["b-horton", "b-richmond"]
        record.today = date(2025, 6, 1)
        record.unrelated = "ignored"
        data = json.loads(JsonFormatter().format(record))

        assert data["builder_ids"] == ["b-horton", "b-richmond"]
        assert data["today"] == "2025-06-01"
        assert "unrelated" not in data
        assert "builder_id" not in data

    def test_comparison_logs_carry_builder_ids(self, caplog, make_builder) -> None:
        comparison = ComparisonSet()
        comparison.add(make_builder(builder_id="b-1"))
        comparison.add(make_builder(builder_id="b-2"))

        with caplog.at_level(logging.INFO, logger="nocobuilds"):
            comparison.record_comparison(datetime(2025, 6, 1, 12, 0))

        (record,) = [r for r in caplog.records if r.name == "nocobuilds.comparison.manager"]
        data = json.loads(JsonFormatter().format(record))
        assert data["builder_ids"] == ["b-1", "b-2"]

    def test_json_formatter_with_exception(self) -> None:
        try:
            raise ValueError("boom")
        except ValueError:
            import sys

            record = logging.LogRecord(
                name="nocobuilds.test",
                level=logging.ERROR,
                pathname="test.py",
                lineno=1,
                msg="failed",
                args=(),
                exc_info=sys.exc_info(),
            )
        data = json.loads(JsonFormatter().format(record))
        assert "ValueError: boom" in data["exception"]

    def test_get_logger(self) -> None:
        assert get_logger("nocobuilds.search").name == "nocobuilds.search"
