"""Tests for settings and logging setup."""

import json
import logging
import sys
from decimal import Decimal

import pytest

from rentals.core.config import Settings
from rentals.core.logging import JsonFormatter, setup_logging


class TestSettings:
    """Tests for Settings."""

    def test_default_values(self, monkeypatch) -> None:
        """Test default configuration values."""
        for name in ("LOG_LEVEL", "LOG_FORMAT", "SUBSCRIPTION_UNIT_RATE", "CURRENCY_ID"):
            monkeypatch.delenv(name, raising=False)

        config = Settings(_env_file=None)

        assert config.SUBSCRIPTION_UNIT_RATE == Decimal("100000")
        assert config.CURRENCY_ID == "COP"
        assert config.LOG_LEVEL == "INFO"
        assert config.LOG_FORMAT == "standard"
        assert config.MERCADO_PAGO_API_URL == "https://api.mercadopago.com"

    def test_from_env(self, monkeypatch) -> None:
        """Test values read from the environment."""
        monkeypatch.setenv("SUBSCRIPTION_UNIT_RATE", "120000")
        monkeypatch.setenv("LOG_FORMAT", "json")
        monkeypatch.setenv("FRONTEND_URL", "https://app.example.com")

        config = Settings(_env_file=None)

        assert config.SUBSCRIPTION_UNIT_RATE == Decimal("120000")
        assert config.LOG_FORMAT == "json"
        assert config.FRONTEND_URL == "https://app.example.com"

    def test_database_url_override(self, monkeypatch) -> None:
        """Test that DATABASE_URL can point at another database."""
        monkeypatch.setenv("DATABASE_URL", "postgresql://rentals@db/rentals")

        assert Settings(_env_file=None).DATABASE_URL == "postgresql://rentals@db/rentals"


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way the test found it."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_logging_default(self, restore_root_logger) -> None:
        """Test default logging setup."""
        setup_logging()

        assert logging.getLogger("rentals").level == logging.INFO
        assert restore_root_logger.level == logging.INFO

    def test_setup_logging_debug(self, restore_root_logger) -> None:
        """Test debug level logging setup."""
        setup_logging(level="debug")

        assert restore_root_logger.level == logging.DEBUG

    def test_setup_logging_invalid_level(self, restore_root_logger) -> None:
        """Test logging with invalid level defaults to INFO."""
        setup_logging(level="INVALID")

        assert restore_root_logger.level == logging.INFO

    def test_setup_logging_json_format(self, restore_root_logger) -> None:
        """Test JSON format logging."""
        setup_logging(format_type="json")

        assert any(isinstance(h.formatter, JsonFormatter) for h in restore_root_logger.handlers)

    def test_setup_logging_replaces_handlers(self, restore_root_logger) -> None:
        """Test that setup_logging replaces existing handlers."""
        restore_root_logger.addHandler(logging.StreamHandler())
        restore_root_logger.addHandler(logging.StreamHandler())

        setup_logging()

        assert len(restore_root_logger.handlers) == 1

    def test_external_loggers_quieted(self, restore_root_logger) -> None:
        """Test that external library loggers are quieted."""
        setup_logging(level="DEBUG")

        for name in ("sqlalchemy.engine", "httpx", "uvicorn.access"):
            assert logging.getLogger(name).level == logging.WARNING


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def _record(self, **kwargs) -> logging.LogRecord:
        return logging.LogRecord(
            name="rentals.services.contract",
            level=logging.INFO,
            pathname="/path/to/contract.py",
            lineno=42,
            msg="Created contract %d",
            args=(7,),
            exc_info=kwargs.get("exc_info"),
        )

    def test_format_basic(self) -> None:
        """Test basic log formatting."""
        data = json.loads(JsonFormatter().format(self._record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "rentals.services.contract"
        assert data["message"] == "Created contract 7"
        assert "timestamp" in data
        assert "exception" not in data

    def test_format_with_exception(self) -> None:
        """Test formatting a record that carries an exception."""
        try:
            raise ValueError("boom")
        except ValueError:
            record = self._record(exc_info=sys.exc_info())

        data = json.loads(JsonFormatter().format(record))

        assert "ValueError: boom" in data["exception"]
