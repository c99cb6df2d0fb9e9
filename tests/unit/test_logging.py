"""
Unit tests for logging configuration and sanitization.
"""
import logging

import pytest
import structlog

from conftest import Greeter
from resolver_ops.core.operators import resolve
from resolver_ops.infrastructure.logging.config import LoggingConfig, configure_logging
from resolver_ops.infrastructure.logging.sanitization import LogSanitizer, StructlogSanitizer
from resolver_ops.shared.exceptions import ConfigurationError, UnresolvableError


class TestLoggingConfig:
    """Test cases for LoggingConfig."""

    def test_defaults_from_empty_environment(self, monkeypatch):
        """Test defaults when no variables are set."""
        for var in ("RESOLVER_OPS_LOG_LEVEL", "RESOLVER_OPS_LOG_FORMAT", "RESOLVER_OPS_LOG_SANITIZE"):
            monkeypatch.delenv(var, raising=False)

        config = LoggingConfig.from_env()

        assert config.level == "INFO"
        assert config.format == "console"
        assert config.sanitize is True

    def test_values_from_environment(self, monkeypatch):
        """Test variables are read and normalised."""
        monkeypatch.setenv("RESOLVER_OPS_LOG_LEVEL", "debug")
        monkeypatch.setenv("RESOLVER_OPS_LOG_FORMAT", "JSON")
        monkeypatch.setenv("RESOLVER_OPS_LOG_SANITIZE", "false")

        config = LoggingConfig.from_env()

        assert config.level == "DEBUG"
        assert config.format == "json"
        assert config.sanitize is False

    @pytest.mark.parametrize("value,expected", [
        ("1", True), ("yes", True), ("TRUE", True), ("0", False), ("no", False), ("off", False),
    ])
    def test_sanitize_flag_parsing(self, monkeypatch, value, expected):
        """Test common boolean spellings are accepted for the sanitize flag."""
        monkeypatch.setenv("RESOLVER_OPS_LOG_SANITIZE", value)

        assert LoggingConfig.from_env().sanitize is expected

    @pytest.mark.parametrize("var,value", [
        ("RESOLVER_OPS_LOG_LEVEL", "LOUD"),
        ("RESOLVER_OPS_LOG_FORMAT", "xml"),
        ("RESOLVER_OPS_LOG_SANITIZE", "maybe"),
    ])
    def test_invalid_environment_raises(self, monkeypatch, var, value):
        """Test invalid values become ConfigurationError."""
        monkeypatch.setenv(var, value)

        with pytest.raises(ConfigurationError, match="Invalid logging configuration"):
            LoggingConfig.from_env()


class TestConfigureLogging:
    """Test cases for configure_logging."""

    def test_applies_level(self):
        """Test the root logger level follows the configuration."""
        config = configure_logging(LoggingConfig(level="WARNING"))

        assert config.level == "WARNING"
        assert logging.getLogger().level == logging.WARNING

    def test_unresolvable_is_logged_as_json(self, stub_resolver, capsys):
        """Test failed resolution emits a JSON error event without argument values."""
        configure_logging(LoggingConfig(level="DEBUG", format="json"))

        with pytest.raises(UnresolvableError):
            resolve(stub_resolver, Greeter)

        err = capsys.readouterr().err
        assert '"event": "Service could not be resolved"' in err
        assert '"service": "Greeter"' in err
        assert '"level": "error"' in err

    def test_long_service_name_survives_sanitizing(self, stub_resolver, capsys):
        """Test service labels are not mistaken for API keys by the default sanitizer."""
        class ApplicationConfigurationRepositoryFactory:
            pass

        config = configure_logging(LoggingConfig(level="DEBUG", format="json"))
        assert config.sanitize is True

        with pytest.raises(UnresolvableError):
            resolve(stub_resolver, ApplicationConfigurationRepositoryFactory)

        err = capsys.readouterr().err
        label = "TestConfigureLogging.test_long_service_name_survives_sanitizing.<locals>." \
                "ApplicationConfigurationRepositoryFactory"
        assert f'"service": "{label}"' in err
        assert LogSanitizer.REPLACEMENT_TEXT not in err


class TestLogSanitizer:
    """Test cases for log sanitization."""

    def test_sensitive_fields_redacted(self):
        """Test values under sensitive keys are replaced."""
        sanitized = LogSanitizer.sanitize_dict({
            "event": "Resolving service",
            "api_key": "abc",
            "nested": {"password": "hunter2", "service": "Greeter"},
        })

        assert sanitized["event"] == "Resolving service"
        assert sanitized["api_key"] == LogSanitizer.REPLACEMENT_TEXT
        assert sanitized["nested"]["password"] == LogSanitizer.REPLACEMENT_TEXT
        assert sanitized["nested"]["service"] == "Greeter"

    def test_sensitive_values_redacted(self):
        """Test credentials in URLs are redacted wherever they appear."""
        sanitized = LogSanitizer.sanitize_dict({"targets": ["postgresql://user:pw@db/app", "plain"]})

        assert sanitized["targets"] == [LogSanitizer.REPLACEMENT_TEXT, "plain"]

    def test_processor_keeps_exc_info(self):
        """Test the structlog processor leaves exception info alone."""
        processor = StructlogSanitizer()
        event = processor(None, "error", {"event": "boom", "token": "t", "exc_info": True})

        assert event == {"event": "boom", "token": LogSanitizer.REPLACEMENT_TEXT, "exc_info": True}

    def test_processor_in_chain(self):
        """Test bound sensitive context is redacted when rendered."""
        capture = structlog.testing.LogCapture()
        structlog.configure(processors=[StructlogSanitizer(), capture])

        structlog.get_logger("test").info("Building client", secret_token="abc", service="Greeter")

        assert capture.entries[0]["secret_token"] == LogSanitizer.REPLACEMENT_TEXT
        assert capture.entries[0]["service"] == "Greeter"
