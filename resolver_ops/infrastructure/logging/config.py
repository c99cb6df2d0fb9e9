"""
Structured logging configuration for resolver-ops.

Composition roots call ``configure_logging()`` once at startup; the
settings come from ``RESOLVER_OPS_*`` environment variables unless a
``LoggingConfig`` is passed explicitly.
"""

import logging
import os
import sys
from typing import Optional

import structlog
from pydantic import BaseModel, field_validator

from resolver_ops.infrastructure.logging.sanitization import StructlogSanitizer
from resolver_ops.shared.exceptions import ConfigurationError

LOG_FORMATS = ("console", "json")


class LoggingConfig(BaseModel):
    """Logging configuration with validation."""
    level: str = "INFO"
    format: str = "console"
    sanitize: bool = True

    @field_validator("level")
    @classmethod
    def validate_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @field_validator("format")
    @classmethod
    def validate_format(cls, value: str) -> str:
        log_format = value.lower()
        if log_format not in LOG_FORMATS:
            raise ValueError(f"Log format must be one of {LOG_FORMATS}, got {value}")
        return log_format

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        """Build the configuration from environment variables."""
        try:
            return cls(
                level=os.getenv("RESOLVER_OPS_LOG_LEVEL", "INFO"),
                format=os.getenv("RESOLVER_OPS_LOG_FORMAT", "console"),
                sanitize=os.getenv("RESOLVER_OPS_LOG_SANITIZE", "true"),
            )
        except ValueError as e:
            # pydantic's ValidationError is a ValueError
            raise ConfigurationError(f"Invalid logging configuration: {e}") from e


def configure_logging(config: Optional[LoggingConfig] = None) -> LoggingConfig:
    """
    Route structlog through stdlib logging with the configured renderer.

    Args:
        config: Explicit configuration; read from the environment when omitted

    Returns:
        The configuration that was applied
    """
    config = config or LoggingConfig.from_env()

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=config.level,
        force=True,
    )

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if config.sanitize:
        processors.append(StructlogSanitizer())
    if config.format == "json":
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    return config
