"""
Structured logging infrastructure.
"""

from .config import LoggingConfig, configure_logging
from .sanitization import LogSanitizer, StructlogSanitizer

__all__ = [
    "LoggingConfig",
    "configure_logging",
    "LogSanitizer",
    "StructlogSanitizer"
]
