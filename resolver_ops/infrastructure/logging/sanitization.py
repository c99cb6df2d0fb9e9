"""
Logging sanitization for sensitive data protection.

Constructor arguments forwarded to a resolver often carry credentials,
so every event bound by callers goes through this sanitizer before it
is rendered.
"""

import re
from typing import Any, Dict, List, Optional


class LogSanitizer:
    """Sanitizes sensitive data from log output."""

    # Sensitive field patterns (case-insensitive)
    SENSITIVE_FIELD_PATTERNS = {
        'password', 'passwd', 'pwd', 'secret', 'token', 'api_key', 'apikey',
        'private_key', 'authorization', 'bearer', 'credential', 'dsn',
        'connection_string', 'session_key'
    }

    # Sensitive value patterns (regex)
    SENSITIVE_VALUE_PATTERNS = [
        # Credentials embedded in URLs
        r'://[^@/\s]+:[^@/\s]+@',
        # JWT tokens (basic pattern)
        r'\beyJ[A-Za-z0-9-_]+\.[A-Za-z0-9-_]+\.[A-Za-z0-9-_]*\b',
        # API keys (common patterns)
        r'\b[A-Za-z0-9]{32,}\b',
    ]

    REPLACEMENT_TEXT = "***REDACTED***"

    # Keys structlog itself adds; never treated as sensitive
    RESERVED_KEYS = {'event', 'level', 'logger', 'timestamp'}

    # Keys of Lookup.describe(); they carry type labels, never argument values
    LOG_SAFE_KEYS = {'service', 'qualifier', 'arity'}

    @classmethod
    def sanitize_dict(cls, data: Dict[str, Any], max_depth: int = 10) -> Dict[str, Any]:
        """
        Recursively sanitize a dictionary, removing sensitive data.

        Args:
            data: Dictionary to sanitize
            max_depth: Maximum recursion depth to prevent infinite loops

        Returns:
            Sanitized dictionary with sensitive fields redacted
        """
        if max_depth <= 0:
            return {"error": "max_depth_reached"}

        sanitized = {}

        for key, value in data.items():
            lowered = str(key).lower()

            if lowered in cls.LOG_SAFE_KEYS:
                sanitized[key] = value
            elif lowered not in cls.RESERVED_KEYS and any(pattern in lowered for pattern in cls.SENSITIVE_FIELD_PATTERNS):
                sanitized[key] = cls.REPLACEMENT_TEXT
            elif isinstance(value, dict):
                sanitized[key] = cls.sanitize_dict(value, max_depth - 1)
            elif isinstance(value, (list, tuple)):
                sanitized[key] = cls._sanitize_list(value, max_depth - 1)
            else:
                sanitized[key] = cls._sanitize_value(value)

        return sanitized

    @classmethod
    def _sanitize_list(cls, data: List[Any], max_depth: int) -> List[Any]:
        """Sanitize a list of values."""
        if max_depth <= 0:
            return ["max_depth_reached"]

        sanitized = []
        for item in data:
            if isinstance(item, dict):
                sanitized.append(cls.sanitize_dict(item, max_depth - 1))
            elif isinstance(item, (list, tuple)):
                sanitized.append(cls._sanitize_list(item, max_depth - 1))
            else:
                sanitized.append(cls._sanitize_value(item))

        return sanitized

    @classmethod
    def _sanitize_value(cls, value: Any) -> Any:
        """Sanitize a single value based on content patterns."""
        if not isinstance(value, str):
            return value

        for pattern in cls.SENSITIVE_VALUE_PATTERNS:
            if re.search(pattern, value):
                return cls.REPLACEMENT_TEXT

        return value


class StructlogSanitizer:
    """Structlog processor for sanitizing log events."""

    def __init__(self, sanitizer: Optional[LogSanitizer] = None):
        self.sanitizer = sanitizer or LogSanitizer()

    def __call__(self, logger, method_name, event_dict):
        """
        Structlog processor that sanitizes event data.

        Args:
            logger: Logger instance
            method_name: Logging method name
            event_dict: Event dictionary to sanitize

        Returns:
            Sanitized event dictionary
        """
        # exc_info must reach the renderer untouched
        exc_info = event_dict.pop("exc_info", None)
        sanitized_event = self.sanitizer.sanitize_dict(event_dict)
        if exc_info is not None:
            sanitized_event["exc_info"] = exc_info
        return sanitized_event
