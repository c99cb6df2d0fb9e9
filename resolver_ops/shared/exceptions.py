"""
Custom exceptions for resolver-ops.

This module defines the error hierarchy raised by the resolution helpers,
providing detailed error information for debugging composition roots.
"""

from typing import Optional, Dict, Any, Tuple


class ResolverOpsError(Exception):
    """Base exception for all resolver-ops errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None, error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.error_code = error_code


class ConfigurationError(ResolverOpsError):
    """Raised when there are configuration or setup issues."""
    pass


class ValidationError(ResolverOpsError):
    """Raised when a resolution call is malformed."""

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value


class ContractViolationError(ResolverOpsError):
    """Base class for contract programming violations."""
    pass


class PreconditionError(ContractViolationError):
    """Raised when a function precondition is violated."""
    pass


class UnresolvableError(ResolverOpsError):
    """Raised when the resolver produces no instance for a lookup."""

    def __init__(self, service: Any, name: Optional[str] = None, arguments: Tuple[Any, ...] = (), **kwargs):
        message = f"Unresolvable service: {service_label(service)}"
        if name is not None:
            message += f" (name={name!r})"
        if arguments:
            message += f" with {len(arguments)} argument(s)"
        kwargs.setdefault("error_code", "UNRESOLVABLE")
        super().__init__(message, **kwargs)
        self.service = service
        self.name = name
        self.arity = len(arguments)


def service_label(service: Any) -> str:
    """Human readable name for a service type."""
    return getattr(service, "__qualname__", None) or getattr(service, "__name__", None) or repr(service)


def is_fatal_error(exception: Exception) -> bool:
    """Determine if an error must terminate the composition root."""
    return isinstance(exception, UnresolvableError)
