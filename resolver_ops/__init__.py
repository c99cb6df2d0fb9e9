"""
resolver-ops: resolution shortcuts over a dependency injection container.

Each helper forwards a (type, name, arguments) lookup to a resolver and
raises ``UnresolvableError`` when the resolver produces nothing.
"""

from resolver_ops.core import (
    Resolver,
    Lookup,
    ResolverOperand,
    resolve,
    resolve_named,
    resolve_with,
    resolve_named_with,
    resolve_lookup,
    autowire,
)
from resolver_ops.infrastructure.logging import LoggingConfig, configure_logging
from resolver_ops.shared.exceptions import (
    ResolverOpsError,
    UnresolvableError,
    ValidationError,
    ConfigurationError,
    PreconditionError,
)

__version__ = "1.0.0"

__all__ = [
    "Resolver",
    "Lookup",
    "ResolverOperand",
    "resolve",
    "resolve_named",
    "resolve_with",
    "resolve_named_with",
    "resolve_lookup",
    "autowire",
    "LoggingConfig",
    "configure_logging",
    "ResolverOpsError",
    "UnresolvableError",
    "ValidationError",
    "ConfigurationError",
    "PreconditionError",
]
