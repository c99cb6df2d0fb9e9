"""
Resolution-sugar layer.

This module provides the shortcuts that turn terse composition-root
expressions into resolver lookups.
"""

from .resolver import Resolver
from .lookup import Lookup
from .operators import (
    ResolverOperand,
    resolve,
    resolve_named,
    resolve_with,
    resolve_named_with,
    resolve_lookup,
    autowire
)

__all__ = [
    "Resolver",
    "Lookup",
    "ResolverOperand",
    "resolve",
    "resolve_named",
    "resolve_with",
    "resolve_named_with",
    "resolve_lookup",
    "autowire"
]
