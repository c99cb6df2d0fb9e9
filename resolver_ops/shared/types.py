"""
Type definitions for resolver-ops.

This module contains the type aliases shared by the resolution helpers.
"""

from typing import Any, Tuple, TypeVar

T = TypeVar('T')

Arguments = Tuple[Any, ...]

# Largest constructor argument list a lookup may forward
MAX_ARGUMENTS = 3
