"""
Contract Programming implementation with preconditions.

This module provides decorators and conditions for implementing Design by
Contract checks on the resolution helpers.
"""

import functools
import inspect
from typing import Any, Callable, TypeVar, Union
import structlog

from resolver_ops.shared.exceptions import PreconditionError

logger = structlog.get_logger(__name__)

F = TypeVar('F', bound=Callable[..., Any])


def require(condition: Union[bool, Callable[..., bool]], message: str = "") -> Callable[[F], F]:
    """
    Precondition decorator - validates input parameters.

    Args:
        condition: Boolean expression or callable that takes function arguments
        message: Custom error message for contract violation

    Returns:
        Decorated function with precondition checking

    Raises:
        PreconditionError: If precondition is not met
    """
    def decorator(func: F) -> F:
        sig = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            if callable(condition):
                try:
                    result = condition(*args, **kwargs)
                except Exception as e:
                    logger.error(
                        "Precondition evaluation failed",
                        function=func.__name__,
                        error=str(e)
                    )
                    raise PreconditionError(
                        f"Precondition evaluation error in {func.__name__}: {str(e)}"
                    ) from e
            else:
                result = condition

            if not result:
                error_msg = message or f"Precondition failed in {func.__name__}"
                # Argument values may be secrets; only their names are logged
                bound_args = sig.bind_partial(*args, **kwargs)
                logger.warning(
                    "Precondition violation",
                    function=func.__name__,
                    message=error_msg,
                    args=sorted(bound_args.arguments)
                )
                raise PreconditionError(error_msg)

            return func(*args, **kwargs)

        return wrapper
    return decorator


# Common contract conditions for resolution calls

def is_service_type(value: Any) -> bool:
    """Check if value can identify a service (a class or other callable)."""
    return value is not None and callable(value)


def is_qualifier(value: Any) -> bool:
    """Check if value is a usable name qualifier. The empty string is allowed."""
    return isinstance(value, str)
