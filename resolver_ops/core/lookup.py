"""
Lookup call tuples.

A ``Lookup`` bundles the service type, optional name qualifier and
constructor arguments for a single resolution.
"""

from dataclasses import dataclass
from typing import Generic, Optional, Type

from resolver_ops.shared.contracts import is_service_type, is_qualifier
from resolver_ops.shared.exceptions import ValidationError, service_label
from resolver_ops.shared.types import T, Arguments, MAX_ARGUMENTS


@dataclass(frozen=True)
class Lookup(Generic[T]):
    """Parameters of one resolution: type, qualifier and arguments."""
    service: Type[T]
    name: Optional[str] = None
    arguments: Arguments = ()

    def __post_init__(self):
        if not is_service_type(self.service):
            raise ValidationError(
                f"Service must be a type, got {self.service!r}",
                field="service",
                value=self.service
            )
        if self.name is not None and not is_qualifier(self.name):
            raise ValidationError(
                f"Service name must be a string, got {type(self.name).__name__}",
                field="name",
                value=self.name
            )
        if isinstance(self.arguments, list):
            object.__setattr__(self, "arguments", tuple(self.arguments))
        elif not isinstance(self.arguments, tuple):
            raise ValidationError(
                f"Arguments must be a tuple or list, got {type(self.arguments).__name__}",
                field="arguments",
                value=self.arguments
            )
        if len(self.arguments) > MAX_ARGUMENTS:
            raise ValidationError(
                f"At most {MAX_ARGUMENTS} arguments can be forwarded, got {len(self.arguments)}",
                field="arguments",
                value=len(self.arguments)
            )

    @property
    def arity(self) -> int:
        return len(self.arguments)

    @property
    def is_named(self) -> bool:
        return self.name is not None

    def describe(self) -> dict:
        """Log-safe summary; argument values are left out."""
        return {
            "service": service_label(self.service),
            "qualifier": self.name,
            "arity": self.arity,
        }
