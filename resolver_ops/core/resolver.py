"""
Resolver capability consumed by the resolution helpers.

Any container exposing a compatible ``resolve`` method satisfies this
protocol; registration and lifetime management stay with the container.
"""

from typing import Any, Optional, Protocol, Type, runtime_checkable

from resolver_ops.shared.types import T


@runtime_checkable
class Resolver(Protocol):
    """Maps a (type, optional name, optional arguments) key to an instance."""

    def resolve(self, service: Type[T], *arguments: Any, name: Optional[str] = None) -> Optional[T]:
        """
        Look up an instance of ``service``.

        Args:
            service: Type of service to resolve
            *arguments: Positional constructor arguments, in call-site order
            name: Registration qualifier, or None for unqualified resolution

        Returns:
            The instance, or None when nothing is registered for the key
        """
        ...
