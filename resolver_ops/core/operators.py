"""
Resolution shortcuts for composition roots.

Each helper forwards a lookup to a resolver and unwraps the result:
a resolver returning nothing is fatal and raises ``UnresolvableError``
at the call site. Usage::

    greeter = resolve(container, Greeter)
    loud = resolve_named(container, Greeter, "loud")
    client = resolve_with(container, HttpClient, base_url, timeout)

    r = ResolverOperand(container)
    service = Service(dependency_a=r >> DependencyA,
                      dependency_b=r >> Lookup(DependencyB, name="primary"))
"""

import inspect
import types
import typing
from typing import Any, Callable, Optional, Tuple, Type, overload

import structlog

from resolver_ops.core.lookup import Lookup
from resolver_ops.core.resolver import Resolver
from resolver_ops.shared.contracts import require, is_qualifier
from resolver_ops.shared.exceptions import UnresolvableError, ValidationError, service_label
from resolver_ops.shared.types import T, MAX_ARGUMENTS

logger = structlog.get_logger(__name__)

_NoneType = type(None)
_UNION_TYPES = tuple(t for t in (typing.Union, getattr(types, "UnionType", None)) if t is not None)


def _is_resolver(resolver: Any, *args, **kwargs) -> bool:
    return isinstance(resolver, Resolver)


def _is_resolver_with_name(resolver: Any, service: Any, name: Any, *args, **kwargs) -> bool:
    return isinstance(resolver, Resolver) and is_qualifier(name)


def _check_arity(arguments: Tuple[Any, ...]) -> None:
    if not 1 <= len(arguments) <= MAX_ARGUMENTS:
        raise ValidationError(
            f"Expected 1 to {MAX_ARGUMENTS} arguments, got {len(arguments)}",
            field="arguments",
            value=len(arguments)
        )


def resolve_lookup(resolver: Resolver, lookup: Lookup[T]) -> T:
    """
    Resolve a prebuilt lookup.

    Args:
        resolver: Container to resolve from
        lookup: Service type, qualifier and constructor arguments

    Returns:
        The instance produced by the resolver, unchanged

    Raises:
        UnresolvableError: If the resolver returns nothing
    """
    logger.debug("Resolving service", **lookup.describe())

    if lookup.is_named:
        instance = resolver.resolve(lookup.service, *lookup.arguments, name=lookup.name)
    else:
        instance = resolver.resolve(lookup.service, *lookup.arguments)

    if instance is None:
        logger.error("Service could not be resolved", **lookup.describe())
        raise UnresolvableError(lookup.service, lookup.name, lookup.arguments)

    return instance


@require(_is_resolver, "resolver must expose a resolve() method")
def resolve(resolver: Resolver, service: Type[T]) -> T:
    """Resolve an unqualified instance of ``service``."""
    return resolve_lookup(resolver, Lookup(service))


@require(_is_resolver_with_name, "resolver must expose resolve() and name must be a string")
def resolve_named(resolver: Resolver, service: Type[T], name: str) -> T:
    """Resolve the instance of ``service`` registered under ``name``."""
    return resolve_lookup(resolver, Lookup(service, name=name))


@overload
def resolve_with(resolver: Resolver, service: Type[T], arg1: Any) -> T: ...
@overload
def resolve_with(resolver: Resolver, service: Type[T], arg1: Any, arg2: Any) -> T: ...
@overload
def resolve_with(resolver: Resolver, service: Type[T], arg1: Any, arg2: Any, arg3: Any) -> T: ...


@require(_is_resolver, "resolver must expose a resolve() method")
def resolve_with(resolver, service, *arguments):
    """
    Resolve an unqualified instance of ``service`` built with ``arguments``.

    Between one and three positional arguments are forwarded in order.
    """
    _check_arity(arguments)
    return resolve_lookup(resolver, Lookup(service, arguments=arguments))


@overload
def resolve_named_with(resolver: Resolver, service: Type[T], name: str, arg1: Any) -> T: ...
@overload
def resolve_named_with(resolver: Resolver, service: Type[T], name: str, arg1: Any, arg2: Any) -> T: ...
@overload
def resolve_named_with(resolver: Resolver, service: Type[T], name: str, arg1: Any, arg2: Any, arg3: Any) -> T: ...


@require(_is_resolver_with_name, "resolver must expose resolve() and name must be a string")
def resolve_named_with(resolver, service, name, *arguments):
    """
    Resolve the instance of ``service`` registered under ``name``,
    built with between one and three positional ``arguments``.
    """
    _check_arity(arguments)
    return resolve_lookup(resolver, Lookup(service, name=name, arguments=arguments))


class ResolverOperand:
    """
    Operator form of the resolution helpers.

    ``operand >> Service`` resolves an unqualified instance and
    ``operand >> Lookup(Service, name=..., arguments=(...))`` resolves
    a qualified and/or parameterised one.
    """

    __slots__ = ("resolver",)

    def __init__(self, resolver: Resolver):
        if not isinstance(resolver, Resolver):
            raise ValidationError(
                f"{type(resolver).__name__} does not expose a resolve() method",
                field="resolver",
                value=resolver
            )
        self.resolver = resolver

    def __rshift__(self, other):
        if isinstance(other, Lookup):
            return resolve_lookup(self.resolver, other)
        if isinstance(other, type):
            return resolve_lookup(self.resolver, Lookup(other))
        return NotImplemented

    def __repr__(self) -> str:
        return f"ResolverOperand({self.resolver!r})"


def _optional_target(annotation: Any) -> Optional[Any]:
    """Return ``X`` for an ``Optional[X]`` annotation, otherwise None."""
    if typing.get_origin(annotation) not in _UNION_TYPES:
        return None
    members = [arg for arg in typing.get_args(annotation) if arg is not _NoneType]
    if len(members) == 1 and len(typing.get_args(annotation)) == 2:
        return members[0]
    return None


def _type_hints(factory: Callable) -> dict:
    target = factory.__init__ if inspect.isclass(factory) else factory
    try:
        return typing.get_type_hints(target)
    except (NameError, TypeError) as e:
        # Unresolvable forward references fall back to the raw annotations
        logger.debug("Falling back to raw annotations", factory=service_label(factory), error=str(e))
        return {}


def _resolve_if_registered(resolver: Resolver, service: Any) -> Optional[Any]:
    """Unqualified lookup where absence is allowed; logged like resolve_lookup."""
    logger.debug("Resolving service", service=service_label(service), qualifier=None, arity=0)
    return resolver.resolve(service)


def autowire(resolver: Resolver, factory: Callable[..., T], **explicit: Any) -> T:
    """
    Call ``factory`` with every parameter resolved from its type annotation.

    Values passed in ``explicit`` are used as-is. Annotated parameters are
    resolved unqualified; when nothing is registered a parameter falls back
    to its default, an ``Optional[X]`` parameter receives None, and any
    other parameter is fatal.

    Args:
        resolver: Container to resolve from
        factory: Class or function to call
        **explicit: Values for parameters that must not be resolved

    Returns:
        Whatever ``factory`` returns

    Raises:
        UnresolvableError: If a required parameter cannot be resolved
        ValidationError: If a required parameter has no usable annotation
    """
    if not isinstance(resolver, Resolver):
        raise ValidationError("resolver must expose a resolve() method", field="resolver", value=resolver)
    if not callable(factory):
        raise ValidationError(f"{factory!r} is not callable", field="factory", value=factory)

    try:
        signature = inspect.signature(factory)
    except (TypeError, ValueError) as e:
        raise ValidationError(
            f"Cannot inspect signature of {service_label(factory)}: {e}",
            field="factory",
            value=factory
        ) from e

    hints = _type_hints(factory)
    kwargs = dict(explicit)

    for param_name, param in signature.parameters.items():
        if param_name in kwargs:
            continue
        if param.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
            continue

        has_default = param.default is not inspect.Parameter.empty
        annotation = hints.get(param_name, param.annotation)

        if annotation is inspect.Parameter.empty or isinstance(annotation, str) \
                or param.kind is inspect.Parameter.POSITIONAL_ONLY:
            if has_default:
                continue
            raise ValidationError(
                f"Cannot infer a service for parameter '{param_name}' of "
                f"{service_label(factory)}; pass it explicitly",
                field=param_name
            )

        optional_target = _optional_target(annotation)
        if optional_target is not None:
            instance = _resolve_if_registered(resolver, optional_target)
            if instance is not None:
                kwargs[param_name] = instance
            elif not has_default:
                kwargs[param_name] = None
        elif has_default:
            instance = _resolve_if_registered(resolver, annotation)
            if instance is not None:
                kwargs[param_name] = instance
            else:
                logger.debug(
                    "Using default for unresolved parameter",
                    factory=service_label(factory),
                    parameter=param_name
                )
        else:
            kwargs[param_name] = resolve_lookup(resolver, Lookup(annotation))

    return factory(**kwargs)
