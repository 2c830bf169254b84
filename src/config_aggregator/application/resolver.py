"""Resolve provider and processor references into callables.

A reference is either ready to call, a class to instantiate without
arguments, or a name looked up in a :class:`ComponentRegistry`. Registries are
populated at startup (explicitly, or from entry points by
:mod:`config_aggregator.adapters.plugins`); names are never imported
reflectively at resolution time.

Contents:
    * :class:`ComponentRegistry` - name to zero-argument factory mapping.
    * :func:`resolve_provider` / :func:`resolve_processor` - reference resolution.
    * :func:`describe_type` - human-readable description used in error messages.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Iterator, Mapping
from typing import Any

from ..domain.errors import InvalidConfigProcessorError, InvalidConfigProviderError
from .ports import ProcessorReference, Provider, ProviderReference

ComponentFactory = Callable[[], object]
"""Zero-argument constructor producing a provider or processor instance."""


class ComponentRegistry:
    """Registry mapping identifiers to zero-argument component factories.

    Example:
        >>> registry = ComponentRegistry({"defaults": lambda: (lambda: {"debug": False})})
        >>> "defaults" in registry
        True
        >>> registry.create("defaults")()
        {'debug': False}
        >>> registry.names()
        ['defaults']
    """

    __slots__ = ("_factories",)

    def __init__(self, factories: Mapping[str, ComponentFactory] | None = None) -> None:
        self._factories: dict[str, ComponentFactory] = dict(factories or {})

    def register(self, name: str, factory: ComponentFactory, *, replace: bool = False) -> None:
        """Register *factory* under *name*.

        Raises:
            ValueError: If *name* is already registered and ``replace`` is False.
        """
        if name in self._factories and not replace:
            raise ValueError(f"Component {name!r} is already registered")
        self._factories[name] = factory

    def unregister(self, name: str) -> None:
        self._factories.pop(name, None)

    def create(self, name: str) -> object:
        """Instantiate the component registered under *name*.

        Raises:
            KeyError: If *name* is not registered.
        """
        return self._factories[name]()

    def names(self) -> list[str]:
        return sorted(self._factories)

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._factories)

    def __repr__(self) -> str:
        return f"ComponentRegistry({self.names()!r})"


def describe_type(value: object) -> str:
    """Return a human-readable description of *value*'s runtime type.

    Anonymous callables (lambdas and nested functions) are reported as
    ``Closure``; named functions and bound methods by qualified name; other
    objects by class name; strings verbatim; builtins by type name.

    Examples:
        >>> describe_type(lambda: {})
        'Closure'
        >>> describe_type(describe_type)
        'describe_type'
        >>> describe_type(ComponentRegistry())
        'ComponentRegistry'
        >>> describe_type("app.settings")
        'app.settings'
        >>> describe_type(42)
        'int'
    """
    if inspect.isfunction(value):
        if value.__name__ == "<lambda>" or "<locals>" in value.__qualname__:
            return "Closure"
        return value.__qualname__
    if inspect.ismethod(value):
        return value.__qualname__
    if isinstance(value, str):
        return value
    if isinstance(value, type):
        return value.__qualname__
    if type(value).__module__ == "builtins":
        return type(value).__name__
    return type(value).__qualname__


def resolve_provider(reference: ProviderReference, registry: ComponentRegistry | None = None) -> Provider:
    """Turn *reference* into a callable provider.

    Args:
        reference: Callable provider, provider class, or registered name.
        registry: Registry consulted for string references.

    Returns:
        The callable provider.

    Raises:
        UnknownProviderTypeError: If a name is not registered.
        UnsupportedProviderTypeError: If the resolved value is not callable.
    """
    candidate: object = reference
    if isinstance(candidate, str):
        if registry is None or candidate not in registry:
            raise InvalidConfigProviderError.from_named_provider(candidate)
        candidate = registry.create(candidate)
    elif isinstance(candidate, type):
        candidate = candidate()

    if not callable(candidate):
        raise InvalidConfigProviderError.from_unsupported_type(describe_type(candidate))
    return candidate  # type: ignore[return-value]


def resolve_processor(reference: ProcessorReference, registry: ComponentRegistry | None = None) -> Callable[[Any], Any]:
    """Turn *reference* into a callable pre- or post-processor.

    Raises:
        UnknownProcessorTypeError: If a name is not registered.
        UnsupportedProcessorTypeError: If the resolved value is not callable.
    """
    candidate: object = reference
    if isinstance(candidate, str):
        if registry is None or candidate not in registry:
            raise InvalidConfigProcessorError.from_named_processor(candidate)
        candidate = registry.create(candidate)
    elif isinstance(candidate, type):
        candidate = candidate()

    if not callable(candidate):
        raise InvalidConfigProcessorError.from_unsupported_type(describe_type(candidate))
    return candidate


__all__ = [
    "ComponentFactory",
    "ComponentRegistry",
    "describe_type",
    "resolve_processor",
    "resolve_provider",
]
