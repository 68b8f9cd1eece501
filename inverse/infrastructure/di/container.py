"""
Dependency Injection Container.

This module provides a dependency injection container that maps abstract
tokens to concrete providers, optionally partitioned into child containers
("contexts") selected by a predicate over an arbitrary context key.
"""

from enum import Enum
from typing import Any, Callable, Dict, Generic, List, Optional, Tuple, TypeVar, overload

import structlog

from inverse.infrastructure.config import ContainerConfig
from inverse.infrastructure.di.providers import Factory, Instance, kind_of
from inverse.shared.contracts import ensure, non_empty_string, require
from inverse.shared.exceptions import (
    MissingChildContainerError,
    MissingDependencyError,
    ProviderKindError,
)
from inverse.shared.types import JSON, ContainerID, Filter, ProviderKind, Token, TokenKey

logger = structlog.get_logger(__name__)

T = TypeVar('T')
C = TypeVar('C')

# Context keys of these types match by value; all others match by identity
VALUE_KEY_TYPES = (str, int, float, bytes, Enum)


def same_context_key(key: Any, other: Any) -> bool:
    """
    Check if two context keys denote the same context.

    Strings, numbers, bytes and enum members match when they are of the
    same type and equal, so ``1``, ``1.0`` and ``True`` stay distinct.
    Dicts, lists and other objects only match themselves.
    """
    if key is other:
        return True
    if isinstance(key, VALUE_KEY_TYPES) and type(key) is type(other):
        # NaN keys match each other
        return key == other or (key != key and other != other)
    return False


class Container(Generic[C]):
    """
    Dependency Injection Container with context partitioning.

    Provides registration and resolution of dependencies with support for:
    - Singleton providers, returned as-is by ``get``
    - Transient providers, constructed on every ``instantiate`` call
    - Child containers scoped by a context key and selected with ``where``

    A provider may be registered bare, in which case the caller is
    responsible for resolving it with the matching accessor, or tagged with
    ``set_instance``/``set_factory`` so mismatched resolution fails fast.

    Context keys are kept in insertion order, so ``where`` is a reproducible
    first-match scan. Scalar keys match by value and every other key by
    identity, which also supports unhashable keys such as plain dicts.
    """

    @require(lambda self, id: non_empty_string(id), "Container id must be a non-empty string")
    def __init__(self, id: str):
        """
        Initialize container.

        Args:
            id: Container identifier used in error messages only
        """
        self.id = ContainerID(id)
        self._providers: Dict[TokenKey, Any] = {}
        self._contexts: List[Tuple[C, "Container[C]"]] = []

    def __repr__(self):
        return f"Container(id={self.id!r}, providers={len(self._providers)}, contexts={len(self._contexts)})"

    # ------------------------------------------------------------------
    # Contexts
    # ------------------------------------------------------------------

    @ensure(
        lambda child, self, context: child.id == self.id and not child.tokens(),
        "Context container must start empty and share the parent id"
    )
    def create_context(self, context: C) -> "Container[C]":
        """
        Create a new empty child container under the given context key.

        Creating a context with a key that is already registered replaces
        the previous child, and its registrations, in place.

        Args:
            context: Context key later handed to ``where`` filters

        Returns:
            The newly created child container
        """
        child: Container[C] = Container(self.id)

        for index, (key, _) in enumerate(self._contexts):
            if same_context_key(key, context):
                logger.debug("Replacing context container", container_id=self.id, context=context)
                self._contexts[index] = (context, child)
                return child

        logger.debug("Creating context container", container_id=self.id, context=context)
        self._contexts.append((context, child))
        return child

    def where(self, filter: Filter[C]) -> "Container[C]":
        """
        Retrieve the child container of the first context key matching a filter.

        Args:
            filter: Predicate receiving each context key in creation order

        Returns:
            Child container for the first matching context key

        Raises:
            MissingChildContainerError: If no context key satisfies the filter
        """
        for context, child in self._contexts:
            if filter(context):
                logger.debug("Selected context container", container_id=self.id, context=context)
                return child

        raise MissingChildContainerError(self.id)

    def get_context(self, context: C) -> Optional["Container[C]"]:
        """Return the child container registered under a matching key, if any."""
        for key, child in self._contexts:
            if same_context_key(key, context):
                return child
        return None

    @property
    def contexts(self) -> List[Tuple[C, "Container[C]"]]:
        """Snapshot of ``(context key, child container)`` pairs in creation order."""
        return list(self._contexts)

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def has(self, token: TokenKey) -> bool:
        """Check if a token has a registered provider."""
        return token in self._providers

    def tokens(self) -> List[TokenKey]:
        """Registered tokens in registration order."""
        return list(self._providers)

    def set(self, token: TokenKey, provider: Any) -> "Container[C]":
        """
        Register a provider under a token, replacing any previous one.

        Args:
            token: Token to register
            provider: Ready instance, constructor, or a tagged ``Instance``/``Factory``

        Returns:
            This container, for chaining
        """
        if isinstance(provider, Instance):
            value = provider.value
        elif isinstance(provider, Factory):
            value = provider.constructor
        else:
            value = provider

        if value is None:
            raise ProviderKindError(self.id, token, expected="a non-null")
        if isinstance(provider, Factory) and not callable(value):
            raise ProviderKindError(self.id, token, expected="a callable", actual=type(value).__name__)

        logger.debug(
            "Registering provider",
            container_id=self.id,
            token=str(token),
            kind=kind_of(provider).value,
            replaced=token in self._providers
        )
        self._providers[token] = provider
        return self

    def set_instance(self, token: TokenKey, instance: Any) -> "Container[C]":
        """Register a ready instance that may only be resolved with ``get``."""
        return self.set(token, Instance(instance))

    def set_factory(self, token: TokenKey, constructor: Callable[..., Any]) -> "Container[C]":
        """Register a constructor that may only be resolved with ``instantiate``."""
        return self.set(token, Factory(constructor))

    def unset(self, token: TokenKey) -> bool:
        """
        Remove the provider registered under a token.

        Returns:
            True if a provider was removed
        """
        if token not in self._providers:
            return False

        logger.debug("Removing provider", container_id=self.id, token=str(token))
        del self._providers[token]
        return True

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def _lookup(self, token: TokenKey) -> Any:
        try:
            return self._providers[token]
        except KeyError:
            raise MissingDependencyError(self.id, token) from None

    @overload
    def get(self, token: Token[T]) -> T: ...

    @overload
    def get(self, token: Any) -> Any: ...

    def get(self, token):
        """
        Resolve the provider registered under a token.

        Args:
            token: Token to resolve

        Returns:
            The registered provider, unchanged

        Raises:
            MissingDependencyError: If the token is not registered
            ProviderKindError: If the token was registered with ``set_factory``
        """
        provider = self._lookup(token)
        kind = kind_of(provider)

        if kind is ProviderKind.FACTORY:
            raise ProviderKindError(self.id, token, expected="an instance", actual=kind.value)
        if kind is ProviderKind.INSTANCE:
            return provider.value
        return provider

    @overload
    def instantiate(self, token: Token[Callable[..., T]], *args: Any, **kwargs: Any) -> T: ...

    @overload
    def instantiate(self, token: Any, *args: Any, **kwargs: Any) -> Any: ...

    def instantiate(self, token, *args, **kwargs):
        """
        Construct a new instance from the provider registered under a token.

        Every call builds a distinct object. Errors raised while constructing
        propagate unchanged.

        Args:
            token: Token to resolve
            *args: Positional construction arguments
            **kwargs: Keyword construction arguments

        Returns:
            Freshly constructed instance

        Raises:
            MissingDependencyError: If the token is not registered
            ProviderKindError: If the token was registered with ``set_instance``
        """
        provider = self._lookup(token)
        kind = kind_of(provider)

        if kind is ProviderKind.INSTANCE:
            raise ProviderKindError(self.id, token, expected="a factory", actual=kind.value)
        return provider(*args, **kwargs)


# Global container instance
_container: Optional[Container[JSON]] = None


def get_container() -> Container[JSON]:
    """
    Get the global root container.

    Returns:
        Root container, created on first call with the id from the environment
    """
    global _container

    if _container is None:
        config = ContainerConfig.from_env()
        _container = Container(config.container_id)
        logger.info("Root container initialized", container_id=_container.id)

    return _container


def reset_container() -> None:
    """Drop the global root container (for testing)."""
    global _container
    _container = None
