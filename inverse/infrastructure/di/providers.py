"""
Tagged provider wrappers.

Wrapping a provider in ``Instance`` or ``Factory`` when registering it records
its shape, so the container can reject ``get`` on a factory or
``instantiate`` on a ready instance instead of relying on caller discipline.
Untagged providers are stored and returned exactly as given.
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from inverse.shared.types import ProviderKind

T = TypeVar('T')


@dataclass(frozen=True)
class Instance(Generic[T]):
    """A ready-made object returned as-is on every resolution."""
    value: T

    kind = ProviderKind.INSTANCE


@dataclass(frozen=True)
class Factory(Generic[T]):
    """A constructor invoked on every ``instantiate`` call."""
    constructor: Callable[..., T]

    kind = ProviderKind.FACTORY

    def __call__(self, *args: Any, **kwargs: Any) -> T:
        return self.constructor(*args, **kwargs)


def kind_of(provider: Any) -> ProviderKind:
    """Return the registered shape of a stored provider."""
    if isinstance(provider, (Instance, Factory)):
        return provider.kind
    return ProviderKind.UNTAGGED
