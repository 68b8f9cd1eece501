"""
Type definitions for Inverse.

This module contains the custom type definitions shared by the container
and its providers.
"""

from enum import Enum
from typing import Any, Callable, Dict, Generic, Hashable, NewType, TypeVar, Union

T = TypeVar('T')
C = TypeVar('C')

# Diagnostics-only identifier shared by a container and all of its contexts
ContainerID = NewType('ContainerID', str)

# Default shape of a context key; any value works since keys are never inspected
JSON = Dict[str, Any]

# Predicate used to select a context container
Filter = Callable[[C], bool]


class Token(Generic[T]):
    """
    Named dependency token carrying the type it resolves to.

    Tokens compare by identity, so two tokens with the same name are distinct
    keys. Annotate them to let type checkers follow resolution:

        PAYMENTS: Token[Payments] = Token("payments")
        container.get(PAYMENTS)  # -> Payments
    """

    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = name

    def __repr__(self):
        return f"Token({self.name!r})"

    def __str__(self):
        return self.name


# Anything usable as a key in a container's provider map
TokenKey = Union[Token[Any], Hashable]


class ProviderKind(str, Enum):
    """Shape of a registered provider."""
    INSTANCE = "instance"
    FACTORY = "factory"
    UNTAGGED = "untagged"
