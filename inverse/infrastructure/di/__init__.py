"""
Dependency Injection infrastructure.

This module provides the token registry used to decouple consumers from the
concrete providers they depend on.
"""

from .container import (
    Container,
    get_container,
    reset_container
)
from .providers import (
    Instance,
    Factory,
    kind_of
)

__all__ = [
    "Container",
    "get_container",
    "reset_container",
    "Instance",
    "Factory",
    "kind_of"
]
