"""
Inverse: a minimal dependency injection container.

Program against tokens; let providers registered on a container, or on one
of its context containers, supply the implementation.
"""

from inverse.infrastructure.config import ContainerConfig
from inverse.infrastructure.di import Container, Factory, Instance, get_container, reset_container
from inverse.infrastructure.logging import configure_logging
from inverse.shared.exceptions import (
    ConfigurationError,
    InverseError,
    MissingChildContainerError,
    MissingDependencyError,
    ProviderKindError,
)
from inverse.shared.types import Filter, ProviderKind, Token

__version__ = "1.0.0"

__all__ = [
    "Container",
    "ContainerConfig",
    "ConfigurationError",
    "Factory",
    "Filter",
    "Instance",
    "InverseError",
    "MissingChildContainerError",
    "MissingDependencyError",
    "ProviderKind",
    "ProviderKindError",
    "Token",
    "configure_logging",
    "get_container",
    "reset_container",
]
