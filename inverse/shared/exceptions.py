"""
Custom exceptions for Inverse.

This module defines all custom exceptions raised by the container, providing
a small error hierarchy with a discriminant tag on each error kind so callers
can match failures programmatically.
"""

from typing import Optional, Dict, Any


class InverseError(Exception):
    """Base exception for all Inverse errors."""

    type = "InverseError"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None, error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.error_code = error_code or self.type


class ConfigurationError(InverseError):
    """Raised when there are configuration or setup issues."""

    type = "ConfigurationError"


class ContractViolationError(InverseError):
    """Base class for contract programming violations."""

    type = "ContractViolationError"


class PreconditionError(ContractViolationError):
    """Raised when a function precondition is violated."""

    type = "PreconditionError"


class PostconditionError(ContractViolationError):
    """Raised when a function postcondition is violated."""

    type = "PostconditionError"


class DependencyViolationError(InverseError):
    """Base class for failures to resolve something from a container."""

    type = "DependencyViolationError"

    def __init__(self, message: str, container_id: str, **kwargs):
        super().__init__(message, **kwargs)
        self.container_id = container_id


class MissingDependencyError(DependencyViolationError):
    """Raised when resolving a token that has no registered provider."""

    type = "MissingDependencyError"

    def __init__(self, container_id: str, token: Any, **kwargs):
        super().__init__(
            f"Dependency Violation: '{container_id}' container failed to resolve "
            f"unregistered dependency token: {token}",
            container_id=container_id,
            **kwargs
        )
        self.token = token


class MissingChildContainerError(DependencyViolationError):
    """Raised when no context key satisfies a ``where`` filter."""

    type = "MissingChildContainerError"

    def __init__(self, container_id: str, **kwargs):
        super().__init__(
            f"Dependency Violation: '{container_id}' container failed to resolve "
            f"unregistered sub container",
            container_id=container_id,
            **kwargs
        )


class ProviderKindError(DependencyViolationError):
    """Raised when a provider is registered or resolved as the wrong kind."""

    type = "ProviderKindError"

    def __init__(
        self,
        container_id: str,
        token: Any,
        expected: str,
        actual: Optional[str] = None,
        **kwargs
    ):
        message = f"Dependency Violation: '{container_id}' container expected {expected} provider for token: {token}"
        if actual:
            message += f" (got {actual})"
        super().__init__(message, container_id=container_id, **kwargs)
        self.token = token
        self.expected = expected
        self.actual = actual
