"""
Contract Programming implementation with preconditions and postconditions.

This module provides decorators for Design by Contract checks on the public
container surface.
"""

import functools
import inspect
from typing import Any, Callable, TypeVar, Union
import structlog

from inverse.shared.exceptions import PreconditionError, PostconditionError

logger = structlog.get_logger(__name__)

F = TypeVar('F', bound=Callable[..., Any])


def require(condition: Union[bool, Callable[..., bool]], message: str = "") -> Callable[[F], F]:
    """
    Precondition decorator - validates input parameters.

    Args:
        condition: Boolean expression or callable that takes function arguments
        message: Custom error message for contract violation

    Returns:
        Decorated function with precondition checking

    Raises:
        PreconditionError: If precondition is not met
    """
    def decorator(func: F) -> F:

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            if callable(condition):
                try:
                    result = condition(*args, **kwargs)
                except Exception as e:
                    raise PreconditionError(
                        f"Precondition evaluation error in {func.__name__}: {str(e)}"
                    ) from e
            else:
                result = condition

            if not result:
                error_msg = message or f"Precondition failed in {func.__name__}"
                bound_args = inspect.signature(func).bind_partial(*args, **kwargs)
                logger.warning(
                    "Precondition violation",
                    function=func.__name__,
                    message=error_msg,
                    args=str({k: v for k, v in bound_args.arguments.items() if k != "self"})
                )
                raise PreconditionError(error_msg)

            return func(*args, **kwargs)

        return wrapper
    return decorator


def ensure(condition: Union[bool, Callable[..., bool]], message: str = "") -> Callable[[F], F]:
    """
    Postcondition decorator - validates return values.

    The condition receives the result followed by the original arguments.

    Raises:
        PostconditionError: If postcondition is not met
    """
    def decorator(func: F) -> F:

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            result = func(*args, **kwargs)

            if callable(condition):
                try:
                    condition_result = condition(result, *args, **kwargs)
                except Exception as e:
                    raise PostconditionError(
                        f"Postcondition evaluation error in {func.__name__}: {str(e)}"
                    ) from e
            else:
                condition_result = condition

            if not condition_result:
                error_msg = message or f"Postcondition failed in {func.__name__}"
                logger.warning(
                    "Postcondition violation",
                    function=func.__name__,
                    message=error_msg,
                    result=repr(result)
                )
                raise PostconditionError(error_msg)

            return result

        return wrapper
    return decorator


def non_empty_string(value: Any) -> bool:
    """Check if value is a string that is non-empty after stripping whitespace."""
    return isinstance(value, str) and len(value.strip()) > 0
