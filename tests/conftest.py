"""
Global pytest configuration and fixtures for Inverse tests.
"""
from typing import Callable, Dict

import pytest

from inverse.infrastructure.di import Container, reset_container

CONTAINER_ID = "mock"

Context = Dict[str, str]


def is_provider(provider: str) -> Callable[[Context], bool]:
    """Build a filter matching contexts for the given payment provider."""
    return lambda context: context["provider"] == provider


@pytest.fixture
def container() -> Container[Context]:
    """Empty root container."""
    return Container(CONTAINER_ID)


@pytest.fixture
def paypal_context() -> Context:
    return {"provider": "paypal"}


@pytest.fixture
def stripe_context() -> Context:
    return {"provider": "stripe"}


@pytest.fixture
def payments_container(container, paypal_context, stripe_context) -> Container[Context]:
    """Root container with a paypal and a stripe context."""
    container.create_context(paypal_context)
    container.create_context(stripe_context)
    return container


@pytest.fixture(autouse=True)
def clean_global_container():
    """Make sure tests never share the global root container."""
    reset_container()
    yield
    reset_container()
