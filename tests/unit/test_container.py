"""
Unit tests for Container registration and direct resolution.
"""
import asyncio
from dataclasses import asdict

import pytest

from inverse.infrastructure.di import Container
from inverse.shared.exceptions import MissingDependencyError, PreconditionError
from inverse.shared.types import Token
from tests.conftest import CONTAINER_ID
from tests.mocks.providers import Invoice2Go, Logger, Payments, PayPal, Stripe


class TestContainerHas:
    """Test cases for Container.has."""

    def test_has_registered_dependency(self, container):
        """Test that a registered token is reported."""
        container.set("payments", PayPal())

        assert container.has("payments") is True

    def test_has_unregistered_dependency(self, container):
        """Test that an unregistered token is not reported."""
        container.set("payments", PayPal())

        assert container.has("invoices") is False


class TestContainerSet:
    """Test cases for Container.set."""

    def test_set_returns_container_for_chaining(self, container):
        """Test that set returns the same container."""
        result = container.set("payments", PayPal()).set("logger", Logger)

        assert result is container
        assert container.has("payments")
        assert container.has("logger")

    def test_set_overwrites_previous_provider(self, container):
        """Test that the last registration under a token wins."""
        first = PayPal()
        second = Stripe()

        container.set("payments", first)
        container.set("payments", second)

        assert container.has("payments")
        assert container.get("payments") is second
        assert container.tokens() == ["payments"]

    @pytest.mark.parametrize("token", ["payments", 42, Payments, Token("payments")])
    def test_set_accepts_any_hashable_token(self, container, token):
        """Test string, numeric, class and Token keys."""
        provider = Stripe()
        container.set(token, provider)

        assert container.has(token)
        assert container.get(token) is provider

    def test_unset_removes_provider(self, container):
        """Test that unset removes a registration."""
        container.set("payments", PayPal())

        assert container.unset("payments") is True
        assert container.has("payments") is False
        assert container.unset("payments") is False

    def test_tokens_in_registration_order(self, container):
        """Test that tokens are listed in registration order."""
        container.set("logger", Logger).set("payments", Stripe()).set("invoices", Invoice2Go)

        assert container.tokens() == ["logger", "payments", "invoices"]


class TestContainerGet:
    """Test cases for Container.get."""

    def test_get_returns_registered_instance(self, container):
        """Test that get returns exactly the registered object."""
        stripe = Stripe()
        container.set("payments", stripe)

        assert container.get("payments") is stripe
        assert container.get("payments") is container.get("payments")

    def test_get_resolves_correct_results(self, container):
        """Test resolving a provider and awaiting its result."""
        container.set("payments", Stripe())

        payment = asyncio.run(container.get("payments").create("xyz", "usd", 100))

        assert payment.provider == "stripe"
        assert payment.currency == "usd"
        assert payment.amount == 100

    def test_get_returns_constructor_unchanged(self, container):
        """Test that get hands back an untagged constructor as-is."""
        container.set("logger", Logger)

        assert container.get("logger") is Logger

    def test_get_unregistered_token(self, container):
        """Test that resolving an unregistered token fails."""
        with pytest.raises(MissingDependencyError) as exc_info:
            container.get("payments")

        assert exc_info.value.token == "payments"
        assert exc_info.value.container_id == CONTAINER_ID

    def test_get_with_typed_token(self, container):
        """Test resolving through a typed Token."""
        payments: Token[Payments] = Token("payments")
        stripe = Stripe()
        container.set(payments, stripe)

        assert container.get(payments) is stripe

    def test_typed_tokens_compare_by_identity(self, container):
        """Test that equally named tokens are distinct keys."""
        container.set(Token("payments"), Stripe())

        with pytest.raises(MissingDependencyError):
            container.get(Token("payments"))


class TestContainerInstantiate:
    """Test cases for Container.instantiate."""

    def test_instantiate_resolves_correct_instances(self, container):
        """Test constructing registered classes."""
        container.set("logger", Logger)
        container.set("invoices", Invoice2Go)

        assert isinstance(container.instantiate("logger"), Logger)
        assert isinstance(container.instantiate("invoices", "xyz"), Invoice2Go)

    def test_instantiate_forwards_arguments(self, container):
        """Test that construction arguments reach the provider."""
        container.set("invoices", Invoice2Go)
        container.set("logger", Logger)

        invoice = container.instantiate("invoices", "xyz")
        logger = container.instantiate("logger", prefix="[billing] ")

        assert invoice.provider == "Invoice2Go"
        assert invoice.customer_id == "xyz"
        assert logger.prefix == "[billing] "

    def test_instantiate_builds_distinct_instances(self, container):
        """Test that every call builds a new object."""
        container.set("invoices", Invoice2Go)

        first = container.instantiate("invoices", "xyz")
        second = container.instantiate("invoices", "xyz")

        assert first is not second
        assert first.customer_id == second.customer_id == "xyz"

    def test_instantiate_unregistered_token(self, container):
        """Test that instantiating an unregistered token fails like get."""
        with pytest.raises(MissingDependencyError) as exc_info:
            container.instantiate("invoices", "xyz")

        assert exc_info.value.token == "invoices"

    def test_instantiate_propagates_construction_errors(self, container):
        """Test that constructor failures are not wrapped."""
        container.set("invoices", Invoice2Go)

        with pytest.raises(TypeError):
            container.instantiate("invoices", "xyz", "unexpected")

    def test_instantiate_non_callable_untagged_provider(self, container):
        """Test that a ready instance fails only when constructed."""
        container.set("payments", Stripe())

        with pytest.raises(TypeError):
            container.instantiate("payments")

    def test_instantiate_with_plain_factory_function(self, container):
        """Test that any callable works as a constructor."""
        container.set("payment", lambda customer_id: asdict(asyncio.run(PayPal().create(customer_id, "eur", 5))))

        assert container.instantiate("payment", "abc")["customer_id"] == "abc"


class TestContainerInit:
    """Test cases for Container construction."""

    def test_container_id(self):
        """Test that the id is kept for diagnostics."""
        assert Container("billing").id == "billing"

    @pytest.mark.parametrize("container_id", ["", "   ", None])
    def test_container_id_must_be_non_empty(self, container_id):
        """Test that an empty id is rejected."""
        with pytest.raises(PreconditionError, match="non-empty"):
            Container(container_id)

    def test_repr(self, container):
        """Test the debugging representation."""
        container.set("payments", Stripe())

        assert repr(container) == "Container(id='mock', providers=1, contexts=0)"
