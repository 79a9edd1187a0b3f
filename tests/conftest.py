from __future__ import annotations

from datetime import datetime
from decimal import Decimal

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from modules.customers.models import Address, Customer
from modules.simulations.models import Simulation


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


def _address_payload(**overrides) -> dict:
    payload = {
        "street": "Rua das Flores",
        "number": "123",
        "neighborhood": "Centro",
        "zip_code": "80010-000",
        "city": "Curitiba",
        "state": "PR",
    }
    payload.update(overrides)
    return payload


@pytest.fixture()
def address_payload():
    """Builder for a valid address body; keyword overrides replace fields."""
    return _address_payload


@pytest.fixture()
def make_customer():
    """Persist a customer; pass ``address=None`` to create one without address."""

    def _make(cpf: str = "12345678901", name: str = "João Teste", **overrides):
        address = overrides.pop("address", _address_payload())
        customer = Customer(cpf=cpf, name=name)
        if address is not None:
            customer.address = Address.objects.create(**address)
        customer.save()
        return customer

    return _make


@pytest.fixture()
def make_simulation():
    def _make(customer: Customer, **overrides) -> Simulation:
        defaults = {
            "timestamp": timezone.make_aware(datetime(2024, 6, 15, 10, 30, 26)),
            "requested_amount": Decimal("300000.00"),
            "collateral_amount": Decimal("1000000.00"),
            "term_months": 150,
            "monthly_interest_rate": Decimal("2.00"),
        }
        defaults.update(overrides)
        return Simulation.objects.create(customer=customer, **defaults)

    return _make
