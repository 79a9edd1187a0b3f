"""Unit tests for customer output serializers."""

from __future__ import annotations

import pytest

from modules.customers.serializers import (
    AddressSerializer,
    CustomerSerializer,
    CustomerSummarySerializer,
)

pytestmark = pytest.mark.unit


class TestCustomerSerializer:
    def test_fields(self, make_customer):
        data = CustomerSerializer(make_customer()).data
        assert set(data) == {"id", "cpf", "name", "address", "created_at", "updated_at"}
        assert data["cpf"] == "12345678901"

    def test_nested_address(self, make_customer):
        customer = make_customer()
        address = CustomerSerializer(customer).data["address"]
        assert address["id"] == customer.address_id
        assert address["zip_code"] == "80010-000"
        assert address["state"] == "PR"

    def test_null_address(self, make_customer):
        data = CustomerSerializer(make_customer(address=None)).data
        assert data["address"] is None


class TestCustomerSummarySerializer:
    def test_fields(self, make_customer):
        data = CustomerSummarySerializer(make_customer()).data
        assert set(data) == {"id", "name", "cpf"}


class TestReadOnlyIds:
    @pytest.mark.parametrize(
        "serializer_class",
        [CustomerSerializer, CustomerSummarySerializer, AddressSerializer],
    )
    def test_id_is_read_only(self, serializer_class):
        assert serializer_class().fields["id"].read_only is True
