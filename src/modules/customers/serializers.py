"""Customer DRF serializers for API output.

The serializer operates at the Interface layer (API Views) and only
renders responses.  Input is parsed into the Pydantic DTOs from
``dtos.py`` before it reaches the Service Layer.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.customers.models import Address, Customer


class AddressSerializer(serializers.ModelSerializer):
    class Meta:
        model = Address
        fields = [
            "id",
            "street",
            "number",
            "neighborhood",
            "zip_code",
            "city",
            "state",
        ]
        read_only_fields = fields


class CustomerSerializer(serializers.ModelSerializer):
    """Read serializer for the Customer resource, address embedded."""

    address = AddressSerializer(read_only=True, allow_null=True)

    class Meta:
        model = Customer
        fields = [
            "id",
            "cpf",
            "name",
            "address",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class CustomerSummarySerializer(serializers.ModelSerializer):
    """Compact customer representation embedded in simulations."""

    class Meta:
        model = Customer
        fields = ["id", "name", "cpf"]
        read_only_fields = fields
