"""Simulation DRF serializers for API output."""

from __future__ import annotations

from rest_framework import serializers

from modules.customers.serializers import CustomerSummarySerializer
from modules.simulations.models import Simulation


class SimulationSerializer(serializers.ModelSerializer):
    customer = CustomerSummarySerializer(read_only=True)

    class Meta:
        model = Simulation
        fields = [
            "id",
            "customer",
            "timestamp",
            "requested_amount",
            "collateral_amount",
            "term_months",
            "monthly_interest_rate",
            "created_at",
        ]
        read_only_fields = fields
