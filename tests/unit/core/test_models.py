"""Unit tests for BaseModel timestamp bookkeeping.

Exercised through ``Address``, the simplest concrete subclass.
"""

from __future__ import annotations

from datetime import datetime, timezone as dt_timezone

import pytest
from freezegun import freeze_time

from modules.customers.models import Address

pytestmark = pytest.mark.unit

T0 = datetime(2024, 1, 10, 12, 0, tzinfo=dt_timezone.utc)
T1 = datetime(2024, 1, 11, 12, 0, tzinfo=dt_timezone.utc)


class TestBaseModel:
    def test_id_is_assigned_by_store(self, address_payload):
        address = Address.objects.create(**address_payload())
        assert isinstance(address.id, int)

    def test_ids_are_unique(self, address_payload):
        a = Address.objects.create(**address_payload())
        b = Address.objects.create(**address_payload())
        assert a.id != b.id

    def test_timestamps_set_on_create(self, address_payload):
        with freeze_time(T0):
            address = Address.objects.create(**address_payload())
        assert address.created_at == T0
        assert address.updated_at == T0

    def test_updated_at_changes_on_save(self, address_payload):
        with freeze_time(T0):
            address = Address.objects.create(**address_payload())
        with freeze_time(T1):
            address.street = "Rua Nova"
            address.save()
        address.refresh_from_db()
        assert address.created_at == T0
        assert address.updated_at == T1

    def test_save_with_update_fields_includes_updated_at(self, address_payload):
        """The save() guard must inject updated_at into update_fields."""
        with freeze_time(T0):
            address = Address.objects.create(**address_payload())
        with freeze_time(T1):
            address.city = "Londrina"
            address.save(update_fields=["city"])
        address.refresh_from_db()
        assert address.city == "Londrina"
        assert address.updated_at == T1
