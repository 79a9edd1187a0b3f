"""Unit tests for the pydantic -> DRF validation error bridge."""

from __future__ import annotations

import pytest
from pydantic import ValidationError as PydanticValidationError
from rest_framework.exceptions import ValidationError

from modules.core.exceptions import Conflict, validation_error_from_pydantic
from modules.customers.dtos import CreateCustomerDTO

pytestmark = pytest.mark.unit


def _pydantic_error(data: dict) -> PydanticValidationError:
    with pytest.raises(PydanticValidationError) as exc_info:
        CreateCustomerDTO.model_validate(data)
    return exc_info.value


class TestValidationErrorFromPydantic:
    def test_returns_drf_validation_error(self):
        error = validation_error_from_pydantic(_pydantic_error({"name": "Ana"}))
        assert isinstance(error, ValidationError)
        assert "cpf" in error.detail

    def test_nested_location_is_dotted(self, address_payload):
        data = {
            "cpf": "12345678901",
            "name": "Ana",
            "address": address_payload(state="PRX"),
        }
        error = validation_error_from_pydantic(_pydantic_error(data))
        assert list(error.detail) == ["address.state"]


class TestConflict:
    def test_status_and_code(self):
        exc = Conflict("CPF already registered")
        assert exc.status_code == 409
        assert exc.get_codes() == "conflict"
