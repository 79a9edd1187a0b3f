"""Unit tests for Simulation DTOs."""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from modules.simulations.dtos import CreateSimulationDTO, SimulationPageQueryDTO

pytestmark = pytest.mark.unit


def _create_payload(**overrides) -> dict:
    payload = {
        "customer_id": 1,
        "timestamp": "2024-06-15T10:30:26",
        "requested_amount": "300000.00",
        "collateral_amount": "1000000.00",
        "term_months": 150,
        "monthly_interest_rate": "2.00",
    }
    payload.update(overrides)
    return payload


class TestCreateSimulationDTO:
    def test_valid(self):
        dto = CreateSimulationDTO.model_validate(_create_payload())
        assert dto.requested_amount == Decimal("300000.00")
        assert dto.timestamp.day == 15

    def test_too_many_decimal_places(self):
        with pytest.raises(ValidationError):
            CreateSimulationDTO.model_validate(_create_payload(requested_amount="10.123"))

    def test_amount_over_thirteen_integer_digits(self):
        with pytest.raises(ValidationError):
            CreateSimulationDTO.model_validate(
                _create_payload(collateral_amount="12345678901234.00")
            )

    def test_rate_over_three_integer_digits(self):
        with pytest.raises(ValidationError):
            CreateSimulationDTO.model_validate(
                _create_payload(monthly_interest_rate="1000.00")
            )

    def test_term_must_be_positive(self):
        with pytest.raises(ValidationError):
            CreateSimulationDTO.model_validate(_create_payload(term_months=0))

    def test_timestamp_required(self):
        data = _create_payload()
        del data["timestamp"]
        with pytest.raises(ValidationError):
            CreateSimulationDTO.model_validate(data)


class TestSimulationPageQueryDTO:
    def test_defaults(self):
        query = SimulationPageQueryDTO()
        assert query.page == 0
        assert query.size == 10
        assert query.ordering == ["-timestamp", "-id"]

    def test_parses_query_strings(self):
        query = SimulationPageQueryDTO.model_validate({"page": "1", "size": "3"})
        assert (query.page, query.size) == (1, 3)

    @pytest.mark.parametrize("direction", ["desc", "DESC", "Desc"])
    def test_desc_is_case_insensitive(self, direction):
        assert SimulationPageQueryDTO(direction=direction).descending is True

    @pytest.mark.parametrize("direction", ["asc", "up", ""])
    def test_anything_else_is_ascending(self, direction):
        query = SimulationPageQueryDTO(direction=direction)
        assert query.descending is False
        assert query.ordering == ["timestamp", "id"]

    def test_camel_case_sort_key(self):
        query = SimulationPageQueryDTO(sort_by="requestedAmount", direction="asc")
        assert query.sort_by == "requested_amount"
        assert query.ordering == ["requested_amount", "id"]

    def test_data_hora_sorts_by_timestamp(self):
        query = SimulationPageQueryDTO(sort_by="dataHora")
        assert query.sort_by == "timestamp"
        assert query.ordering == ["-timestamp", "-id"]

    def test_sort_by_id_has_no_tie_breaker(self):
        assert SimulationPageQueryDTO(sort_by="id").ordering == ["-id"]

    def test_unknown_sort_field(self):
        with pytest.raises(ValidationError):
            SimulationPageQueryDTO(sort_by="customer__cpf")

    @pytest.mark.parametrize("data", [{"page": -1}, {"size": 0}, {"size": 101}])
    def test_out_of_range(self, data):
        with pytest.raises(ValidationError):
            SimulationPageQueryDTO.model_validate(data)
