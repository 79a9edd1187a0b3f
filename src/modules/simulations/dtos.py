"""Simulation DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
DTOs are immutable (``frozen=True``).

- ``CreateSimulationDTO``: input for creating a simulation for an
  existing customer.
- ``SimulationPageQueryDTO``: paging/sorting parameters of the
  per-customer listing.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from modules.simulations.constants import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    DEFAULT_SORT_DIRECTION,
    DEFAULT_SORT_FIELD,
    MAX_PAGE_SIZE,
    SORTABLE_FIELDS,
)


class CreateSimulationDTO(BaseModel):
    """Immutable DTO for simulation creation requests.

    Amounts carry at most 13 integer and 2 fractional digits; the monthly
    rate at most 3 integer and 2 fractional digits.
    """

    model_config = ConfigDict(frozen=True)

    customer_id: int = Field(gt=0)
    timestamp: datetime
    requested_amount: Decimal = Field(gt=0, max_digits=15, decimal_places=2)
    collateral_amount: Decimal = Field(ge=0, max_digits=15, decimal_places=2)
    term_months: int = Field(gt=0)
    monthly_interest_rate: Decimal = Field(ge=0, max_digits=5, decimal_places=2)


class SimulationPageQueryDTO(BaseModel):
    """Zero-based page request for a customer's simulations.

    ``direction`` is descending only when it equals ``"desc"``
    (case-insensitive); any other value sorts ascending.
    """

    model_config = ConfigDict(frozen=True)

    page: int = Field(default=DEFAULT_PAGE, ge=0)
    size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)
    sort_by: str = DEFAULT_SORT_FIELD
    direction: str = DEFAULT_SORT_DIRECTION

    @field_validator("sort_by")
    @classmethod
    def sort_field_must_be_known(cls, v: str) -> str:
        if v not in SORTABLE_FIELDS:
            allowed = ", ".join(sorted(set(SORTABLE_FIELDS.values())))
            raise ValueError(f"Unknown sort field '{v}'. Use one of: {allowed}.")
        return SORTABLE_FIELDS[v]

    @property
    def descending(self) -> bool:
        return self.direction.lower() == "desc"

    @property
    def ordering(self) -> List[str]:
        """ORM ordering; ``id`` breaks ties in the same direction."""
        prefix = "-" if self.descending else ""
        fields = [f"{prefix}{self.sort_by}"]
        if self.sort_by != "id":
            fields.append(f"{prefix}id")
        return fields
