"""Simulation constants: fixture values, paging defaults and sortable fields."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

# Fixed values of the "specific simulation" fixture endpoint.
SPECIFIC_SIMULATION_TIMESTAMP = datetime(2024, 6, 15, 10, 30, 26)
SPECIFIC_SIMULATION_REQUESTED_AMOUNT = Decimal("300000.00")
SPECIFIC_SIMULATION_COLLATERAL_AMOUNT = Decimal("1000000.00")
SPECIFIC_SIMULATION_TERM_MONTHS = 150
SPECIFIC_SIMULATION_MONTHLY_INTEREST_RATE = Decimal("2.00")

DEFAULT_PAGE = 0
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100
DEFAULT_SORT_FIELD = "timestamp"
DEFAULT_SORT_DIRECTION = "desc"

# Public sort keys (snake_case, camelCase and Portuguese "dataHora") -> model field.
SORTABLE_FIELDS = {
    "id": "id",
    "timestamp": "timestamp",
    "dataHora": "timestamp",
    "requested_amount": "requested_amount",
    "requestedAmount": "requested_amount",
    "collateral_amount": "collateral_amount",
    "collateralAmount": "collateral_amount",
    "term_months": "term_months",
    "termMonths": "term_months",
    "monthly_interest_rate": "monthly_interest_rate",
    "monthlyInterestRate": "monthly_interest_rate",
}
