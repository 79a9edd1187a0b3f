"""Simulation service layer (Use Cases).

Orchestrates business logic for simulations, delegating persistence to
the injected ``ISimulationRepository`` and customer look-ups to the
injected ``ICustomerRepository``.

Business rules enforced here:
- A simulation always belongs to an existing customer.
- Every per-customer operation checks the customer first, so an unknown
  customer is reported as ``CustomerNotFound`` even when it would simply
  have no simulations.
- Reports refuse an empty simulation list (``EmptyReport``).
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any, Dict, List, Optional

import structlog
from django.conf import settings
from django.db import transaction
from django.utils import timezone

from modules.customers.exceptions import CustomerNotFound
from modules.simulations.constants import (
    SPECIFIC_SIMULATION_COLLATERAL_AMOUNT,
    SPECIFIC_SIMULATION_MONTHLY_INTEREST_RATE,
    SPECIFIC_SIMULATION_REQUESTED_AMOUNT,
    SPECIFIC_SIMULATION_TERM_MONTHS,
    SPECIFIC_SIMULATION_TIMESTAMP,
)
from modules.simulations.exceptions import EmptyReport, SimulationNotFound
from modules.simulations.models import Simulation
from modules.simulations.reports import render_csv_report, render_text_report

if TYPE_CHECKING:
    from modules.core.pagination import PageResult
    from modules.customers.models import Customer
    from modules.customers.repositories.interfaces import ICustomerRepository
    from modules.simulations.dtos import CreateSimulationDTO, SimulationPageQueryDTO
    from modules.simulations.repositories.interfaces import ISimulationRepository

logger = structlog.get_logger(__name__)


class SimulationService:
    """Application service for Simulation use-cases."""

    def __init__(
        self,
        simulation_repository: ISimulationRepository,
        customer_repository: ICustomerRepository,
    ) -> None:
        self._repo = simulation_repository
        self._customers = customer_repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_simulation(self, dto: CreateSimulationDTO) -> Simulation:
        """Record a simulation for ``dto.customer_id``.

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        customer = self._get_customer(dto.customer_id)
        simulation = Simulation(
            customer=customer,
            timestamp=_aware(dto.timestamp),
            requested_amount=dto.requested_amount,
            collateral_amount=dto.collateral_amount,
            term_months=dto.term_months,
            monthly_interest_rate=dto.monthly_interest_rate,
        )
        simulation = self._repo.save(simulation)
        logger.info(
            "simulation.created",
            simulation_id=simulation.id,
            customer_id=customer.id,
        )
        return simulation

    @transaction.atomic
    def create_specific_simulation(self, customer_id: int) -> Simulation:
        """Record the fixed reference simulation for a customer.

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        customer = self._get_customer(customer_id)
        simulation = Simulation(
            customer=customer,
            timestamp=_aware(SPECIFIC_SIMULATION_TIMESTAMP),
            requested_amount=SPECIFIC_SIMULATION_REQUESTED_AMOUNT,
            collateral_amount=SPECIFIC_SIMULATION_COLLATERAL_AMOUNT,
            term_months=SPECIFIC_SIMULATION_TERM_MONTHS,
            monthly_interest_rate=SPECIFIC_SIMULATION_MONTHLY_INTEREST_RATE,
        )
        simulation = self._repo.save(simulation)
        logger.info(
            "simulation.specific_created",
            simulation_id=simulation.id,
            customer_id=customer_id,
        )
        return simulation

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_simulations(
        self, filters: Optional[Dict[str, Any]] = None
    ) -> List[Simulation]:
        return self._repo.list(filters)

    def get_simulation(self, id: int) -> Simulation:
        """Raises ``SimulationNotFound`` if the simulation does not exist."""
        simulation = self._repo.get_by_id(id)
        if not simulation:
            raise SimulationNotFound(f"Simulation {id} not found.")
        return simulation

    def list_by_customer(
        self, customer_id: int, query: SimulationPageQueryDTO
    ) -> PageResult[Simulation]:
        """One page of the customer's simulations, sorted per ``query``.

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        self._get_customer(customer_id)
        page = self._repo.page_by_customer(
            customer_id, query.page, query.size, query.ordering
        )
        logger.info(
            "simulation.page_listed",
            customer_id=customer_id,
            page=query.page,
            size=query.size,
            total_elements=page.total_elements,
        )
        return page

    def list_all_by_customer(self, customer_id: int) -> List[Simulation]:
        """Every simulation of the customer, oldest record first.

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        self._get_customer(customer_id)
        return self._repo.list_by_customer(customer_id)

    def text_report(self, customer_id: int) -> str:
        """Fixed-width text report of the customer's simulations.

        Raises:
            CustomerNotFound: if the customer does not exist.
            EmptyReport: if the customer has no simulations.
        """
        customer, simulations = self._report_data(customer_id)
        return render_text_report(customer, simulations)

    def csv_report(self, customer_id: int) -> str:
        """CSV report of the customer's simulations.

        Raises:
            CustomerNotFound: if the customer does not exist.
            EmptyReport: if the customer has no simulations.
        """
        customer, simulations = self._report_data(customer_id)
        return render_csv_report(customer, simulations)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_customer(self, customer_id: int) -> Customer:
        customer = self._customers.get_by_id(customer_id)
        if not customer:
            raise CustomerNotFound(f"Customer {customer_id} not found.")
        return customer

    def _report_data(self, customer_id: int):
        customer = self._get_customer(customer_id)
        simulations = self._repo.list_by_customer(customer_id)
        if not simulations:
            logger.info("simulation.report_empty", customer_id=customer_id)
            raise EmptyReport(f"Customer {customer_id} has no simulations.")
        return customer, simulations


def _aware(value: datetime) -> datetime:
    """Interpret naive timestamps in the project's time zone."""
    if settings.USE_TZ and timezone.is_naive(value):
        return timezone.make_aware(value)
    return value
