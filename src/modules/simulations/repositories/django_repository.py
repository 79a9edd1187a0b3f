"""Django ORM implementation of the Simulation repository.

Satisfies ``ISimulationRepository`` using Django's QuerySet API.
Every read eager-loads the owning customer (``select_related``) because
serializers and reports always show it.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from django.db import transaction

from modules.core.pagination import PageResult, slice_page
from modules.simulations.models import Simulation
from modules.simulations.repositories.interfaces import ISimulationRepository

logger = structlog.get_logger(__name__)


class SimulationDjangoRepository(ISimulationRepository):
    """Concrete Simulation repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Simulation]:
        """Returns ``None`` for non-existent or malformed IDs."""
        try:
            return Simulation.objects.select_related("customer").filter(id=id).first()
        except (TypeError, ValueError):
            return None

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Simulation]:
        """List simulations with optional Django ORM look-ups.

        Examples of valid filters::

            {"customer_id": 1}
            {"timestamp__range": (start, end)}
            {"requested_amount__gte": Decimal("100000")}
        """
        queryset = Simulation.objects.select_related("customer")
        if filters:
            queryset = queryset.filter(**filters)
        return list(queryset)

    @transaction.atomic
    def save(self, entity: Simulation) -> Simulation:
        """Persist (create or update) a simulation."""
        is_new = entity.pk is None
        entity.save()
        logger.info(
            "simulation.saved",
            simulation_id=entity.pk,
            customer_id=entity.customer_id,
            is_new=is_new,
        )
        return entity

    @transaction.atomic
    def delete(self, id: int) -> bool:
        simulation = self.get_by_id(id)
        if not simulation:
            return False
        simulation.delete()
        logger.info("simulation.deleted", simulation_id=id)
        return True

    def list_by_customer(self, customer_id: int) -> List[Simulation]:
        return list(
            Simulation.objects.select_related("customer")
            .filter(customer_id=customer_id)
            .order_by("id")
        )

    def page_by_customer(
        self, customer_id: int, page: int, size: int, ordering: List[str]
    ) -> PageResult[Simulation]:
        queryset = (
            Simulation.objects.select_related("customer")
            .filter(customer_id=customer_id)
            .order_by(*ordering)
        )
        return slice_page(queryset, page, size)
