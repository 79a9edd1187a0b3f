"""Simulation repository interface.

Extends ``IRepository[Simulation]`` with the per-customer queries used
by the paged listing and the report exports.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.core.pagination import PageResult
    from modules.simulations.models import Simulation


class ISimulationRepository(IRepository["Simulation"]):
    """Repository contract for simulations."""

    @abstractmethod
    def list_by_customer(self, customer_id: int) -> List[Simulation]:
        """Every simulation of a customer, in insertion order."""

    @abstractmethod
    def page_by_customer(
        self, customer_id: int, page: int, size: int, ordering: List[str]
    ) -> PageResult[Simulation]:
        """One zero-based page of a customer's simulations."""
