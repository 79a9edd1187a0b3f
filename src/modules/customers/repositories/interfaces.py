"""Customer repository interface.

Extends ``IRepository[Customer]`` with the CPF look-ups required by the
uniqueness rule and the bulk queries exposed by the directory.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.customers.models import Customer


class ICustomerRepository(IRepository["Customer"]):
    """Repository contract for the Customer aggregate."""

    @abstractmethod
    def get_by_cpf(self, cpf: str) -> Optional[Customer]:
        """Retrieve a customer by CPF (exact match)."""

    @abstractmethod
    def exists_by_cpf(self, cpf: str) -> bool:
        """Return ``True`` if any customer holds ``cpf``."""

    @abstractmethod
    def exists(self, id: int) -> bool:
        """Return ``True`` if a customer with ``id`` exists."""

    @abstractmethod
    def count(self) -> int:
        """Total number of customers."""

    @abstractmethod
    def delete_all(self) -> int:
        """Delete every customer (and what they own); return how many."""

