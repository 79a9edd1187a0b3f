"""Customer service layer (Use Cases).

Orchestrates business logic for the Customer aggregate, delegating
persistence to the injected ``ICustomerRepository``.

Business rules enforced here:
- CPF must be unique (checked up front; the repository also maps a lost
  race on the unique constraint to ``CustomerAlreadyExists``).
- On update, an existing address is mutated in place (its id survives);
  a customer without one gets a freshly attached address.
- Deletion cascades to the owned address and simulations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional

import structlog
from django.db import transaction

from modules.customers.exceptions import CustomerAlreadyExists, CustomerNotFound
from modules.customers.models import Address, Customer

if TYPE_CHECKING:
    from modules.customers.dtos import (
        AddressDTO,
        CreateCustomerDTO,
        PartialUpdateCustomerDTO,
        UpdateCustomerDTO,
    )
    from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerService:
    """Application service for Customer use-cases.

    Receives an ``ICustomerRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: ICustomerRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_customer(self, dto: CreateCustomerDTO) -> Customer:
        """Create a new customer (and its address, when supplied).

        Raises:
            CustomerAlreadyExists: if the CPF is already registered.
        """
        log = logger.bind(cpf=dto.cpf)

        if self._repo.exists_by_cpf(dto.cpf):
            log.warning("customer.duplicate_cpf")
            raise CustomerAlreadyExists(f"CPF already registered: {dto.cpf}")

        customer = Customer(cpf=dto.cpf, name=dto.name)
        if dto.address is not None:
            customer.address = Address(**dto.address.as_fields())

        customer = self._repo.save(customer)
        log.info("customer.created", customer_id=customer.id)
        return customer

    @transaction.atomic
    def update_customer(self, id: int, dto: UpdateCustomerDTO) -> Customer:
        """Overwrite CPF and name; apply the address when one is supplied.

        Raises:
            CustomerNotFound: if the customer does not exist.
            CustomerAlreadyExists: if the new CPF belongs to another customer.
        """
        customer = self.get_customer(id)
        log = logger.bind(customer_id=id)

        self._ensure_cpf_available(customer, dto.cpf)
        customer.cpf = dto.cpf
        customer.name = dto.name
        if dto.address is not None:
            self._apply_address(customer, dto.address)

        customer = self._repo.save(customer)
        log.info("customer.updated")
        return customer

    @transaction.atomic
    def partial_update_customer(
        self, id: int, dto: PartialUpdateCustomerDTO
    ) -> Customer:
        """Apply only the fields present in ``dto``.

        Raises:
            CustomerNotFound: if the customer does not exist.
            CustomerAlreadyExists: if a new CPF belongs to another customer.
        """
        customer = self.get_customer(id)
        log = logger.bind(customer_id=id)

        if dto.name is not None:
            customer.name = dto.name
        if dto.cpf is not None:
            self._ensure_cpf_available(customer, dto.cpf)
            customer.cpf = dto.cpf
        if dto.address is not None:
            self._apply_address(customer, dto.address)

        customer = self._repo.save(customer)
        log.info("customer.partially_updated")
        return customer

    @transaction.atomic
    def delete_customer(self, id: int) -> None:
        """Delete a customer together with its address and simulations.

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        if not self._repo.delete(id):
            raise CustomerNotFound(f"Customer {id} not found.")
        logger.info("customer.deleted", customer_id=id)

    @transaction.atomic
    def delete_all_customers(self) -> int:
        """Delete every customer. Returns the number removed."""
        deleted = self._repo.delete_all()
        logger.warning("customer.bulk_deleted", count=deleted)
        return deleted

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_customers(
        self, filters: Optional[Dict[str, Any]] = None
    ) -> List[Customer]:
        """Return every customer, optionally filtered."""
        return self._repo.list(filters)

    def get_customer(self, id: int) -> Customer:
        """Retrieve a single customer by ID.

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        customer = self._repo.get_by_id(id)
        if not customer:
            raise CustomerNotFound(f"Customer {id} not found.")
        logger.info("customer.retrieved", customer_id=id)
        return customer

    def get_customer_by_cpf(self, cpf: str) -> Customer:
        """Retrieve a single customer by CPF.

        Raises:
            CustomerNotFound: if no customer holds ``cpf``.
        """
        customer = self._repo.get_by_cpf(cpf)
        if not customer:
            raise CustomerNotFound(f"Customer with CPF {cpf} not found.")
        return customer

    def customer_exists(self, id: int) -> bool:
        return self._repo.exists(id)

    def count_customers(self) -> int:
        return self._repo.count()

    @staticmethod
    def filter_names_by_city_state(
        customers: Iterable[Customer], city: str, state: str
    ) -> List[str]:
        """Names of the customers living in ``city``/``state``, in input order.

        Comparison is case-insensitive; customers without an address are
        skipped.  Pure function: no database access.
        """
        city_key = city.casefold()
        state_key = state.casefold()
        return [
            customer.name
            for customer in customers
            if customer.address is not None
            and customer.address.city.casefold() == city_key
            and customer.address.state.casefold() == state_key
        ]

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _ensure_cpf_available(self, customer: Customer, cpf: str) -> None:
        if cpf != customer.cpf and self._repo.exists_by_cpf(cpf):
            logger.warning("customer.duplicate_cpf", customer_id=customer.id, cpf=cpf)
            raise CustomerAlreadyExists(f"CPF already registered: {cpf}")

    @staticmethod
    def _apply_address(customer: Customer, dto: AddressDTO) -> None:
        """Mutate the current address in place, or attach a new one."""
        if customer.address is None:
            customer.address = Address(**dto.as_fields())
            return
        for field, value in dto.as_fields().items():
            setattr(customer.address, field, value)
