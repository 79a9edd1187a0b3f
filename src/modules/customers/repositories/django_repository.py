"""Django ORM implementation of the Customer repository.

Satisfies ``ICustomerRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: look-ups return ``None``
instead of raising HTTP-level exceptions; the Service Layer decides
how to translate a missing entity into an API response.

The one exception is the CPF unique constraint: a concurrent writer that
loses the race surfaces as ``CustomerAlreadyExists``, never as a raw
``IntegrityError``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from django.db import IntegrityError, transaction

from modules.customers.exceptions import CustomerAlreadyExists
from modules.customers.models import Address, Customer
from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerDjangoRepository(ICustomerRepository):
    """Concrete Customer repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Customer]:
        """Retrieve a customer (with its address) by primary key.

        Returns ``None`` for non-existent or malformed IDs.
        """
        try:
            return Customer.objects.select_related("address").filter(id=id).first()
        except (TypeError, ValueError):
            return None

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Customer]:
        """List customers with optional Django ORM look-ups.

        Examples of valid filters::

            {"name__icontains": "silva"}
            {"address__city__iexact": "curitiba", "address__state__iexact": "pr"}
        """
        queryset = Customer.objects.select_related("address")
        if filters:
            queryset = queryset.filter(**filters)
        return list(queryset)

    @transaction.atomic
    def save(self, entity: Customer) -> Customer:
        """Persist (create or update) a customer and its owned address.

        When the customer's address was swapped for a different one, the
        previous address row is deleted (orphan removal).
        """
        is_new = entity.pk is None
        previous_address_id = None
        if not is_new:
            previous_address_id = (
                Customer.objects.filter(pk=entity.pk)
                .values_list("address_id", flat=True)
                .first()
            )

        try:
            with transaction.atomic():
                if entity.address is not None:
                    entity.address.save()
                entity.save()
        except IntegrityError:
            if self._cpf_taken_by_other(entity):
                logger.warning("customer.duplicate_cpf_on_save", cpf=entity.cpf)
                raise CustomerAlreadyExists(f"CPF already registered: {entity.cpf}")
            raise

        if previous_address_id and previous_address_id != entity.address_id:
            Address.objects.filter(pk=previous_address_id).delete()
            logger.info(
                "customer.address_orphan_removed",
                customer_id=entity.pk,
                address_id=previous_address_id,
            )

        logger.info("customer.saved", customer_id=entity.pk, is_new=is_new)
        return entity

    @transaction.atomic
    def delete(self, id: int) -> bool:
        """Delete a customer by ID, cascading to its address and simulations.

        Returns ``True`` if the customer was found and deleted,
        ``False`` if no customer exists with the given ID.
        """
        customer = self.get_by_id(id)
        if not customer:
            return False
        customer.delete()
        logger.info("customer.deleted", customer_id=id)
        return True

    @transaction.atomic
    def delete_all(self) -> int:
        """Bulk delete; addresses left without an owner are removed too."""
        _, per_model = Customer.objects.all().delete()
        Address.objects.filter(customer__isnull=True).delete()
        deleted = per_model.get(Customer._meta.label, 0)
        logger.warning("customer.all_deleted", count=deleted)
        return deleted

    def get_by_cpf(self, cpf: str) -> Optional[Customer]:
        """Retrieve a customer by CPF (exact, case-sensitive match)."""
        return Customer.objects.select_related("address").filter(cpf=cpf).first()

    def exists_by_cpf(self, cpf: str) -> bool:
        return Customer.objects.filter(cpf=cpf).exists()

    def exists(self, id: int) -> bool:
        try:
            return Customer.objects.filter(id=id).exists()
        except (TypeError, ValueError):
            return False

    def count(self) -> int:
        return Customer.objects.count()

    @staticmethod
    def _cpf_taken_by_other(entity: Customer) -> bool:
        queryset = Customer.objects.filter(cpf=entity.cpf)
        if entity.pk is not None:
            queryset = queryset.exclude(pk=entity.pk)
        return queryset.exists()
