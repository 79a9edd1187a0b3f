"""Customer and Address models.

Business rules implemented:
- CPF is an 11-character identifier, unique across all customers.
- A customer owns at most one address; deleting the customer deletes it,
  and replacing it deletes the previous one (orphan removal).
- A customer owns its simulations (``Simulation.customer`` cascades).
- CPF is masked in ``__str__`` so it never leaks into logs.
"""

from __future__ import annotations

from django.db import models, transaction

from modules.core.models import BaseModel
from modules.customers.constants import CPF_LENGTH, NAME_MAX_LENGTH


class Address(BaseModel):
    """Postal address, only ever reached through its owning customer."""

    street = models.CharField(max_length=100)
    number = models.CharField(max_length=10)
    neighborhood = models.CharField(max_length=50)
    zip_code = models.CharField(max_length=9)
    city = models.CharField(max_length=50)
    state = models.CharField(max_length=2)

    class Meta:
        db_table = "addresses"

    def __str__(self) -> str:
        return f"{self.street}, {self.number} - {self.city}/{self.state}"


class Customer(BaseModel):
    """Customer aggregate root.

    ``address`` is a one-directional exclusive reference: the customer row
    holds the address id.  The reverse accessor (``Address.customer``) is
    only used to find orphaned addresses after bulk deletes.
    """

    cpf = models.CharField(max_length=CPF_LENGTH, unique=True)
    name = models.CharField(max_length=NAME_MAX_LENGTH)
    address = models.OneToOneField(
        Address,
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name="customer",
    )

    class Meta:
        db_table = "customers"
        ordering = ["id"]

    # ------------------------------------------------------------------
    # Ownership
    # ------------------------------------------------------------------

    def delete(self, using=None, keep_parents=False) -> tuple[int, dict[str, int]]:
        """Delete the customer together with its simulations and address."""
        address = self.address
        with transaction.atomic(using=using):
            count, per_model = super().delete(using=using, keep_parents=keep_parents)
            if address is not None:
                address_count, _ = address.delete(using=using)
                count += address_count
                per_model[Address._meta.label] = address_count
        return count, per_model

    # ------------------------------------------------------------------
    # Display (mask sensitive data)
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        suffix = self.cpf[-4:] if self.cpf else "????"
        return f"{self.name} (CPF: ***{suffix})"
