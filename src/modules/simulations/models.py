"""Simulation model.

A simulation is a loan quote (amount requested, collateral, term and
monthly rate) that belongs to exactly one customer.  Deleting the
customer deletes its simulations (``on_delete=CASCADE``).
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel
from modules.customers.models import Customer


class Simulation(BaseModel):
    customer = models.ForeignKey(
        Customer,
        on_delete=models.CASCADE,
        related_name="simulations",
    )
    timestamp = models.DateTimeField()
    requested_amount = models.DecimalField(max_digits=15, decimal_places=2)
    collateral_amount = models.DecimalField(max_digits=15, decimal_places=2)
    term_months = models.PositiveIntegerField()
    monthly_interest_rate = models.DecimalField(max_digits=5, decimal_places=2)

    class Meta:
        db_table = "simulations"
        ordering = ["id"]
        indexes = [
            models.Index(
                fields=["customer", "timestamp"],
                name="simulations_customer_ts_idx",
            ),
        ]

    def __str__(self) -> str:
        return f"Simulation #{self.pk} ({self.requested_amount} x {self.term_months}m)"
