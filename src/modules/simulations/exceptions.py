"""Simulation domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.  A missing customer is reported with
``modules.customers.exceptions.CustomerNotFound``.
"""

from __future__ import annotations

from modules.core.exceptions import DomainError, NotFoundError


class SimulationNotFound(NotFoundError):
    """The requested simulation does not exist."""


class EmptyReport(DomainError):
    """A report was requested for an empty list of simulations."""
