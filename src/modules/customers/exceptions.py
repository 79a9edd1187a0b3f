"""Customer domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations

from modules.core.exceptions import ConflictError, NotFoundError


class CustomerAlreadyExists(ConflictError):
    """Another customer already holds the same CPF."""


class CustomerNotFound(NotFoundError):
    """The requested customer does not exist."""
