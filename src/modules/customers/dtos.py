"""Customer DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF Views) and the
Service layer.  DTOs are immutable (``frozen=True``).

- ``AddressDTO``: the six required postal fields.
- ``CreateCustomerDTO``: input for customer creation.
- ``UpdateCustomerDTO``: input for full (PUT) updates.
- ``PartialUpdateCustomerDTO``: input for partial (PATCH) updates.
"""

from __future__ import annotations

from typing import Annotated, Any, Dict, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field

from modules.customers.constants import CPF_LENGTH, NAME_MAX_LENGTH


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("Field must not be blank.")
    return value


def _text(max_length: int):
    return Annotated[str, Field(max_length=max_length), AfterValidator(_not_blank)]


Cpf = Annotated[str, Field(min_length=CPF_LENGTH, max_length=CPF_LENGTH)]
CustomerName = _text(NAME_MAX_LENGTH)

Street = _text(100)
StreetNumber = _text(10)
Neighborhood = _text(50)
ZipCode = _text(9)
City = _text(50)
State = _text(2)


# ---------------------------------------------------------------------------
# Address
# ---------------------------------------------------------------------------


class AddressDTO(BaseModel):
    """Immutable postal address payload; every field is required."""

    model_config = ConfigDict(frozen=True)

    street: Street
    number: StreetNumber
    neighborhood: Neighborhood
    zip_code: ZipCode
    city: City
    state: State

    def as_fields(self) -> Dict[str, Any]:
        """Model field values, ready for ``Address(**...)`` or ``setattr``."""
        return self.model_dump()


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateCustomerDTO(BaseModel):
    """Immutable DTO for customer creation requests.

    Validates:
    - ``cpf`` has exactly 11 characters (an opaque identifier, no
      check-digit validation).
    - ``name`` is non-blank and at most 100 characters.
    - ``address`` is optional; when present all six fields are required.
    """

    model_config = ConfigDict(frozen=True)

    cpf: Cpf
    name: CustomerName
    address: Optional[AddressDTO] = None


class UpdateCustomerDTO(CreateCustomerDTO):
    """Immutable DTO for full updates (PUT).

    ``cpf`` and ``name`` are always overwritten; ``address`` is only
    applied when supplied.
    """


class PartialUpdateCustomerDTO(BaseModel):
    """Immutable DTO for partial updates (PATCH).

    All fields are optional; only supplied (non-null) fields are applied.
    """

    model_config = ConfigDict(frozen=True)

    cpf: Optional[Cpf] = None
    name: Optional[CustomerName] = None
    address: Optional[AddressDTO] = None
