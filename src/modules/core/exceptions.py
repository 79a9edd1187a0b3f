"""Shared domain error taxonomy and its HTTP translation helpers.

Services raise the framework-agnostic ``DomainError`` subclasses below.
Views translate them into DRF exceptions, which the standardized error
handler (``drf_standardized_errors``) renders as::

    {"type": "client_error", "errors": [{"code": ..., "detail": ..., "attr": ...}]}
"""

from __future__ import annotations

from typing import Dict, List

from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.exceptions import APIException, ValidationError


class DomainError(Exception):
    """Base class for every business-rule violation."""


class NotFoundError(DomainError):
    """The requested entity (by id or natural key) does not exist."""


class ConflictError(DomainError):
    """A uniqueness rule would be violated by the requested change."""


class Conflict(APIException):
    """HTTP 409. DRF ships no exception for it."""

    status_code = status.HTTP_409_CONFLICT
    default_detail = "The request conflicts with the current state of the resource."
    default_code = "conflict"


def validation_error_from_pydantic(exc: PydanticValidationError) -> ValidationError:
    """Convert a pydantic ``ValidationError`` into a DRF ``ValidationError``.

    Each pydantic error location becomes a dotted attribute name
    (``address.zip_code``); model-level errors go to ``non_field_errors``.
    """
    detail: Dict[str, List[str]] = {}
    for error in exc.errors(include_url=False):
        attr = ".".join(str(part) for part in error["loc"]) or "non_field_errors"
        detail.setdefault(attr, []).append(error["msg"])
    return ValidationError(detail)
