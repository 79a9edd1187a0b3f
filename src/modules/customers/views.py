"""Customer API views.

Exposes the ``CustomerService`` via HTTP using a DRF ViewSet.
Domain exceptions are caught and re-raised as DRF exceptions so every
error body goes through the standardized exception handler.  The view
never swallows generic exceptions.
"""

from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.exceptions import NotFound, ValidationError
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.exceptions import Conflict, validation_error_from_pydantic
from modules.customers.dtos import (
    CreateCustomerDTO,
    PartialUpdateCustomerDTO,
    UpdateCustomerDTO,
)
from modules.customers.exceptions import CustomerAlreadyExists, CustomerNotFound
from modules.customers.filters import CustomerFilter
from modules.customers.models import Customer
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.customers.serializers import CustomerSerializer
from modules.customers.services import CustomerService


class CustomerViewSet(GenericViewSet):
    """ViewSet for Customer CRUD operations.

    Uses ``CustomerService`` with ``CustomerDjangoRepository`` (DIP).
    Does **not** extend ``ModelViewSet``: writes go through the
    service/repository layer.  Routes are bound explicitly in ``urls.py``.
    """

    filterset_class = CustomerFilter
    filter_backends = [DjangoFilterBackend]
    queryset = Customer.objects.all()
    serializer_class = CustomerSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = CustomerService(repository=CustomerDjangoRepository())

    def get_queryset(self):
        return Customer.objects.select_related("address")

    # ------------------------------------------------------------------
    # Collection
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/v1/customers/

        Returns every customer; ``name``, ``city`` and ``state`` narrow
        the result via ``CustomerFilter``.
        """
        queryset = self.filter_queryset(self.get_queryset())
        return Response(CustomerSerializer(queryset, many=True).data)

    def create(self, request: Request) -> Response:
        """POST /api/v1/customers/"""
        try:
            dto = CreateCustomerDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            raise validation_error_from_pydantic(exc) from exc

        try:
            customer = self._service.create_customer(dto)
        except CustomerAlreadyExists as exc:
            raise Conflict(str(exc)) from exc

        out = CustomerSerializer(customer)
        return Response(out.data, status=status.HTTP_201_CREATED)

    def destroy_all(self, request: Request) -> Response:
        """DELETE /api/v1/customers/"""
        self._service.delete_all_customers()
        return Response(status=status.HTTP_204_NO_CONTENT)

    def count(self, request: Request) -> Response:
        """GET /api/v1/customers/count/"""
        return Response(self._service.count_customers())

    def names(self, request: Request) -> Response:
        """GET /api/v1/customers/names/?city=...&state=...

        Names of the customers whose address matches city and state
        (case-insensitive), in directory order.
        """
        city = request.query_params.get("city")
        state = request.query_params.get("state")
        missing = {
            param: ["This query parameter is required."]
            for param, value in (("city", city), ("state", state))
            if not value
        }
        if missing:
            raise ValidationError(missing)

        customers = self._service.list_customers({"address__isnull": False})
        return Response(
            CustomerService.filter_names_by_city_state(customers, city, state)
        )

    def retrieve_by_cpf(self, request: Request, cpf: str) -> Response:
        """GET /api/v1/customers/cpf/{cpf}/"""
        try:
            customer = self._service.get_customer_by_cpf(cpf)
        except CustomerNotFound as exc:
            raise NotFound(str(exc)) from exc
        return Response(CustomerSerializer(customer).data)

    # ------------------------------------------------------------------
    # Item
    # ------------------------------------------------------------------

    def retrieve(self, request: Request, pk: int) -> Response:
        """GET /api/v1/customers/{pk}/"""
        try:
            customer = self._service.get_customer(pk)
        except CustomerNotFound as exc:
            raise NotFound(str(exc)) from exc
        return Response(CustomerSerializer(customer).data)

    def update(self, request: Request, pk: int) -> Response:
        """PUT /api/v1/customers/{pk}/"""
        try:
            dto = UpdateCustomerDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            raise validation_error_from_pydantic(exc) from exc

        try:
            customer = self._service.update_customer(pk, dto)
        except CustomerNotFound as exc:
            raise NotFound(str(exc)) from exc
        except CustomerAlreadyExists as exc:
            raise Conflict(str(exc)) from exc

        return Response(CustomerSerializer(customer).data)

    def partial_update(self, request: Request, pk: int) -> Response:
        """PATCH /api/v1/customers/{pk}/"""
        try:
            dto = PartialUpdateCustomerDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            raise validation_error_from_pydantic(exc) from exc

        try:
            customer = self._service.partial_update_customer(pk, dto)
        except CustomerNotFound as exc:
            raise NotFound(str(exc)) from exc
        except CustomerAlreadyExists as exc:
            raise Conflict(str(exc)) from exc

        return Response(CustomerSerializer(customer).data)

    def destroy(self, request: Request, pk: int) -> Response:
        """DELETE /api/v1/customers/{pk}/"""
        try:
            self._service.delete_customer(pk)
        except CustomerNotFound as exc:
            raise NotFound(str(exc)) from exc
        return Response(status=status.HTTP_204_NO_CONTENT)

    def exists(self, request: Request, pk: int) -> Response:
        """GET /api/v1/customers/{pk}/exists/"""
        return Response(self._service.customer_exists(pk))
