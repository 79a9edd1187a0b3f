"""Simulation API views.

Exposes the ``SimulationService`` via HTTP using a DRF ViewSet.
The two export actions answer with a downloadable document
(``Content-Disposition: attachment``) instead of JSON; their error
responses still go through the standardized JSON error handler.
"""

from __future__ import annotations

from django.http import HttpResponse
from django_filters.rest_framework import DjangoFilterBackend
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.exceptions import NotFound
from rest_framework.renderers import JSONRenderer
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.exceptions import validation_error_from_pydantic
from modules.core.renderers import CSVRenderer, PlainTextRenderer
from modules.customers.exceptions import CustomerNotFound
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.simulations.dtos import CreateSimulationDTO, SimulationPageQueryDTO
from modules.simulations.exceptions import EmptyReport, SimulationNotFound
from modules.simulations.filters import SimulationFilter
from modules.simulations.models import Simulation
from modules.simulations.repositories.django_repository import (
    SimulationDjangoRepository,
)
from modules.simulations.serializers import SimulationSerializer
from modules.simulations.services import SimulationService

# Query-string name -> SimulationPageQueryDTO field.
PAGE_QUERY_PARAMS = {
    "page": "page",
    "size": "size",
    "sortBy": "sort_by",
    "sort_by": "sort_by",
    "direction": "direction",
}


class SimulationViewSet(GenericViewSet):
    """ViewSet for simulations and their per-customer reports.

    Uses ``SimulationService`` with the Django repositories (DIP).
    Routes are bound explicitly in ``urls.py``.
    """

    filterset_class = SimulationFilter
    filter_backends = [DjangoFilterBackend]
    queryset = Simulation.objects.all()
    serializer_class = SimulationSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = SimulationService(
            simulation_repository=SimulationDjangoRepository(),
            customer_repository=CustomerDjangoRepository(),
        )

    def get_queryset(self):
        return Simulation.objects.select_related("customer")

    def get_renderers(self):
        if self.action == "export_txt":
            return [JSONRenderer(), PlainTextRenderer()]
        if self.action == "export_csv":
            return [JSONRenderer(), CSVRenderer()]
        return super().get_renderers()

    # ------------------------------------------------------------------
    # Collection / Item
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/v1/simulations/

        Optional filters: ``customer``, ``start``, ``end`` and
        ``min_requested_amount`` (see ``SimulationFilter``).
        """
        queryset = self.filter_queryset(self.get_queryset())
        return Response(SimulationSerializer(queryset, many=True).data)

    def create(self, request: Request) -> Response:
        """POST /api/v1/simulations/"""
        try:
            dto = CreateSimulationDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            raise validation_error_from_pydantic(exc) from exc

        try:
            simulation = self._service.create_simulation(dto)
        except CustomerNotFound as exc:
            raise NotFound(str(exc)) from exc

        out = SimulationSerializer(simulation)
        return Response(out.data, status=status.HTTP_201_CREATED)

    def retrieve(self, request: Request, pk: int) -> Response:
        """GET /api/v1/simulations/{pk}/"""
        try:
            simulation = self._service.get_simulation(pk)
        except SimulationNotFound as exc:
            raise NotFound(str(exc)) from exc
        return Response(SimulationSerializer(simulation).data)

    # ------------------------------------------------------------------
    # Per customer
    # ------------------------------------------------------------------

    def list_by_customer(self, request: Request, customer_id: int) -> Response:
        """GET /api/v1/simulations/customer/{id}/?page=&size=&sortBy=&direction=

        Zero-based page of the customer's simulations; by default the
        newest ``timestamp`` comes first.
        """
        raw = {
            field: request.query_params[param]
            for param, field in PAGE_QUERY_PARAMS.items()
            if param in request.query_params
        }
        try:
            query = SimulationPageQueryDTO.model_validate(raw)
        except PydanticValidationError as exc:
            raise validation_error_from_pydantic(exc) from exc

        try:
            page = self._service.list_by_customer(customer_id, query)
        except CustomerNotFound as exc:
            raise NotFound(str(exc)) from exc

        content = SimulationSerializer(page.content, many=True).data
        return Response(page.to_dict(content))

    def list_all_by_customer(self, request: Request, customer_id: int) -> Response:
        """GET /api/v1/simulations/customer/{id}/all/"""
        try:
            simulations = self._service.list_all_by_customer(customer_id)
        except CustomerNotFound as exc:
            raise NotFound(str(exc)) from exc
        return Response(SimulationSerializer(simulations, many=True).data)

    def create_specific(self, request: Request, customer_id: int) -> Response:
        """POST /api/v1/simulations/customer/{id}/simulacao-especifica/"""
        try:
            simulation = self._service.create_specific_simulation(customer_id)
        except CustomerNotFound as exc:
            raise NotFound(str(exc)) from exc
        out = SimulationSerializer(simulation)
        return Response(out.data, status=status.HTTP_201_CREATED)

    def export_txt(self, request: Request, customer_id: int):
        """GET /api/v1/simulations/customer/{id}/export/txt/"""
        try:
            body = self._service.text_report(customer_id)
        except CustomerNotFound as exc:
            raise NotFound(str(exc)) from exc
        except EmptyReport:
            return Response(status=status.HTTP_204_NO_CONTENT)
        return _attachment(body, "text/plain", f"simulacoes_cliente_{customer_id}.txt")

    def export_csv(self, request: Request, customer_id: int):
        """GET /api/v1/simulations/customer/{id}/export/csv/"""
        try:
            body = self._service.csv_report(customer_id)
        except CustomerNotFound as exc:
            raise NotFound(str(exc)) from exc
        except EmptyReport:
            return Response(status=status.HTTP_204_NO_CONTENT)
        return _attachment(body, "text/csv", f"simulacoes_cliente_{customer_id}.csv")


def _attachment(body: str, media_type: str, filename: str) -> HttpResponse:
    response = HttpResponse(
        body.encode("utf-8"), content_type=f"{media_type}; charset=utf-8"
    )
    response["Content-Disposition"] = f'attachment; filename="{filename}"'
    return response
