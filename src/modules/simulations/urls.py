"""Simulation URL configuration."""

from __future__ import annotations

from django.urls import path

from modules.simulations.views import SimulationViewSet

urlpatterns = [
    path(
        "simulations/",
        SimulationViewSet.as_view({"get": "list", "post": "create"}),
        name="simulation-list",
    ),
    path(
        "simulations/<int:pk>/",
        SimulationViewSet.as_view({"get": "retrieve"}),
        name="simulation-detail",
    ),
    path(
        "simulations/customer/<int:customer_id>/",
        SimulationViewSet.as_view({"get": "list_by_customer"}),
        name="simulation-customer-page",
    ),
    path(
        "simulations/customer/<int:customer_id>/all/",
        SimulationViewSet.as_view({"get": "list_all_by_customer"}),
        name="simulation-customer-all",
    ),
    path(
        "simulations/customer/<int:customer_id>/export/txt/",
        SimulationViewSet.as_view({"get": "export_txt"}),
        name="simulation-export-txt",
    ),
    path(
        "simulations/customer/<int:customer_id>/export/csv/",
        SimulationViewSet.as_view({"get": "export_csv"}),
        name="simulation-export-csv",
    ),
    path(
        "simulations/customer/<int:customer_id>/simulacao-especifica/",
        SimulationViewSet.as_view({"post": "create_specific"}),
        name="simulation-customer-specific",
    ),
]
