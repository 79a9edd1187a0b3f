"""Customer URL configuration.

Bound explicitly rather than through a router: the collection also
answers ``DELETE`` and the item routes need the ``<int:pk>`` converter so
that ``count/``, ``names/`` and ``cpf/`` never shadow an id.
"""

from __future__ import annotations

from django.urls import path

from modules.customers.views import CustomerViewSet

customer_collection = CustomerViewSet.as_view(
    {"get": "list", "post": "create", "delete": "destroy_all"}
)
customer_detail = CustomerViewSet.as_view(
    {
        "get": "retrieve",
        "put": "update",
        "patch": "partial_update",
        "delete": "destroy",
    }
)

urlpatterns = [
    path("customers/", customer_collection, name="customer-list"),
    path(
        "customers/count/",
        CustomerViewSet.as_view({"get": "count"}),
        name="customer-count",
    ),
    path(
        "customers/names/",
        CustomerViewSet.as_view({"get": "names"}),
        name="customer-names",
    ),
    path(
        "customers/cpf/<str:cpf>/",
        CustomerViewSet.as_view({"get": "retrieve_by_cpf"}),
        name="customer-by-cpf",
    ),
    path("customers/<int:pk>/", customer_detail, name="customer-detail"),
    path(
        "customers/<int:pk>/exists/",
        CustomerViewSet.as_view({"get": "exists"}),
        name="customer-exists",
    ),
]
