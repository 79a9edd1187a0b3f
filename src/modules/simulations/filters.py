import django_filters

from modules.simulations.models import Simulation


class SimulationFilter(django_filters.FilterSet):
    customer = django_filters.NumberFilter(field_name="customer_id")
    start = django_filters.IsoDateTimeFilter(field_name="timestamp", lookup_expr="gte")
    end = django_filters.IsoDateTimeFilter(field_name="timestamp", lookup_expr="lte")
    min_requested_amount = django_filters.NumberFilter(
        field_name="requested_amount", lookup_expr="gte"
    )

    class Meta:
        model = Simulation
        fields = ["customer", "start", "end", "min_requested_amount"]
