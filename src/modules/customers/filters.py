import django_filters

from modules.customers.models import Customer


class CustomerFilter(django_filters.FilterSet):
    name = django_filters.CharFilter(field_name="name", lookup_expr="icontains")
    city = django_filters.CharFilter(field_name="address__city", lookup_expr="iexact")
    state = django_filters.CharFilter(field_name="address__state", lookup_expr="iexact")

    class Meta:
        model = Customer
        fields = ["name", "city", "state"]
