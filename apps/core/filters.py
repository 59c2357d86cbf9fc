import django_filters

from apps.core.models import User


class DashUserFilter(django_filters.FilterSet):
    userName = django_filters.CharFilter(field_name="name", lookup_expr="icontains")
    role = django_filters.ChoiceFilter(choices=User.Role.choices)

    class Meta:
        model = User
        fields = ["userName", "role"]
