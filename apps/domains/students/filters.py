import django_filters
from .models import Student


class StudentFilter(django_filters.FilterSet):
    userName = django_filters.CharFilter(field_name="user__name", lookup_expr="icontains")

    class Meta:
        model = Student
        fields = ["userName"]
