import django_filters

from .models import Teacher


class TeacherFilter(django_filters.FilterSet):
    userName = django_filters.CharFilter(field_name="user__name", lookup_expr="icontains")
    subjectId = django_filters.NumberFilter(field_name="subject_id")

    class Meta:
        model = Teacher
        fields = ["userName", "subjectId"]
