import django_filters
from rest_framework import status

from apps.api.common.exceptions import EntityNotFound
from apps.domains.exams.models import Subject
from apps.domains.teachers.models import Teacher

from .models import Course


class CourseFilter(django_filters.FilterSet):
    """subjectId / teacherId 가 존재하지 않으면 빈 목록 대신 404"""

    courseName = django_filters.CharFilter(field_name="name", lookup_expr="icontains")
    instituteName = django_filters.CharFilter(field_name="institute_name", lookup_expr="icontains")
    subjectId = django_filters.NumberFilter(method="filter_subject")
    teacherId = django_filters.NumberFilter(method="filter_teacher")

    class Meta:
        model = Course
        fields = ["courseName", "instituteName", "subjectId", "teacherId"]

    def filter_subject(self, queryset, name, value):
        if not Subject.objects.filter(pk=value).exists():
            raise EntityNotFound("Subject not found", http_status=status.HTTP_404_NOT_FOUND)
        return queryset.filter(subject_id=value)

    def filter_teacher(self, queryset, name, value):
        if not Teacher.objects.filter(pk=value).exists():
            raise EntityNotFound("Teacher not found", http_status=status.HTTP_404_NOT_FOUND)
        return queryset.filter(teacher_id=value)
