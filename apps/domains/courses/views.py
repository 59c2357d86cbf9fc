# PATH: apps/domains/courses/views.py
import logging

from rest_framework import status

from apps.api.common.exceptions import Conflict
from apps.api.common.viewsets import MessageModelViewSet
from apps.core.permissions import IsSuperAdminOrAdmin

from .filters import CourseFilter
from .models import Course
from .serializers import CourseSerializer, CourseWriteSerializer

logger = logging.getLogger(__name__)


class CourseViewSet(MessageModelViewSet):
    """
    GET    /api/view/course          ?courseName=&instituteName=&subjectId=&teacherId=
    GET    /api/view/course/<id>
    POST   /api/view/course          (superAdmin / admin)
    PUT    /api/view/course/<id>     (superAdmin / admin)
    DELETE /api/view/course/<id>     (superAdmin / admin)
    """

    queryset = Course.objects.select_related("teacher__user", "teacher__subject", "subject")
    serializer_class = CourseSerializer
    write_serializer_class = CourseWriteSerializer
    filterset_class = CourseFilter
    write_permission_classes = [IsSuperAdminOrAdmin]

    collection_name = "courses"
    entity_label = "Course"
    missing_status = status.HTTP_404_NOT_FOUND
    missing_message = "Course not found"

    created_message = "Course created successfully"
    updated_message = "Course updated successfully"
    deleted_message = "Course deleted successfully"

    def _duplicate_exists(self, name, teacher, subject, exclude_pk=None) -> bool:
        qs = Course.objects.filter(name=name, teacher=teacher, subject=subject)
        if exclude_pk is not None:
            qs = qs.exclude(pk=exclude_pk)
        return qs.exists()

    def perform_create(self, serializer):
        data = serializer.validated_data
        if self._duplicate_exists(data["name"], data["teacher"], data["subject"]):
            raise Conflict("Course with the same name, teacher, and subject already exists")
        course = serializer.save()
        logger.info("course created id=%s teacher=%s subject=%s", course.id, course.teacher_id, course.subject_id)

    def perform_update(self, serializer):
        data = serializer.validated_data
        instance = serializer.instance
        if {"name", "teacher", "subject"} & data.keys():
            taken = self._duplicate_exists(
                data.get("name", instance.name),
                data.get("teacher", instance.teacher),
                data.get("subject", instance.subject),
                exclude_pk=instance.pk,
            )
            if taken:
                raise Conflict("Another course with the same name, teacher, and subject already exists")
        serializer.save()

    def _course_payload(self, instance) -> dict:
        instance = self.get_queryset().get(pk=instance.pk)
        return {"course": CourseSerializer(instance, context=self.get_serializer_context()).data}

    def created_payload(self, instance) -> dict:
        return self._course_payload(instance)

    def updated_payload(self, instance) -> dict:
        return self._course_payload(instance)
