# PATH: apps/domains/exams/views/catalog_view.py
from __future__ import annotations

from django.db.models import Prefetch

from apps.api.common.exceptions import Conflict
from apps.api.common.viewsets import MessageModelViewSet
from apps.core.permissions import IsSuperAdmin, IsSuperAdminOrAdmin
from apps.domains.exams.filters import SchoolClassFilter, SubjectFilter, UnitFilter
from apps.domains.exams.models import SchoolClass, Subject, Unit
from apps.domains.exams.serializers.catalog import (
    SchoolClassSerializer,
    SubjectSerializer,
    UnitSerializer,
)
from apps.domains.exams.services import cascade


class _CatalogViewSet(MessageModelViewSet):
    """
    Class / Subject / Unit 공통
    - 조회: 로그인 사용자
    - 쓰기: superAdmin / admin
    - 같은 이름 중복 생성 금지 (duplicate_message)
    """

    write_permission_classes = [IsSuperAdminOrAdmin]
    duplicate_message = "Already Exist"

    def _name_taken(self, name, exclude_pk=None) -> bool:
        qs = self.queryset.model.objects.filter(name=name)
        if exclude_pk is not None:
            qs = qs.exclude(pk=exclude_pk)
        return qs.exists()

    def perform_create(self, serializer):
        if self._name_taken(serializer.validated_data["name"]):
            raise Conflict(self.duplicate_message)
        serializer.save()

    def perform_update(self, serializer):
        name = serializer.validated_data.get("name")
        if name and self._name_taken(name, exclude_pk=serializer.instance.pk):
            raise Conflict(self.duplicate_message)
        serializer.save()


# ======================================================
# Class
# ======================================================

class SchoolClassViewSet(_CatalogViewSet):
    """
    GET    /api/exam/class          ?className=&page=&perPage=
    POST   /api/exam/class
    PUT    /api/exam/class/<id>
    DELETE /api/exam/class/<id>     (Subject/Unit/Question 까지 삭제)
    """

    queryset = SchoolClass.objects.prefetch_related("subjects")
    serializer_class = SchoolClassSerializer
    filterset_class = SchoolClassFilter

    collection_name = "classes"
    entity_label = "Class"
    duplicate_message = "This Class Already Exist"

    def perform_destroy(self, instance):
        return cascade.delete_class(instance).as_dict()


# ======================================================
# Subject
# ======================================================

class SubjectViewSet(_CatalogViewSet):
    queryset = Subject.objects.select_related("school_class").prefetch_related(
        Prefetch("units", queryset=Unit.objects.order_by("-created_at"))
    )
    serializer_class = SubjectSerializer
    filterset_class = SubjectFilter

    collection_name = "subjects"
    entity_label = "Subject"
    duplicate_message = "This Subject Already Exist"

    def perform_destroy(self, instance):
        return cascade.delete_subject(instance).as_dict()


# ======================================================
# Unit
# ======================================================

class UnitViewSet(_CatalogViewSet):
    """단원 삭제는 superAdmin 만"""

    queryset = Unit.objects.select_related("subject")
    serializer_class = UnitSerializer
    filterset_class = UnitFilter
    action_permission_classes = {"destroy": [IsSuperAdmin]}

    collection_name = "units"
    entity_label = "Unit"
    duplicate_message = "This Unit Already Exist"

    def perform_destroy(self, instance):
        return cascade.delete_unit(instance).as_dict()
