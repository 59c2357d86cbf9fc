# PATH: apps/domains/languages/views.py
from __future__ import annotations

import logging

from rest_framework.permissions import IsAuthenticated

from apps.api.common.exceptions import Conflict
from apps.api.common.viewsets import MessageModelViewSet
from apps.core.permissions import IsSuperAdminOrAdmin

from . import filters
from .models import (
    EmptyQuestion,
    Language,
    Level,
    ListenQuestion,
    MeanQuestion,
    RankingQuestion,
    ReadTalkQuestion,
)
from .serializers import (
    EmptyQuestionSerializer,
    LanguageSerializer,
    LevelSerializer,
    ListenQuestionSerializer,
    MeanQuestionSerializer,
    RankingQuestionSerializer,
    ReadTalkQuestionSerializer,
)

logger = logging.getLogger(__name__)


# ======================================================
# Language / Level
# ======================================================

class LanguageViewSet(MessageModelViewSet):
    """
    /api/language/language[/<id>]
    조회: 로그인 사용자 / 쓰기: superAdmin, admin
    """

    queryset = Language.objects.prefetch_related("levels")
    serializer_class = LanguageSerializer
    filterset_class = filters.LanguageFilter
    read_permission_classes = [IsAuthenticated]
    write_permission_classes = [IsSuperAdminOrAdmin]

    collection_name = "languages"
    entity_label = "Language"

    def _name_taken(self, name, exclude_pk=None) -> bool:
        qs = Language.objects.filter(name=name)
        if exclude_pk is not None:
            qs = qs.exclude(pk=exclude_pk)
        return qs.exists()

    def perform_create(self, serializer):
        if self._name_taken(serializer.validated_data["name"]):
            raise Conflict("This Language Already Exist")
        serializer.save()

    def perform_update(self, serializer):
        name = serializer.validated_data.get("name")
        if name and self._name_taken(name, exclude_pk=serializer.instance.pk):
            raise Conflict("This Language Already Exist")
        serializer.save()


class LevelViewSet(MessageModelViewSet):
    """/api/language/level[/<id>]   ?levelNumber=&language="""

    queryset = Level.objects.select_related("language")
    serializer_class = LevelSerializer
    filterset_class = filters.LevelFilter
    read_permission_classes = [IsAuthenticated]
    write_permission_classes = [IsSuperAdminOrAdmin]

    collection_name = "levels"
    entity_label = "Level"

    def _level_taken(self, language, level_number, exclude_pk=None) -> bool:
        qs = Level.objects.filter(language=language, level_number=level_number)
        if exclude_pk is not None:
            qs = qs.exclude(pk=exclude_pk)
        return qs.exists()

    def perform_create(self, serializer):
        data = serializer.validated_data
        if self._level_taken(data["language"], data["level_number"]):
            raise Conflict("This Level Already Exist")
        serializer.save()

    def perform_update(self, serializer):
        data = serializer.validated_data
        instance = serializer.instance
        if {"language", "level_number"} & data.keys():
            taken = self._level_taken(
                data.get("language", instance.language),
                data.get("level_number", instance.level_number),
                exclude_pk=instance.pk,
            )
            if taken:
                raise Conflict("This Level Already Exist")
        serializer.save()


# ======================================================
# Level questions (empty / mean / listen / readatalk / ranking)
# ======================================================

class _LevelQuestionViewSet(MessageModelViewSet):
    """문항 5종 공통: 조회/쓰기 모두 superAdmin, admin"""

    read_permission_classes = [IsSuperAdminOrAdmin]
    write_permission_classes = [IsSuperAdminOrAdmin]

    entity_label = "Question"
    missing_message = "Question not found"

    updated_message = "Updated Successfully"
    deleted_message = "Deleted Successfully"

    def perform_create(self, serializer):
        question = serializer.save()
        logger.info(
            "level question created type=%s id=%s level=%s",
            type(question).__name__, question.id, question.level_id,
        )


class EmptyQuestionViewSet(_LevelQuestionViewSet):
    queryset = EmptyQuestion.objects.select_related("level")
    serializer_class = EmptyQuestionSerializer
    filterset_class = filters.EmptyQuestionFilter
    collection_name = "questions"


class MeanQuestionViewSet(_LevelQuestionViewSet):
    queryset = MeanQuestion.objects.select_related("level")
    serializer_class = MeanQuestionSerializer
    filterset_class = filters.MeanQuestionFilter
    collection_name = "questions"


class ListenQuestionViewSet(_LevelQuestionViewSet):
    queryset = ListenQuestion.objects.select_related("level")
    serializer_class = ListenQuestionSerializer
    filterset_class = filters.ListenQuestionFilter
    collection_name = "listens"


class ReadTalkQuestionViewSet(_LevelQuestionViewSet):
    queryset = ReadTalkQuestion.objects.select_related("level")
    serializer_class = ReadTalkQuestionSerializer
    filterset_class = filters.ReadTalkQuestionFilter
    collection_name = "questions"


class RankingQuestionViewSet(_LevelQuestionViewSet):
    queryset = RankingQuestion.objects.select_related("level")
    serializer_class = RankingQuestionSerializer
    filterset_class = filters.RankingQuestionFilter
    collection_name = "questions"
