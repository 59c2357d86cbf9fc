# PATH: apps/domains/exams/views/question_view.py
from __future__ import annotations

from rest_framework.parsers import FormParser, JSONParser, MultiPartParser

from apps.api.common.exceptions import Conflict
from apps.api.common.viewsets import MessageModelViewSet
from apps.core.permissions import IsContentAuthor, IsSuperAdminOrAdmin
from apps.domains.exams.filters import QuestionFilter
from apps.domains.exams.models import Question
from apps.domains.exams.serializers.question import (
    QuestionSerializer,
    QuestionWriteSerializer,
)


class QuestionViewSet(MessageModelViewSet):
    """
    GET    /api/exam/question        ?questionText=&unitId=&teacherId=&questionType=&difficulty=
    POST   /api/exam/question        (multipart: photo, imageQ)
    PUT    /api/exam/question/<id>
    DELETE /api/exam/question/<id>

    - 생성: superAdmin / admin / teacher
    - 수정/삭제: superAdmin / admin
    - 문항 본문(questionText) 중복 금지
    """

    queryset = Question.objects.select_related("unit", "teacher").prefetch_related("comments")
    serializer_class = QuestionSerializer
    write_serializer_class = QuestionWriteSerializer
    filterset_class = QuestionFilter
    parser_classes = [JSONParser, MultiPartParser, FormParser]

    write_permission_classes = [IsSuperAdminOrAdmin]
    action_permission_classes = {"create": [IsContentAuthor]}

    collection_name = "questions"
    entity_label = "Question"
    created_message = "Question created successfully"
    updated_message = "Question updated successfully"

    def perform_create(self, serializer):
        if Question.objects.filter(text=serializer.validated_data["text"]).exists():
            raise Conflict("Question already exists")
        serializer.save()

    def perform_update(self, serializer):
        text = serializer.validated_data.get("text")
        if text and Question.objects.filter(text=text).exclude(pk=serializer.instance.pk).exists():
            raise Conflict("Question with this text already exists")
        serializer.save()

    def created_payload(self, instance):
        return {"question": QuestionSerializer(instance, context=self.get_serializer_context()).data}

    def updated_payload(self, instance):
        return {"question": QuestionSerializer(instance, context=self.get_serializer_context()).data}
