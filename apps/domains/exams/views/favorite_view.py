# PATH: apps/domains/exams/views/favorite_view.py
from __future__ import annotations

from drf_yasg.utils import swagger_auto_schema
from rest_framework import serializers
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.api.common.exceptions import EntityNotFound
from apps.api.common.serializers import NamedRelatedField
from apps.core.models import User
from apps.core.permissions import IsTeacherOrStudent
from apps.domains.exams.models import Question
from apps.domains.exams.services.favorites import toggle_favorite


class FavoriteToggleSerializer(serializers.Serializer):
    questions = NamedRelatedField("Question", queryset=Question.objects.all())


class FavoriteToggleView(APIView):
    """
    POST /api/exam/fav   {questions: <question id>}
    같은 문항을 다시 보내면 즐겨찾기에서 제거된다.
    """

    permission_classes = [IsTeacherOrStudent]

    def _owner(self, user):
        attr = "student_profile" if user.role == User.Role.STUDENT else "teacher_profile"
        owner = getattr(user, attr, None)
        if owner is None:
            raise EntityNotFound("not found")
        return owner

    @swagger_auto_schema(request_body=FavoriteToggleSerializer)
    def post(self, request):
        serializer = FavoriteToggleSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        added = toggle_favorite(
            owner=self._owner(request.user),
            question=serializer.validated_data["questions"],
        )
        message = "Question added to favorites" if added else "Question removed from favorites"
        return Response({"message": message, "favorite": added})
