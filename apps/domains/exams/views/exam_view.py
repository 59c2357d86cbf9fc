# PATH: apps/domains/exams/views/exam_view.py
from __future__ import annotations

from drf_yasg.utils import swagger_auto_schema
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.api.common.exceptions import EntityNotFound
from apps.api.common.pagination import page_slice
from apps.core.models import User
from apps.core.permissions import IsStudent
from apps.domains.exams.models import Exam
from apps.domains.exams.serializers.exam import (
    ExamDetailSerializer,
    ExamGenerateSerializer,
    ExamSerializer,
)
from apps.domains.exams.services.exam_generator import ExamGenerator


def visible_exams(user):
    """
    시험 조회 범위
    - 학생: 본인이 만든 시험
    - 강사: 본인 문항으로 만든 시험
    - superAdmin / admin: 전체
    """
    qs = Exam.objects.select_related("teacher__user", "teacher__subject", "created_by")

    if user.role in (User.Role.SUPER_ADMIN, User.Role.ADMIN):
        return qs
    if user.role == User.Role.STUDENT and hasattr(user, "student_profile"):
        return qs.filter(created_by=user.student_profile)
    if user.role == User.Role.TEACHER and hasattr(user, "teacher_profile"):
        return qs.filter(teacher=user.teacher_profile)
    return qs.none()


class ExamGenerateView(APIView):
    """
    POST /api/exam/examgenerate   (student)
      {units: [id], teacher: id, difficulty, numberOfQuestions}
    GET  /api/exam/examgenerate   ?page=&perPage=
    """

    def get_permissions(self):
        if self.request.method == "POST":
            return [IsStudent()]
        return [IsAuthenticated()]

    def get(self, request):
        qs = visible_exams(request.user).prefetch_related("units", "questions")
        document_count = qs.count()
        data = ExamSerializer(page_slice(request, qs), many=True).data
        return Response({
            "exams": data,
            "totalCount": len(data),
            "documentCount": document_count,
        })

    @swagger_auto_schema(request_body=ExamGenerateSerializer)
    def post(self, request):
        serializer = ExamGenerateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        exam = ExamGenerator().generate(
            student=request.user.student_profile,
            unit_ids=data["units"],
            teacher_id=data["teacher"],
            difficulty=data["difficulty"],
            number_of_questions=data["numberOfQuestions"],
        )
        return Response(
            {"message": "Exam created successfully", "examId": exam.id},
            status=status.HTTP_201_CREATED,
        )


class ExamDetailView(APIView):
    """GET /api/exam/examgenerate/<id>"""

    permission_classes = [IsAuthenticated]

    def get(self, request, exam_id: int):
        exam = (
            visible_exams(request.user)
            .prefetch_related("units", "questions")
            .filter(id=int(exam_id))
            .first()
        )
        if exam is None:
            raise EntityNotFound("Exam not found")

        return Response({
            "message": "Exam retrieved successfully",
            "exam": ExamDetailSerializer(exam, context={"request": request}).data,
        })
