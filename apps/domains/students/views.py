# PATH: apps/domains/students/views.py

from drf_yasg.utils import swagger_auto_schema
from rest_framework import generics, status
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.api.common.auth_jwt import issue_access_token, set_jwt_cookie
from apps.api.common.pagination import EnvelopeListMixin
from apps.core.models import User
from apps.core.permissions import IsAdminOrStudent, IsStudent
from apps.core.serializers import LoginSerializer

from .filters import StudentFilter
from .models import Student
from .serializers import (
    ExamRecordAppendSerializer,
    StudentProfileSerializer,
    StudentRegisterSerializer,
    StudentSerializer,
)


# ======================================================
# Auth (학생 앱)
# ======================================================

class StudentRegisterView(APIView):
    """
    POST /api/auth/register  (multipart)
    가입 즉시 jwtToken 쿠키 발급
    """

    permission_classes = [AllowAny]
    authentication_classes = []
    parser_classes = [MultiPartParser, FormParser, JSONParser]

    @swagger_auto_schema(request_body=StudentRegisterSerializer)
    def post(self, request):
        serializer = StudentRegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        student = serializer.save()

        response = Response(
            {"message": "Successfully Registered"},
            status=status.HTTP_201_CREATED,
        )
        return set_jwt_cookie(response, issue_access_token(student.user))


class StudentLoginView(APIView):
    """POST /api/auth/login  (role=student 계정만)"""

    permission_classes = [AllowAny]
    authentication_classes = []

    @swagger_auto_schema(request_body=LoginSerializer)
    def post(self, request):
        serializer = LoginSerializer(
            data=request.data,
            allowed_roles=(User.Role.STUDENT,),
        )
        serializer.is_valid(raise_exception=True)

        response = Response(
            {"message": "Login Successfuly"},
            status=status.HTTP_201_CREATED,
        )
        return set_jwt_cookie(response, issue_access_token(serializer.validated_data["user"]))


# ======================================================
# Student
# ======================================================

class StudentsDashView(EnvelopeListMixin, generics.ListAPIView):
    """GET /api/ctrl/students/dash   ?userName=&page=&perPage="""

    queryset = Student.objects.select_related("user").order_by("-created_at")
    serializer_class = StudentSerializer
    filterset_class = StudentFilter
    permission_classes = [IsAdminOrStudent]
    collection_name = "students"


class ExamRecordView(APIView):
    """PUT /api/ctrl/student/exam_student  (본인 시험 이력 추가)"""

    permission_classes = [IsStudent]

    @swagger_auto_schema(request_body=ExamRecordAppendSerializer)
    def put(self, request):
        student = request.user.student_profile

        serializer = ExamRecordAppendSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        serializer.append(student)

        return Response({
            "message": "Exam added successfully",
            "student": StudentProfileSerializer(student, context={"request": request}).data,
        })
