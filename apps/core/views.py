# apps/core/views.py

import logging

from drf_yasg.utils import swagger_auto_schema
from rest_framework import generics, status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.api.common.auth_jwt import clear_jwt_cookie, issue_access_token, set_jwt_cookie
from apps.api.common.exceptions import EntityNotFound, NotAllowed
from apps.api.common.pagination import EnvelopeListMixin
from apps.core.filters import DashUserFilter
from apps.core.models import User
from apps.core.permissions import IsSuperAdmin, IsSuperAdminOrAdmin, IsSuperAdminOrStudent
from apps.core.serializers import (
    DashRegisterSerializer,
    LoginSerializer,
    ProfileUpdateSerializer,
    UserSerializer,
)
from apps.domains.students.serializers import StudentProfileSerializer
from apps.domains.teachers.serializers import TeacherProfileSerializer

logger = logging.getLogger(__name__)

PROFILE_NOT_FOUND = "Profile not found"


# --------------------------------------------------
# Auth: 대시보드
# --------------------------------------------------

class DashRegisterView(APIView):
    """POST /api/auth/dashadmin/register"""

    permission_classes = [IsSuperAdminOrAdmin]

    @swagger_auto_schema(request_body=DashRegisterSerializer)
    def post(self, request):
        serializer = DashRegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        logger.info("dashboard user registered id=%s role=%s by=%s", user.id, user.role, request.user.id)
        return Response(
            {"message": "Successfully Registered"},
            status=status.HTTP_201_CREATED,
        )


class DashLoginView(APIView):
    """
    POST /api/auth/dashadmin/login
    대시보드 계정 + 강사. 학생 계정은 /api/auth/login 사용.
    """

    permission_classes = [AllowAny]
    authentication_classes = []

    @swagger_auto_schema(request_body=LoginSerializer)
    def post(self, request):
        serializer = LoginSerializer(
            data=request.data,
            allowed_roles=User.DASHBOARD_ROLES + (User.Role.TEACHER,),
        )
        serializer.is_valid(raise_exception=True)

        response = Response(
            {"message": "Login Successfully"},
            status=status.HTTP_201_CREATED,
        )
        return set_jwt_cookie(response, issue_access_token(serializer.validated_data["user"]))


class LogoutView(APIView):
    """GET /api/auth/logout"""

    permission_classes = [AllowAny]
    authentication_classes = []

    @swagger_auto_schema(auto_schema=None)
    def get(self, request):
        return clear_jwt_cookie(Response({"message": "Successfully logged out"}))


# --------------------------------------------------
# Users (대시보드 계정 목록)
# --------------------------------------------------

class UsersDashView(EnvelopeListMixin, generics.ListAPIView):
    """GET /api/ctrl/users/dash   ?role=&userName=&page=&perPage="""

    queryset = User.objects.filter(role__in=User.DASHBOARD_ROLES).order_by("-date_joined")
    serializer_class = UserSerializer
    filterset_class = DashUserFilter
    permission_classes = [IsSuperAdmin]
    collection_name = "users"


# --------------------------------------------------
# Profile
# --------------------------------------------------

def serialize_profile(user, request) -> dict:
    """role 에 맞는 프로필 한 번 조회"""
    context = {"request": request}

    if user.role == User.Role.TEACHER:
        profile = getattr(user, "teacher_profile", None)
        if profile is None:
            raise EntityNotFound(PROFILE_NOT_FOUND, http_status=status.HTTP_400_BAD_REQUEST)
        return TeacherProfileSerializer(profile, context=context).data

    if user.role == User.Role.STUDENT:
        profile = getattr(user, "student_profile", None)
        if profile is None:
            raise EntityNotFound(PROFILE_NOT_FOUND, http_status=status.HTTP_400_BAD_REQUEST)
        return StudentProfileSerializer(profile, context=context).data

    return UserSerializer(user).data


class ProfileView(APIView):
    """GET /api/ctrl/users/profile (= /api/ctrl/profile)"""

    permission_classes = [IsAuthenticated]

    def get(self, request):
        return Response(serialize_profile(request.user, request))


class ProfileDetailView(APIView):
    """
    PUT    /api/ctrl/users/profile/<id>   superAdmin, 또는 학생 본인
    DELETE /api/ctrl/users/profile/<id>   superAdmin / admin
    id 는 계정(User) id
    """

    def get_permissions(self):
        if self.request.method == "DELETE":
            return [IsSuperAdminOrAdmin()]
        return [IsSuperAdminOrStudent()]

    def get_object(self, user_id):
        user = User.objects.filter(pk=user_id).first()
        if user is None:
            raise EntityNotFound(PROFILE_NOT_FOUND, http_status=status.HTTP_400_BAD_REQUEST)
        return user

    @swagger_auto_schema(request_body=ProfileUpdateSerializer)
    def put(self, request, user_id):
        if request.user.role == User.Role.STUDENT and request.user.pk != user_id:
            raise NotAllowed()

        user = self.get_object(user_id)
        serializer = ProfileUpdateSerializer(user, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response({"message": "Updated successfully"})

    def delete(self, request, user_id):
        user = self.get_object(user_id)
        user.delete()
        logger.info("profile deleted id=%s by=%s", user_id, request.user.id)
        return Response({"message": "Deleted successfully"})
