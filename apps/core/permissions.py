# apps/core/permissions.py

from rest_framework.permissions import BasePermission

from apps.api.common.exceptions import INSUFFICIENT_ROLE_MESSAGE
from apps.core.models import User


class RolePermission(BasePermission):
    """
    role 기반 Permission 베이스
    - 로그인 필수 (미인증이면 DRF 가 401 로 응답)
    - request.user.role 이 allowed_roles 안에 있어야 통과
    """

    allowed_roles: tuple = ()
    message = INSUFFICIENT_ROLE_MESSAGE

    def has_permission(self, request, view):
        user = request.user
        return bool(
            user
            and user.is_authenticated
            and user.role in self.allowed_roles
        )


class IsSuperAdmin(RolePermission):
    allowed_roles = (User.Role.SUPER_ADMIN,)


class IsSuperAdminOrAdmin(RolePermission):
    """대시보드 관리자 (콘텐츠 쓰기 권한)"""
    allowed_roles = (User.Role.SUPER_ADMIN, User.Role.ADMIN)


class IsContentAuthor(RolePermission):
    """문항 작성: 관리자 + 강사"""
    allowed_roles = (User.Role.SUPER_ADMIN, User.Role.ADMIN, User.Role.TEACHER)


class IsStudent(RolePermission):
    """
    학생 전용 Permission
    - role=student + Student 프로필 연결 필수
    """
    allowed_roles = (User.Role.STUDENT,)

    def has_permission(self, request, view):
        return super().has_permission(request, view) and hasattr(
            request.user, "student_profile"
        )


class IsTeacherOrStudent(RolePermission):
    allowed_roles = (User.Role.TEACHER, User.Role.STUDENT)


class IsAdminOrStudent(RolePermission):
    """강사/학생 목록 조회"""
    allowed_roles = (User.Role.SUPER_ADMIN, User.Role.ADMIN, User.Role.STUDENT)


class IsSuperAdminOrStudent(RolePermission):
    allowed_roles = (User.Role.SUPER_ADMIN, User.Role.STUDENT)

