# PATH: apps/domains/teachers/serializers.py
from django.db import transaction
from rest_framework import serializers

from apps.api.common.serializers import NamedRelatedField
from apps.core.models import User
from apps.core.serializers import RegisterBaseSerializer
from apps.domains.exams.models import Subject
from apps.domains.exams.serializers.catalog import SubjectBriefSerializer

from .models import Teacher


class TeacherSerializer(serializers.ModelSerializer):
    """
    강사 목록/프로필 응답
    id = Teacher id (문항/시험/강좌의 teacher 참조), userId = 계정 id
    """

    userId = serializers.IntegerField(source="user_id", read_only=True)
    userName = serializers.CharField(source="user.name", read_only=True)
    phoneNumber = serializers.CharField(source="user.phone", read_only=True)
    gender = serializers.CharField(source="user.gender", read_only=True)
    age = serializers.IntegerField(source="user.age", read_only=True)
    role = serializers.CharField(source="user.role", read_only=True)
    subject = SubjectBriefSerializer(read_only=True)

    class Meta:
        model = Teacher
        fields = [
            "id",
            "userId",
            "userName",
            "phoneNumber",
            "gender",
            "age",
            "role",
            "subject",
        ]


class TeacherProfileSerializer(TeacherSerializer):
    favoriteQuestions = serializers.PrimaryKeyRelatedField(
        source="favorite_questions", many=True, read_only=True,
    )
    questions = serializers.PrimaryKeyRelatedField(many=True, read_only=True)

    class Meta(TeacherSerializer.Meta):
        fields = TeacherSerializer.Meta.fields + ["questions", "favoriteQuestions"]


class TeacherRegisterSerializer(RegisterBaseSerializer):
    """POST /api/auth/teacher/register (role 은 teacher 만)"""

    role_message = "not allowed, just for teachers"
    allowed_roles = (User.Role.TEACHER,)

    subject = NamedRelatedField("Subject", queryset=Subject.objects.all())

    @transaction.atomic
    def create(self, validated_data):
        subject = validated_data.pop("subject")
        user = self.create_user(validated_data)
        return Teacher.objects.create(user=user, subject=subject)
