# PATH: apps/domains/courses/serializers.py
from rest_framework import serializers

from apps.api.common.serializers import AtLeastOneFieldMixin, NamedRelatedField
from apps.domains.exams.models import Subject
from apps.domains.exams.serializers.catalog import SubjectBriefSerializer
from apps.domains.teachers.models import Teacher
from apps.domains.teachers.serializers import TeacherSerializer

from .models import Course


class VideoSerializer(serializers.Serializer):
    title = serializers.CharField(min_length=2, max_length=200)
    url = serializers.URLField()
    isFree = serializers.BooleanField(default=False)


class CourseWriteSerializer(AtLeastOneFieldMixin, serializers.ModelSerializer):
    """
    생성: videos 최소 1개
    (name, teacher, subject) 중복은 view 에서 Conflict 로 거부
    """

    courseName = serializers.CharField(source="name", min_length=2, max_length=100)
    teacher = NamedRelatedField("Teacher", queryset=Teacher.objects.all())
    subject = NamedRelatedField("Subject", queryset=Subject.objects.all())
    instituteName = serializers.CharField(source="institute_name", min_length=2, max_length=100)
    available = serializers.BooleanField(required=False)
    videos = serializers.ListField(child=VideoSerializer(), allow_empty=False)

    class Meta:
        model = Course
        fields = ["courseName", "teacher", "subject", "instituteName", "available", "videos"]
        # UniqueConstraint 기본 validator 대신 view 의 중복 메시지 사용
        validators = []


class CourseSerializer(serializers.ModelSerializer):
    courseName = serializers.CharField(source="name")
    teacher = TeacherSerializer()
    subject = SubjectBriefSerializer()
    instituteName = serializers.CharField(source="institute_name")
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")

    class Meta:
        model = Course
        fields = [
            "id",
            "courseName",
            "teacher",
            "subject",
            "instituteName",
            "available",
            "videos",
            "createdAt",
            "updatedAt",
        ]
        read_only_fields = fields
