# PATH: apps/domains/exams/serializers/comment.py
from rest_framework import serializers

from apps.api.common.serializers import AtLeastOneFieldMixin, NamedRelatedField
from apps.domains.exams.models import Comment, Question


class CommentSerializer(AtLeastOneFieldMixin, serializers.ModelSerializer):
    question = NamedRelatedField("Question", queryset=Question.objects.all())
    comment = serializers.CharField(source="text", max_length=2000)
    studentName = serializers.CharField(source="student.user.name", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Comment
        fields = [
            "id",
            "student",
            "studentName",
            "question",
            "comment",
            "createdAt",
            "updatedAt",
        ]
        read_only_fields = ["student"]


class CommentUpdateSerializer(AtLeastOneFieldMixin, serializers.ModelSerializer):
    """수정은 본문만 (question 이동 불가)"""

    comment = serializers.CharField(source="text", max_length=2000)

    class Meta:
        model = Comment
        fields = ["comment"]
