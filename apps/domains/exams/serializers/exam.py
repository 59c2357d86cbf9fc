# PATH: apps/domains/exams/serializers/exam.py
from rest_framework import serializers

from apps.domains.exams.models import Exam, Question
from .catalog import UnitBriefSerializer
from .question import QuestionSerializer


class ExamGenerateSerializer(serializers.Serializer):
    units = serializers.ListField(
        child=serializers.IntegerField(min_value=1),
        allow_empty=False,
        error_messages={"empty": "At least one unit is required"},
    )
    teacher = serializers.IntegerField(min_value=1)
    difficulty = serializers.ChoiceField(choices=Question.Difficulty.choices)
    numberOfQuestions = serializers.IntegerField(min_value=1, max_value=200)


class ExamSerializer(serializers.ModelSerializer):
    numberOfQuestions = serializers.IntegerField(source="number_of_questions")
    createdBy = serializers.PrimaryKeyRelatedField(source="created_by", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at")

    class Meta:
        model = Exam
        fields = [
            "id",
            "units",
            "teacher",
            "difficulty",
            "numberOfQuestions",
            "questions",
            "createdBy",
            "createdAt",
        ]
        read_only_fields = fields


class ExamDetailSerializer(ExamSerializer):
    """단건 조회: 문항/단원/강사 populate"""

    units = UnitBriefSerializer(many=True, read_only=True)
    questions = QuestionSerializer(many=True, read_only=True)
    teacher = serializers.SerializerMethodField()

    def get_teacher(self, obj):
        teacher = obj.teacher
        subject = teacher.subject
        return {
            "id": teacher.id,
            "userName": teacher.user.name,
            "subject": (
                {"id": subject.id, "subjectName": subject.name} if subject else None
            ),
        }
