# PATH: apps/domains/exams/serializers/question.py
from __future__ import annotations

from rest_framework import serializers

from apps.api.common.serializers import (
    AtLeastOneFieldMixin,
    NamedRelatedField,
    decode_json_fields,
)
from apps.domains.exams.models import Question, Unit
from apps.domains.teachers.models import Teacher

ANSWERS_PER_REQUEST = 4

EXPLANATION_IMAGE_REQUIRED = "Explanation image is required when explanation type is 'image'."


# ======================================================
# Nested: requests / answers / explanation
# ======================================================

class AnswerSerializer(serializers.Serializer):
    answerText = serializers.CharField(max_length=300)
    isCorrect = serializers.BooleanField()


class RequestItemSerializer(serializers.Serializer):
    requestText = serializers.CharField(max_length=500)
    answers = AnswerSerializer(many=True)

    def validate_answers(self, value):
        if len(value) != ANSWERS_PER_REQUEST:
            raise serializers.ValidationError(
                f"answers must contain exactly {ANSWERS_PER_REQUEST} items"
            )
        return value


class ExplanationSerializer(serializers.Serializer):
    type = serializers.ChoiceField(
        source="explanation_type",
        choices=Question.ExplanationType.choices,
    )
    content = serializers.CharField(
        source="explanation_content",
        required=False,
        allow_blank=True,
        max_length=5000,
    )


def check_answer_set(question_type: str, requests: list) -> None:
    """
    single  : 요청마다 정답 정확히 1개
    multiple: 요청마다 정답 1개 이상
    """
    for index, item in enumerate(requests):
        correct = sum(1 for a in item["answers"] if a["isCorrect"])
        if question_type == Question.QuestionType.SINGLE and correct != 1:
            raise serializers.ValidationError({
                "requests": [f"requests[{index}]: single question must have exactly one correct answer"],
            })
        if question_type == Question.QuestionType.MULTIPLE and correct < 1:
            raise serializers.ValidationError({
                "requests": [f"requests[{index}]: multiple question must have at least one correct answer"],
            })


# ======================================================
# Write
# ======================================================

class QuestionWriteSerializer(AtLeastOneFieldMixin, serializers.Serializer):
    """
    생성/수정 공용 (multipart 허용).
    photo / imageQ 는 파일 필드, requests / explanation 은 JSON 문자열이어도 된다.
    """

    unit = NamedRelatedField("Unit", queryset=Unit.objects.all())
    teacher = NamedRelatedField("Teacher", queryset=Teacher.objects.all())
    questionText = serializers.CharField(source="text", max_length=1000)
    difficulty = serializers.ChoiceField(choices=Question.Difficulty.choices)
    questionType = serializers.ChoiceField(
        source="question_type",
        choices=Question.QuestionType.choices,
    )
    explanation = ExplanationSerializer(source="*")
    requests = RequestItemSerializer(many=True, allow_empty=False)
    photo = serializers.ImageField(required=False, allow_null=True)
    imageQ = serializers.ImageField(
        source="explanation_image",
        required=False,
        allow_null=True,
    )

    def to_internal_value(self, data):
        data = decode_json_fields(data, ("requests", "explanation"))
        return super().to_internal_value(data)

    def _current(self, attrs, key):
        if key in attrs:
            return attrs[key]
        return getattr(self.instance, key, None) if self.instance is not None else None

    def validate(self, attrs):
        attrs = super().validate(attrs)

        # 정답 규칙: 수정 시 한쪽만 와도 기존 값과 맞춰 본다
        if "requests" in attrs or "question_type" in attrs:
            check_answer_set(
                self._current(attrs, "question_type"),
                self._current(attrs, "requests") or [],
            )

        # 해설 규칙: type / content 중 하나만 와도 기존 값과 합쳐 검사
        if "explanation_type" in attrs or "explanation_content" in attrs:
            explanation_type = self._current(attrs, "explanation_type")
            if explanation_type == Question.ExplanationType.IMAGE:
                if not self._current(attrs, "explanation_image"):
                    raise serializers.ValidationError({"imageQ": [EXPLANATION_IMAGE_REQUIRED]})
            elif not (self._current(attrs, "explanation_content") or "").strip():
                raise serializers.ValidationError({
                    "explanation": ["explanation content is required"],
                })
        return attrs

    def create(self, validated_data):
        return Question.objects.create(**validated_data)

    def update(self, instance, validated_data):
        for key, value in validated_data.items():
            setattr(instance, key, value)
        instance.save()
        return instance


# ======================================================
# Read
# ======================================================

class QuestionSerializer(serializers.ModelSerializer):
    questionText = serializers.CharField(source="text")
    questionType = serializers.CharField(source="question_type")
    explanation = serializers.SerializerMethodField()
    commentCount = serializers.IntegerField(source="comments.count", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")

    class Meta:
        model = Question
        fields = [
            "id",
            "unit",
            "teacher",
            "questionText",
            "difficulty",
            "questionType",
            "photo",
            "explanation",
            "requests",
            "commentCount",
            "createdAt",
            "updatedAt",
        ]
        read_only_fields = fields

    def get_explanation(self, obj):
        image = None
        if obj.explanation_image:
            request = self.context.get("request")
            image = obj.explanation_image.url
            if request is not None:
                image = request.build_absolute_uri(image)
        return {
            "type": obj.explanation_type,
            "content": obj.explanation_content,
            "image": image,
        }
