# PATH: apps/domains/languages/serializers.py
from rest_framework import serializers

from apps.api.common.serializers import AtLeastOneFieldMixin, NamedRelatedField

from .models import (
    EmptyQuestion,
    Language,
    Level,
    ListenQuestion,
    MeanQuestion,
    RankingQuestion,
    ReadTalkQuestion,
)


# ======================================================
# Language / Level
# ======================================================

class LevelBriefSerializer(serializers.ModelSerializer):
    levelNumber = serializers.IntegerField(source="level_number")

    class Meta:
        model = Level
        fields = ["id", "levelNumber", "available"]


class LanguageSerializer(AtLeastOneFieldMixin, serializers.ModelSerializer):
    languageName = serializers.CharField(source="name", max_length=100)
    levels = LevelBriefSerializer(many=True, read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Language
        fields = ["id", "languageName", "levels", "createdAt"]


class LevelSerializer(AtLeastOneFieldMixin, serializers.ModelSerializer):
    language = NamedRelatedField("Language", queryset=Language.objects.all())
    levelNumber = serializers.IntegerField(source="level_number", min_value=0)
    available = serializers.BooleanField()
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Level
        fields = ["id", "language", "levelNumber", "available", "createdAt"]
        # (language, levelNumber) 중복은 view 에서 "This Level Already Exist"
        validators = []


# ======================================================
# Level questions
# ======================================================

class LevelQuestionSerializer(AtLeastOneFieldMixin, serializers.ModelSerializer):
    level = NamedRelatedField("Level", queryset=Level.objects.all())
    text = serializers.CharField()
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        fields = ["id", "level", "text", "createdAt"]


class ChoiceLevelQuestionSerializer(LevelQuestionSerializer):
    """보기 4개 + 정답"""

    word = serializers.CharField(max_length=100, required=False, allow_blank=True)
    correct = serializers.CharField(max_length=100)
    firstAnswer = serializers.CharField(source="first_answer", max_length=100)
    secondAnswer = serializers.CharField(source="second_answer", max_length=100)
    thirdAnswer = serializers.CharField(source="third_answer", max_length=100)
    forthAnswer = serializers.CharField(source="forth_answer", max_length=100)

    class Meta:
        fields = LevelQuestionSerializer.Meta.fields + [
            "word",
            "correct",
            "firstAnswer",
            "secondAnswer",
            "thirdAnswer",
            "forthAnswer",
        ]


class EmptyQuestionSerializer(ChoiceLevelQuestionSerializer):
    # 빈칸 문항은 word 필수
    word = serializers.CharField(max_length=100)

    class Meta(ChoiceLevelQuestionSerializer.Meta):
        model = EmptyQuestion


class MeanQuestionSerializer(ChoiceLevelQuestionSerializer):
    class Meta(ChoiceLevelQuestionSerializer.Meta):
        model = MeanQuestion


class ListenQuestionSerializer(LevelQuestionSerializer):
    class Meta(LevelQuestionSerializer.Meta):
        model = ListenQuestion


class ReadTalkQuestionSerializer(LevelQuestionSerializer):
    class Meta(LevelQuestionSerializer.Meta):
        model = ReadTalkQuestion


class RankingQuestionSerializer(LevelQuestionSerializer):
    class Meta(LevelQuestionSerializer.Meta):
        model = RankingQuestion
