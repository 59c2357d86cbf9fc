# PATH: apps/domains/languages/models.py
from django.db import models

from apps.api.common.models import BaseModel


# ======================================================
# Language → Level
# ======================================================

class Language(BaseModel):
    name = models.CharField(max_length=100)

    class Meta:
        db_table = "languages_language"
        ordering = ["-created_at"]

    def __str__(self):
        return self.name


class Level(BaseModel):
    """언어별 레벨. available=False 레벨은 QR 구매 대상."""

    language = models.ForeignKey(
        Language,
        on_delete=models.CASCADE,
        related_name="levels",
    )
    level_number = models.PositiveIntegerField()
    available = models.BooleanField(default=False)

    class Meta:
        db_table = "languages_level"
        ordering = ["language_id", "level_number"]
        constraints = [
            models.UniqueConstraint(
                fields=["language", "level_number"],
                name="uniq_level_language_number",
            ),
        ]

    def __str__(self):
        return f"{self.language} L{self.level_number}"


# ======================================================
# Level questions (5종)
# ======================================================

class LevelQuestion(BaseModel):
    """레벨 문항 공통: level + 본문"""

    level = models.ForeignKey(
        Level,
        on_delete=models.CASCADE,
        related_name="%(class)s_set",
    )
    text = models.TextField()

    class Meta:
        abstract = True
        ordering = ["-created_at"]

    def __str__(self):
        return self.text[:50]


class ChoiceLevelQuestion(LevelQuestion):
    """보기 4개 + 정답을 갖는 문항 (빈칸/뜻)"""

    word = models.CharField(max_length=100, blank=True, default="")
    correct = models.CharField(max_length=100)
    first_answer = models.CharField(max_length=100)
    second_answer = models.CharField(max_length=100)
    third_answer = models.CharField(max_length=100)
    forth_answer = models.CharField(max_length=100)

    class Meta(LevelQuestion.Meta):
        abstract = True


class EmptyQuestion(ChoiceLevelQuestion):
    """빈칸 채우기"""

    class Meta(ChoiceLevelQuestion.Meta):
        db_table = "languages_empty_question"


class MeanQuestion(ChoiceLevelQuestion):
    """단어 뜻 고르기"""

    class Meta(ChoiceLevelQuestion.Meta):
        db_table = "languages_mean_question"


class ListenQuestion(LevelQuestion):
    class Meta(LevelQuestion.Meta):
        db_table = "languages_listen_question"


class ReadTalkQuestion(LevelQuestion):
    class Meta(LevelQuestion.Meta):
        db_table = "languages_read_talk_question"


class RankingQuestion(LevelQuestion):
    class Meta(LevelQuestion.Meta):
        db_table = "languages_ranking_question"
