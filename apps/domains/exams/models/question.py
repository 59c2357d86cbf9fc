# PATH: apps/domains/exams/models/question.py
from django.db import models

from apps.api.common.models import BaseModel
from .catalog import Unit


class Question(BaseModel):
    """
    객관식 문항.

    requests: [{"requestText": str, "answers": [{"answerText": str, "isCorrect": bool} x4]}]
    - 보기 4개 고정
    - single: 정답 정확히 1개 / multiple: 정답 1개 이상
    (검증은 serializers.question 에서)
    """

    class Difficulty(models.TextChoices):
        HARD = "hard", "Hard"
        NORMAL = "normal", "Normal"
        EASY = "easy", "Easy"

    class QuestionType(models.TextChoices):
        SINGLE = "single", "Single"
        MULTIPLE = "multiple", "Multiple"

    class ExplanationType(models.TextChoices):
        TEXT = "text", "Text"
        VIDEO = "video", "Video"
        IMAGE = "image", "Image"

    unit = models.ForeignKey(
        Unit,
        on_delete=models.PROTECT,
        related_name="questions",
    )
    teacher = models.ForeignKey(
        "teachers.Teacher",
        on_delete=models.CASCADE,
        related_name="questions",
    )

    text = models.TextField()
    difficulty = models.CharField(max_length=10, choices=Difficulty.choices)
    question_type = models.CharField(max_length=10, choices=QuestionType.choices)

    photo = models.ImageField(upload_to="exams/questions/", null=True, blank=True)

    explanation_type = models.CharField(
        max_length=10,
        choices=ExplanationType.choices,
        default=ExplanationType.TEXT,
    )
    explanation_content = models.TextField(blank=True, default="")
    explanation_image = models.ImageField(
        upload_to="exams/explanations/",
        null=True,
        blank=True,
    )

    requests = models.JSONField(default=list)

    class Meta:
        db_table = "exams_question"
        ordering = ["-created_at"]
        indexes = [
            # 시험 생성 후보 조회 (unit, teacher, difficulty)
            models.Index(
                fields=["teacher", "difficulty", "unit"],
                name="exams_question_pool_idx",
            ),
        ]

    def __str__(self):
        return self.text[:50]


class Comment(BaseModel):
    """문항 댓글 (작성 학생만 수정/삭제)"""

    student = models.ForeignKey(
        "students.Student",
        on_delete=models.CASCADE,
        related_name="comments",
    )
    question = models.ForeignKey(
        Question,
        on_delete=models.CASCADE,
        related_name="comments",
    )
    text = models.TextField()

    class Meta:
        db_table = "exams_comment"
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.student_id} → Q{self.question_id}"
