# PATH: apps/domains/exams/models/exam.py
from django.db import models

from apps.api.common.models import BaseModel
from .catalog import Unit
from .question import Question


class Exam(BaseModel):
    """
    학생이 생성한 랜덤 시험 (생성 후 불변).
    questions 개수 == number_of_questions 는 services.exam_generator 가 보장한다.
    """

    units = models.ManyToManyField(Unit, related_name="exams")
    teacher = models.ForeignKey(
        "teachers.Teacher",
        on_delete=models.CASCADE,
        related_name="exams",
    )
    difficulty = models.CharField(max_length=10, choices=Question.Difficulty.choices)
    number_of_questions = models.PositiveIntegerField()
    questions = models.ManyToManyField(Question, related_name="exams")
    created_by = models.ForeignKey(
        "students.Student",
        on_delete=models.CASCADE,
        related_name="generated_exams",
    )

    class Meta:
        db_table = "exams_exam"
        ordering = ["-created_at"]

    def __str__(self):
        return f"Exam#{self.pk} ({self.difficulty}, {self.number_of_questions}q)"
