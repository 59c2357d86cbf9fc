# PATH: apps/domains/courses/models.py
from django.db import models

from apps.api.common.models import BaseModel


class Course(BaseModel):
    """
    강의 코스.

    videos: [{"title": str, "url": str, "isFree": bool}] (최소 1개)
    (name, teacher, subject) 조합은 유일.
    """

    name = models.CharField(max_length=100)
    teacher = models.ForeignKey(
        "teachers.Teacher",
        on_delete=models.CASCADE,
        related_name="courses",
    )
    subject = models.ForeignKey(
        "exams.Subject",
        on_delete=models.PROTECT,
        related_name="courses",
    )
    institute_name = models.CharField(max_length=100)
    available = models.BooleanField(default=False)
    videos = models.JSONField(default=list)

    class Meta:
        db_table = "courses_course"
        ordering = ["-created_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["name", "teacher", "subject"],
                name="uniq_course_name_teacher_subject",
            ),
        ]

    def __str__(self):
        return self.name
