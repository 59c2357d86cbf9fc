# PATH: apps/domains/teachers/models.py
from django.conf import settings
from django.db import models

from apps.api.common.models import TimestampModel


class Teacher(TimestampModel):
    """
    강사 프로필 (User.role=teacher 와 1:1)

    - subject: 담당 과목 (과목 삭제 시 null 로 분리)
    - favorite_questions: 즐겨찾기 문항 (services.favorites 로 토글)
    """

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="teacher_profile",
    )
    subject = models.ForeignKey(
        "exams.Subject",
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name="teachers",
    )
    favorite_questions = models.ManyToManyField(
        "exams.Question",
        blank=True,
        related_name="favorited_by_teachers",
    )

    class Meta:
        ordering = ["-id"]

    def __str__(self):
        return self.user.name
