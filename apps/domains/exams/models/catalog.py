# PATH: apps/domains/exams/models/catalog.py
from django.db import models

from apps.api.common.models import BaseModel


# ======================================================
# Class → Subject → Unit
# ======================================================
# 상위 FK 는 PROTECT: 삭제는 반드시 services.cascade 를 거친다.

class SchoolClass(BaseModel):
    """학년/반 단위 최상위 분류"""

    name = models.CharField(max_length=100)

    class Meta:
        db_table = "exams_class"
        ordering = ["-created_at"]

    def __str__(self):
        return self.name


class Subject(BaseModel):
    name = models.CharField(max_length=100)
    school_class = models.ForeignKey(
        SchoolClass,
        on_delete=models.PROTECT,
        related_name="subjects",
    )

    class Meta:
        db_table = "exams_subject"
        ordering = ["-created_at"]

    def __str__(self):
        return self.name


class Unit(BaseModel):
    """
    단원.
    available=False 인 단원은 구매(Student.purchased_units)한 학생만 시험 출제에 쓸 수 있다.
    """

    name = models.CharField(max_length=100)
    available = models.BooleanField(default=False)
    subject = models.ForeignKey(
        Subject,
        on_delete=models.PROTECT,
        related_name="units",
    )

    class Meta:
        db_table = "exams_unit"
        ordering = ["-created_at"]

    def __str__(self):
        return self.name
