from django.db import models
from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator

from apps.api.common.models import TimestampModel


class Student(TimestampModel):
    # =========================
    # 로그인 사용자 연결
    # =========================
    # User.role=student 와 1:1, 계정 삭제 시 프로필도 삭제
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="student_profile",
    )

    profile_photo = models.ImageField(upload_to="students/profile/")

    # =========================
    # 구매 내역 (QR 결제로 적재)
    # =========================
    purchased_units = models.ManyToManyField(
        "exams.Unit",
        blank=True,
        related_name="purchased_by",
    )
    purchased_courses = models.ManyToManyField(
        "courses.Course",
        blank=True,
        related_name="purchased_by",
    )
    purchased_levels = models.ManyToManyField(
        "languages.Level",
        blank=True,
        related_name="purchased_by",
    )

    # =========================
    # 즐겨찾기 문항
    # =========================
    favorite_questions = models.ManyToManyField(
        "exams.Question",
        blank=True,
        related_name="favorited_by_students",
    )

    class Meta:
        ordering = ["-id"]

    def __str__(self):
        return self.user.name


class StudentExamRecord(TimestampModel):
    """
    학생 시험 이력.
    mark 는 외부 채점 결과를 그대로 받아 저장한다 (여기서 계산하지 않음).
    """

    student = models.ForeignKey(
        Student,
        on_delete=models.CASCADE,
        related_name="exam_records",
    )
    subject = models.ForeignKey(
        "exams.Subject",
        on_delete=models.CASCADE,
        related_name="exam_records",
    )
    mark = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(0), MaxValueValidator(100)],
    )
    number_of_questions = models.PositiveIntegerField()
    units = models.ManyToManyField("exams.Unit", related_name="exam_records")

    class Meta:
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.student_id} / {self.subject_id}: {self.mark}"
