# PATH: apps/domains/payments/models.py
from django.conf import settings
from django.db import models
from django.db.models import Q

from apps.api.common.models import BaseModel


class QrPayment(BaseModel):
    """
    1회용 구매 QR 토큰.

    대상은 (type, course|unit|level) tagged union:
    type 에 해당하는 FK 하나만 채워진다 (CheckConstraint).
    used=False → True 전환은 services.qr_payment.redeem_qr_token 의 조건부 UPDATE 한 번으로만.
    """

    class TargetType(models.TextChoices):
        COURSE = "course", "Course"
        UNIT = "unit", "Unit"
        LEVEL = "level", "Level"

    type = models.CharField(max_length=10, choices=TargetType.choices)
    course = models.ForeignKey(
        "courses.Course",
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="qr_payments",
    )
    unit = models.ForeignKey(
        "exams.Unit",
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="qr_payments",
    )
    level = models.ForeignKey(
        "languages.Level",
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="qr_payments",
    )

    unique_code = models.CharField(max_length=64, unique=True)
    used = models.BooleanField(default=False)
    used_by = models.ForeignKey(
        "students.Student",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="redeemed_qr_payments",
    )
    used_at = models.DateTimeField(null=True, blank=True)
    issued_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="issued_qr_payments",
    )

    class Meta:
        db_table = "payments_qr_payment"
        ordering = ["-created_at"]
        constraints = [
            models.CheckConstraint(
                condition=(
                    Q(type="course", course__isnull=False, unit__isnull=True, level__isnull=True)
                    | Q(type="unit", course__isnull=True, unit__isnull=False, level__isnull=True)
                    | Q(type="level", course__isnull=True, unit__isnull=True, level__isnull=False)
                ),
                name="qr_payment_single_target",
            ),
        ]

    def __str__(self):
        return f"{self.type}:{self.entity_id} ({'used' if self.used else 'open'})"

    @property
    def entity_id(self):
        return getattr(self, f"{self.type}_id", None)
