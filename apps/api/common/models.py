# PATH: apps/api/common/models.py
from django.db import models


class TimestampModel(models.Model):
    """
    created_at / updated_at 자동 기록 추상 모델.
    목록 API 정렬(-created_at)의 기준 필드.
    """
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class BaseModel(TimestampModel):
    """도메인 엔티티 공통 베이스 (타임스탬프 포함)"""

    class Meta:
        abstract = True
