# PATH: apps/domains/payments/services/targets.py
"""
구매 대상 tagged union: Course(id) | Unit(id) | Level(id)

경계(URL / QR payload)에서 한 번 파싱해 두면 이후 로직은
모델 클래스와 학생 구매 목록 필드를 kind 로 분기하지 않고 꺼내 쓴다.
"""
from __future__ import annotations

from dataclasses import dataclass

from django.apps import apps

from apps.api.common.exceptions import DomainError, EntityNotFound
from apps.domains.payments.models import QrPayment


class InvalidTargetType(DomainError):
    default_detail = "Invalid type. Must be 'course' or 'unit' or 'level'."
    default_code = "invalid_type"


# BigAutoField 범위
MAX_ENTITY_ID = 2 ** 63 - 1

# kind → (모델, Student 구매 목록 필드)
_TARGETS = {
    QrPayment.TargetType.COURSE.value: ("courses.Course", "purchased_courses"),
    QrPayment.TargetType.UNIT.value: ("exams.Unit", "purchased_units"),
    QrPayment.TargetType.LEVEL.value: ("languages.Level", "purchased_levels"),
}


@dataclass(frozen=True)
class PurchaseTarget:
    kind: str
    entity_id: int

    @classmethod
    def parse(cls, kind, entity_id) -> "PurchaseTarget":
        if kind not in QrPayment.TargetType.values:
            raise InvalidTargetType()
        try:
            entity_id = int(entity_id)
        except (TypeError, ValueError):
            raise EntityNotFound(f"{kind} not found.")
        if not 1 <= entity_id <= MAX_ENTITY_ID:
            raise EntityNotFound(f"{kind} not found.")
        return cls(kind=str(kind), entity_id=entity_id)

    @property
    def model(self):
        return apps.get_model(_TARGETS[self.kind][0])

    @property
    def entitlement_field(self) -> str:
        return _TARGETS[self.kind][1]

    @property
    def label(self) -> str:
        return self.kind.capitalize()

    @property
    def fk_filter(self) -> dict:
        """QrPayment 조회용 {<kind>_id: entity_id}"""
        return {f"{self.kind}_id": self.entity_id}

    def resolve(self):
        entity = self.model.objects.filter(pk=self.entity_id).first()
        if entity is None:
            raise EntityNotFound(f"{self.kind} not found.")
        return entity
