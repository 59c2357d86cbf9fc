# PATH: apps/domains/exams/services/exam_generator.py
from __future__ import annotations

import logging
import random
from typing import Iterable, Optional

from django.db import transaction

from apps.api.common.exceptions import EntityNotFound, InsufficientData, PurchaseRequired
from apps.domains.exams.models import Exam, Question, Unit

logger = logging.getLogger(__name__)


class ExamGenerator:
    """
    학생용 랜덤 시험 생성.

    규칙:
    - 요청한 단원이 전부 존재해야 함 (404)
    - available=False 단원은 학생이 구매한 경우만 허용 (400)
    - 강사가 존재해야 함 (404)
    - 후보 = unit ∈ units AND teacher AND difficulty
    - 후보 < N 이면 실패, 아니면 비복원 균등 추출 N개
    - Exam 은 한 트랜잭션에서 생성되고 이후 수정 API 없음
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def _resolve_units(self, unit_ids: Iterable[int]) -> list[Unit]:
        wanted = list(dict.fromkeys(int(u) for u in unit_ids))
        units = list(Unit.objects.filter(id__in=wanted))
        if len(units) != len(wanted):
            raise EntityNotFound("One or more units not found")
        return units

    def _check_purchases(self, student, units: list[Unit]) -> None:
        locked = [u for u in units if not u.available]
        if not locked:
            return

        purchased = set(
            student.purchased_units.filter(id__in=[u.id for u in locked])
            .values_list("id", flat=True)
        )
        for unit in locked:
            if unit.id not in purchased:
                logger.warning(
                    "exam generate rejected: student=%s unit=%s not purchased",
                    student.id, unit.id,
                )
                raise PurchaseRequired(
                    f"Unit {unit.name} is not available. Please purchase it first."
                )

    def _resolve_teacher(self, teacher_id: int):
        from apps.domains.teachers.models import Teacher

        teacher = Teacher.objects.filter(id=teacher_id).first()
        if teacher is None:
            raise EntityNotFound("Teacher not found")
        return teacher

    def _sample(self, candidate_ids: list[int], n: int) -> list[int]:
        if len(candidate_ids) < n:
            raise InsufficientData(
                f"Not enough questions available. Found only {len(candidate_ids)}"
            )
        return self.rng.sample(candidate_ids, n)

    @transaction.atomic
    def generate(
        self,
        *,
        student,
        unit_ids: Iterable[int],
        teacher_id: int,
        difficulty: str,
        number_of_questions: int,
    ) -> Exam:
        units = self._resolve_units(unit_ids)
        self._check_purchases(student, units)
        teacher = self._resolve_teacher(teacher_id)

        candidate_ids = list(
            Question.objects.filter(
                unit__in=units,
                teacher=teacher,
                difficulty=difficulty,
            )
            .order_by("id")
            .values_list("id", flat=True)
        )
        picked = self._sample(candidate_ids, int(number_of_questions))

        exam = Exam.objects.create(
            teacher=teacher,
            difficulty=difficulty,
            number_of_questions=len(picked),
            created_by=student,
        )
        exam.units.set(units)
        exam.questions.set(picked)

        logger.info(
            "exam generated id=%s student=%s teacher=%s difficulty=%s n=%s pool=%s",
            exam.id, student.id, teacher.id, difficulty, len(picked), len(candidate_ids),
        )
        return exam
