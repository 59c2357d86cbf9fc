# PATH: apps/domains/exams/services/cascade.py
"""
Class → Subject → Unit → Question 계층 삭제.

상위 FK 가 전부 PROTECT 이므로 이 모듈을 거치지 않은 삭제는 ProtectedError 로 막힌다.
각 진입점은 하나의 트랜잭션: 중간 실패 시 전체 롤백.

순서:
- Unit    : Questions(+댓글) → Unit
- Subject : Units → Courses → 강사 담당과목 해제 → Subject
- Class   : Subjects → Class
"""
from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field

from django.db import transaction

from apps.domains.exams.models import SchoolClass, Subject, Unit, Question

logger = logging.getLogger(__name__)


@dataclass
class CascadeReport:
    deleted: Counter = field(default_factory=Counter)
    teachers_detached: int = 0

    def add(self, model_label: str, count: int) -> None:
        if count:
            self.deleted[model_label] += count

    def merge(self, per_model: dict) -> None:
        for label, count in per_model.items():
            self.add(label, count)

    def as_dict(self) -> dict:
        return {
            "deleted": dict(self.deleted),
            "teachersDetached": self.teachers_detached,
        }


def _delete_unit(unit: Unit, report: CascadeReport) -> None:
    _, per_model = Question.objects.filter(unit=unit).delete()
    report.merge(per_model)

    _, per_model = unit.delete()
    report.merge(per_model)


def _delete_subject(subject: Subject, report: CascadeReport) -> None:
    from apps.domains.courses.models import Course
    from apps.domains.teachers.models import Teacher

    for unit in subject.units.all():
        _delete_unit(unit, report)

    _, per_model = Course.objects.filter(subject=subject).delete()
    report.merge(per_model)

    report.teachers_detached += Teacher.objects.filter(subject=subject).update(subject=None)

    _, per_model = subject.delete()
    report.merge(per_model)


@transaction.atomic
def delete_unit(unit: Unit) -> CascadeReport:
    report = CascadeReport()
    unit_id = unit.pk
    _delete_unit(unit, report)
    logger.info("cascade delete unit=%s %s", unit_id, dict(report.deleted))
    return report


@transaction.atomic
def delete_subject(subject: Subject) -> CascadeReport:
    report = CascadeReport()
    subject_id = subject.pk
    _delete_subject(subject, report)
    logger.info(
        "cascade delete subject=%s %s teachers_detached=%s",
        subject_id, dict(report.deleted), report.teachers_detached,
    )
    return report


@transaction.atomic
def delete_class(school_class: SchoolClass) -> CascadeReport:
    report = CascadeReport()
    class_id = school_class.pk

    for subject in school_class.subjects.all():
        _delete_subject(subject, report)

    _, per_model = school_class.delete()
    report.merge(per_model)

    logger.info(
        "cascade delete class=%s %s teachers_detached=%s",
        class_id, dict(report.deleted), report.teachers_detached,
    )
    return report
