import random

import pytest

from apps.api.common.exceptions import EntityNotFound, InsufficientData, PurchaseRequired
from apps.domains.exams.services.exam_generator import ExamGenerator


@pytest.fixture
def pool(catalog, teacher_user, make_question):
    teacher = teacher_user.teacher_profile
    questions = [make_question(catalog["unit"], teacher) for _ in range(3)]
    make_question(catalog["unit"], teacher, difficulty="hard")
    return questions


def _generate(student_user, teacher_user, unit_ids, n, difficulty="easy", seed=None):
    generator = ExamGenerator(rng=random.Random(seed) if seed is not None else None)
    return generator.generate(
        student=student_user.student_profile,
        unit_ids=unit_ids,
        teacher_id=teacher_user.teacher_profile.id,
        difficulty=difficulty,
        number_of_questions=n,
    )


@pytest.mark.django_db
class TestExamGenerator:
    def test_picks_distinct_matching_questions(self, pool, catalog, student_user, teacher_user):
        exam = _generate(student_user, teacher_user, [catalog["unit"].id], 3)

        picked = set(exam.questions.values_list("id", flat=True))
        assert picked == {q.id for q in pool}
        assert exam.number_of_questions == 3
        assert exam.created_by == student_user.student_profile

    def test_not_enough_candidates(self, pool, catalog, student_user, teacher_user):
        with pytest.raises(InsufficientData) as exc:
            _generate(student_user, teacher_user, [catalog["unit"].id], 4)
        assert str(exc.value.detail) == "Not enough questions available. Found only 3"

    def test_same_seed_same_pick(self, pool, catalog, student_user, teacher_user):
        first = _generate(student_user, teacher_user, [catalog["unit"].id], 2, seed=7)
        second = _generate(student_user, teacher_user, [catalog["unit"].id], 2, seed=7)
        assert set(first.questions.values_list("id", flat=True)) == set(
            second.questions.values_list("id", flat=True)
        )

    def test_duplicate_unit_ids_are_collapsed(self, pool, catalog, student_user, teacher_user):
        unit_id = catalog["unit"].id
        exam = _generate(student_user, teacher_user, [unit_id, unit_id], 1)
        assert list(exam.units.values_list("id", flat=True)) == [unit_id]

    def test_locked_unit_requires_purchase(self, catalog, student_user, teacher_user, make_question):
        locked = catalog["locked_unit"]
        make_question(locked, teacher_user.teacher_profile)

        with pytest.raises(PurchaseRequired) as exc:
            _generate(student_user, teacher_user, [locked.id], 1)
        assert str(exc.value.detail) == "Unit Calculus is not available. Please purchase it first."

        student_user.student_profile.purchased_units.add(locked)
        exam = _generate(student_user, teacher_user, [locked.id], 1)
        assert exam.questions.count() == 1

    def test_unknown_unit(self, catalog, student_user, teacher_user):
        with pytest.raises(EntityNotFound):
            _generate(student_user, teacher_user, [catalog["unit"].id, 9999], 1)

    def test_unknown_teacher(self, pool, catalog, student_user):
        with pytest.raises(EntityNotFound) as exc:
            ExamGenerator().generate(
                student=student_user.student_profile,
                unit_ids=[catalog["unit"].id],
                teacher_id=9999,
                difficulty="easy",
                number_of_questions=1,
            )
        assert str(exc.value.detail) == "Teacher not found"


@pytest.mark.django_db
class TestExamApi:
    def test_generate_and_read_back(self, client_for, pool, catalog, student_user, teacher_user):
        client = client_for(student_user)
        res = client.post(
            "/api/exam/examgenerate",
            {
                "units": [catalog["unit"].id],
                "teacher": teacher_user.teacher_profile.id,
                "difficulty": "easy",
                "numberOfQuestions": 2,
            },
            format="json",
        )
        assert res.status_code == 201
        exam_id = res.data["examId"]

        res = client.get(f"/api/exam/examgenerate/{exam_id}")
        assert res.status_code == 200
        assert len(res.data["exam"]["questions"]) == 2

        res = client.get("/api/exam/examgenerate")
        assert res.data["documentCount"] == 1

    def test_other_student_cannot_see_exam(
        self, client_for, make_user, pool, catalog, student_user, teacher_user,
    ):
        exam = _generate(student_user, teacher_user, [catalog["unit"].id], 1)
        other = make_user("student", name="Other")

        res = client_for(other).get(f"/api/exam/examgenerate/{exam.id}")
        assert res.status_code == 404
        assert res.data["message"] == "Exam not found"

    def test_locked_unit_message(self, client_for, catalog, student_user, teacher_user):
        res = client_for(student_user).post(
            "/api/exam/examgenerate",
            {
                "units": [catalog["locked_unit"].id],
                "teacher": teacher_user.teacher_profile.id,
                "difficulty": "easy",
                "numberOfQuestions": 1,
            },
            format="json",
        )
        assert res.status_code == 400
        assert res.data["message"] == "Unit Calculus is not available. Please purchase it first."

    def test_teacher_cannot_generate(self, client_for, catalog, teacher_user):
        res = client_for(teacher_user).post(
            "/api/exam/examgenerate",
            {"units": [catalog["unit"].id], "teacher": 1, "difficulty": "easy", "numberOfQuestions": 1},
            format="json",
        )
        assert res.status_code == 403


@pytest.mark.django_db
class TestExamAdmin:
    def test_exam_is_read_only_in_admin(self, rf, super_admin, pool, catalog, student_user, teacher_user):
        from django.contrib.admin.sites import site

        from apps.domains.exams.admin import ExamAdmin
        from apps.domains.exams.models import Exam

        exam = _generate(student_user, teacher_user, [catalog["unit"].id], 1)
        request = rf.get("/admin/exams/exam/")
        request.user = super_admin

        model_admin = ExamAdmin(Exam, site)
        assert model_admin.has_change_permission(request) is False
        assert model_admin.has_change_permission(request, exam) is False
