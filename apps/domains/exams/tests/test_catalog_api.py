import pytest
from django.db.models import ProtectedError

from apps.api.common.exceptions import INSUFFICIENT_ROLE_MESSAGE, NO_TOKEN_MESSAGE
from apps.domains.exams.models import Comment, Question, SchoolClass, Subject, Unit


@pytest.mark.django_db
class TestSchoolClassApi:
    def test_create_and_duplicate(self, client_for, admin_user):
        client = client_for(admin_user)

        res = client.post("/api/exam/class", {"className": "Grade 10"}, format="json")
        assert res.status_code == 201
        assert res.data["message"] == "Created Successfully"

        res = client.post("/api/exam/class", {"className": "Grade 10"}, format="json")
        assert res.status_code == 400
        assert res.data["message"] == "This Class Already Exist"

    def test_list_envelope_with_paging(self, client_for, student_user):
        for i in range(5):
            SchoolClass.objects.create(name=f"Grade {i}")

        res = client_for(student_user).get("/api/exam/class", {"page": 2, "perPage": 2})
        assert res.status_code == 200
        assert res.data["totalCount"] == 2
        assert res.data["documentCount"] == 5
        assert len(res.data["classes"]) == 2

    def test_list_filters_by_name(self, client_for, student_user):
        SchoolClass.objects.create(name="Grade 10")
        SchoolClass.objects.create(name="Kindergarten")

        res = client_for(student_user).get("/api/exam/class", {"className": "grade"})
        assert [c["className"] for c in res.data["classes"]] == ["Grade 10"]

    def test_anonymous_gets_401(self, api_client):
        res = api_client.get("/api/exam/class")
        assert res.status_code == 401
        assert res.data["message"] == NO_TOKEN_MESSAGE

    def test_student_cannot_write(self, client_for, student_user):
        res = client_for(student_user).post("/api/exam/class", {"className": "Grade 9"}, format="json")
        assert res.status_code == 403
        assert res.data["message"] == INSUFFICIENT_ROLE_MESSAGE

    def test_update_requires_a_field(self, client_for, admin_user, catalog):
        res = client_for(admin_user).put(f"/api/exam/class/{catalog['class'].id}", {}, format="json")
        assert res.status_code == 400
        assert res.data["message"] == "At least one field must be provided."

    def test_update_missing_id(self, client_for, admin_user):
        res = client_for(admin_user).put("/api/exam/class/9999", {"className": "Nope"}, format="json")
        assert res.status_code == 400
        assert res.data["message"] == "No Class"

    def test_patch_not_allowed(self, client_for, admin_user, catalog):
        res = client_for(admin_user).patch(
            f"/api/exam/class/{catalog['class'].id}", {"className": "X"}, format="json",
        )
        assert res.status_code == 405


@pytest.mark.django_db
class TestSubjectAndUnitApi:
    def test_subject_with_unknown_class(self, client_for, admin_user):
        res = client_for(admin_user).post(
            "/api/exam/subject", {"subjectName": "Physics", "class": 9999}, format="json",
        )
        assert res.status_code == 400
        assert res.data["message"] == "Class not found"

    def test_unit_duplicate_name(self, client_for, admin_user, catalog):
        res = client_for(admin_user).post(
            "/api/exam/unit",
            {"unitName": "Algebra", "subject": catalog["subject"].id},
            format="json",
        )
        assert res.status_code == 400
        assert res.data["message"] == "This Unit Already Exist"

    def test_unit_filter_by_subject(self, client_for, student_user, catalog):
        res = client_for(student_user).get("/api/exam/unit", {"subjectId": catalog["subject"].id})
        assert res.data["documentCount"] == 2

    def test_unit_delete_is_super_admin_only(self, client_for, admin_user, super_admin, catalog):
        url = f"/api/exam/unit/{catalog['unit'].id}"

        assert client_for(admin_user).delete(url).status_code == 403

        res = client_for(super_admin).delete(url)
        assert res.status_code == 200
        assert not Unit.objects.filter(id=catalog["unit"].id).exists()


@pytest.mark.django_db
class TestCascadeDelete:
    def test_direct_delete_is_protected(self, catalog):
        with pytest.raises(ProtectedError):
            catalog["class"].delete()

    def test_class_delete_removes_whole_tree(
        self, client_for, admin_user, catalog, teacher_user, student_user, make_question,
    ):
        from apps.domains.courses.models import Course

        teacher = teacher_user.teacher_profile
        question = make_question(catalog["unit"], teacher)
        make_question(catalog["locked_unit"], teacher)
        Comment.objects.create(student=student_user.student_profile, question=question, text="hi")
        Course.objects.create(
            name="Math 101",
            teacher=teacher,
            subject=catalog["subject"],
            institute_name="Center",
            videos=[{"title": "intro", "url": "https://example.com/1", "isFree": True}],
        )

        res = client_for(admin_user).delete(f"/api/exam/class/{catalog['class'].id}")

        assert res.status_code == 200
        assert res.data["teachersDetached"] == 1
        assert not SchoolClass.objects.exists()
        assert not Subject.objects.exists()
        assert not Unit.objects.exists()
        assert not Question.objects.exists()
        assert not Comment.objects.exists()
        assert not Course.objects.exists()

        teacher.refresh_from_db()
        assert teacher.subject is None

    def test_unit_delete_keeps_siblings(self, catalog, teacher_user, make_question):
        from apps.domains.exams.services import cascade

        teacher = teacher_user.teacher_profile
        make_question(catalog["unit"], teacher)
        kept = make_question(catalog["locked_unit"], teacher)

        report = cascade.delete_unit(catalog["unit"])

        assert report.deleted["exams.Unit"] == 1
        assert list(Question.objects.all()) == [kept]
        assert Subject.objects.filter(id=catalog["subject"].id).exists()

    def test_admin_delete_uses_cascade(self, catalog, teacher_user, make_question):
        from django.contrib.admin.sites import site

        from apps.domains.exams.admin import SchoolClassAdmin

        make_question(catalog["unit"], teacher_user.teacher_profile)

        SchoolClassAdmin(SchoolClass, site).delete_model(None, catalog["class"])

        assert not SchoolClass.objects.exists()
        assert not Question.objects.exists()


@pytest.mark.django_db
class TestQuestionApi:
    def _multipart(self, catalog, teacher_user, build_requests, **extra):
        import json

        data = {
            "unit": catalog["unit"].id,
            "teacher": teacher_user.teacher_profile.id,
            "questionText": "What is 3 x 3?",
            "difficulty": "easy",
            "questionType": "single",
            "explanation": json.dumps({"type": "text", "content": "times table"}),
            "requests": json.dumps(build_requests("single")),
        }
        data.update(extra)
        return data

    def test_teacher_creates_with_photo(self, client_for, teacher_user, catalog, build_requests, png_file):
        data = self._multipart(catalog, teacher_user, build_requests, photo=png_file("q.png"))

        res = client_for(teacher_user).post("/api/exam/question", data, format="multipart")

        assert res.status_code == 201
        assert res.data["message"] == "Question created successfully"
        assert res.data["question"]["questionText"] == "What is 3 x 3?"
        assert res.data["question"]["photo"]

    def test_duplicate_text_rejected(
        self, client_for, teacher_user, catalog, build_requests, make_question,
    ):
        existing = make_question(catalog["unit"], teacher_user.teacher_profile)
        data = self._multipart(catalog, teacher_user, build_requests, questionText=existing.text)

        res = client_for(teacher_user).post("/api/exam/question", data, format="multipart")

        assert res.status_code == 400
        assert res.data["message"] == "Question already exists"

    def test_teacher_cannot_update(self, client_for, teacher_user, catalog, make_question):
        question = make_question(catalog["unit"], teacher_user.teacher_profile)
        res = client_for(teacher_user).put(
            f"/api/exam/question/{question.id}", {"difficulty": "hard"}, format="json",
        )
        assert res.status_code == 403

    def test_admin_updates_difficulty(self, client_for, admin_user, teacher_user, catalog, make_question):
        question = make_question(catalog["unit"], teacher_user.teacher_profile)
        res = client_for(admin_user).put(
            f"/api/exam/question/{question.id}", {"difficulty": "hard"}, format="json",
        )
        assert res.status_code == 200
        assert res.data["question"]["difficulty"] == "hard"

    def test_filter_by_difficulty(self, client_for, student_user, teacher_user, catalog, make_question):
        teacher = teacher_user.teacher_profile
        make_question(catalog["unit"], teacher, difficulty="easy")
        make_question(catalog["unit"], teacher, difficulty="hard")

        res = client_for(student_user).get("/api/exam/question", {"difficulty": "hard"})
        assert res.data["documentCount"] == 1
        assert res.data["questions"][0]["difficulty"] == "hard"
