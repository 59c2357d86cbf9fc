import pytest
from django.conf import settings

from apps.domains.students.models import Student, StudentExamRecord


def _register_body(png_file, **overrides):
    body = {
        "userName": "New Student",
        "phoneNumber": "0511111111",
        "password": "student-pass",
        "gender": "male",
        "role": "student",
        "age": 18,
        "profilePhoto": png_file("me.png"),
    }
    body.update(overrides)
    return body


@pytest.mark.django_db
class TestStudentRegister:
    def test_register_logs_in(self, api_client, png_file):
        res = api_client.post("/api/auth/register", _register_body(png_file), format="multipart")

        assert res.status_code == 201
        assert res.data["message"] == "Successfully Registered"
        assert settings.JWT_AUTH_COOKIE in res.cookies

        student = Student.objects.get(user__phone="0511111111")
        assert student.profile_photo.name.startswith("students/profile/")

        res = api_client.get("/api/ctrl/profile")
        assert res.status_code == 200
        assert res.data["id"] == student.id

    def test_photo_is_required(self, api_client, png_file):
        body = _register_body(png_file)
        del body["profilePhoto"]

        res = api_client.post("/api/auth/register", body, format="multipart")
        assert res.status_code == 400
        assert res.data["message"] == "Profile photo is required"

    def test_only_student_role(self, api_client, png_file):
        res = api_client.post(
            "/api/auth/register", _register_body(png_file, role="admin"), format="multipart",
        )
        assert res.status_code == 400
        assert res.data["message"] == "you are not allowed, just for students"

    @pytest.mark.parametrize("age", [14, 26])
    def test_age_range(self, api_client, png_file, age):
        res = api_client.post(
            "/api/auth/register", _register_body(png_file, age=age), format="multipart",
        )
        assert res.status_code == 400
        assert res.data["field"] == "age"

    def test_phone_length(self, api_client, png_file):
        res = api_client.post(
            "/api/auth/register", _register_body(png_file, phoneNumber="05111"), format="multipart",
        )
        assert res.status_code == 400
        assert res.data["field"] == "phoneNumber"


@pytest.mark.django_db
class TestStudentsDash:
    def test_list_and_filter(self, client_for, admin_user, make_user, student_user):
        make_user("student", name="Another Kid")

        client = client_for(admin_user)
        res = client.get("/api/ctrl/students/dash")
        assert res.data["documentCount"] == 2

        res = client.get("/api/ctrl/students/dash", {"userName": "another"})
        assert [s["userName"] for s in res.data["students"]] == ["Another Kid"]

    def test_sales_is_rejected(self, client_for, sales_user):
        assert client_for(sales_user).get("/api/ctrl/students/dash").status_code == 403


@pytest.mark.django_db
class TestExamRecords:
    URL = "/api/ctrl/student/exam_student"

    def test_append(self, client_for, student_user, catalog):
        body = {
            "exams": [
                {
                    "subjectId": catalog["subject"].id,
                    "mark": 85,
                    "numberOfQuestions": 20,
                    "units": [catalog["unit"].id, catalog["locked_unit"].id],
                },
            ],
        }
        res = client_for(student_user).put(self.URL, body, format="json")

        assert res.status_code == 200
        assert res.data["message"] == "Exam added successfully"
        assert res.data["student"]["exams"][0]["mark"] == 85

        record = StudentExamRecord.objects.get()
        assert record.student == student_user.student_profile
        assert record.units.count() == 2

    def test_unknown_subject(self, client_for, student_user, catalog):
        body = {"exams": [{"subjectId": 9999, "mark": 50, "numberOfQuestions": 5, "units": []}]}
        res = client_for(student_user).put(self.URL, body, format="json")
        assert res.status_code == 400
        assert res.data["message"] == "Subject with ID 9999 not found"

    def test_unknown_unit_leaves_no_records(self, client_for, student_user, catalog):
        body = {
            "exams": [
                {"subjectId": catalog["subject"].id, "mark": 50, "numberOfQuestions": 5, "units": [catalog["unit"].id]},
                {"subjectId": catalog["subject"].id, "mark": 60, "numberOfQuestions": 5, "units": [9999]},
            ],
        }
        res = client_for(student_user).put(self.URL, body, format="json")
        assert res.status_code == 400
        assert res.data["message"] == "Unit with ID 9999 not found"
        assert not StudentExamRecord.objects.exists()

    @pytest.mark.parametrize("mark", [-1, 101])
    def test_mark_range(self, client_for, student_user, catalog, mark):
        body = {"exams": [{"subjectId": catalog["subject"].id, "mark": mark, "numberOfQuestions": 5, "units": []}]}
        res = client_for(student_user).put(self.URL, body, format="json")
        assert res.status_code == 400

    def test_teacher_is_rejected(self, client_for, teacher_user):
        res = client_for(teacher_user).put(self.URL, {"exams": []}, format="json")
        assert res.status_code == 403
