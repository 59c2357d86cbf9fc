# PATH: conftest.py
"""
공용 pytest 픽스처

- api_client / client_for(user): DRF APIClient (force_authenticate)
- make_user: role 별 계정 생성 (teacher/student 는 프로필까지)
- catalog: Class → Subject → Unit(공개/잠금) 한 세트
- make_question: 정답 규칙을 만족하는 문항
"""
import io
import itertools

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile
from PIL import Image
from rest_framework.test import APIClient

from apps.core.models import User

_phone_seq = itertools.count(1)

DEFAULT_PASSWORD = "password123"


def next_phone() -> str:
    return f"05{next(_phone_seq):08d}"


def make_png(name="photo.png") -> SimpleUploadedFile:
    buf = io.BytesIO()
    Image.new("RGB", (4, 4), color=(255, 0, 0)).save(buf, format="PNG")
    return SimpleUploadedFile(name, buf.getvalue(), content_type="image/png")


def request_items(question_type="single", count=1):
    correct = [True, False, False, False]
    if question_type == "multiple":
        correct = [True, True, False, False]
    return [
        {
            "requestText": f"request {i}",
            "answers": [
                {"answerText": f"answer {j}", "isCorrect": flag}
                for j, flag in enumerate(correct)
            ],
        }
        for i in range(count)
    ]


@pytest.fixture
def png_file():
    return make_png


@pytest.fixture
def build_requests():
    return request_items


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def client_for():
    def _client(user):
        client = APIClient()
        client.force_authenticate(user=user)
        return client
    return _client


@pytest.fixture
def make_user(db):
    from apps.domains.students.models import Student
    from apps.domains.teachers.models import Teacher

    def _make(role=User.Role.SALES, *, name=None, phone=None, password=DEFAULT_PASSWORD, subject=None):
        phone = phone or next_phone()
        user = User.objects.create_user(
            username=phone,
            password=password,
            name=name or f"{role} user",
            phone=phone,
            gender=User.Gender.MALE,
            age=20,
            role=role,
        )
        if role == User.Role.TEACHER:
            Teacher.objects.create(user=user, subject=subject)
        elif role == User.Role.STUDENT:
            Student.objects.create(user=user, profile_photo="students/profile/test.png")
        return user

    return _make


@pytest.fixture
def super_admin(make_user):
    return make_user(User.Role.SUPER_ADMIN, name="Super")


@pytest.fixture
def admin_user(make_user):
    return make_user(User.Role.ADMIN, name="Admin")


@pytest.fixture
def sales_user(make_user):
    return make_user(User.Role.SALES, name="Sales")


@pytest.fixture
def catalog(db):
    from apps.domains.exams.models import SchoolClass, Subject, Unit

    school_class = SchoolClass.objects.create(name="Grade 12")
    subject = Subject.objects.create(name="Math", school_class=school_class)
    open_unit = Unit.objects.create(name="Algebra", subject=subject, available=True)
    locked_unit = Unit.objects.create(name="Calculus", subject=subject, available=False)
    return {
        "class": school_class,
        "subject": subject,
        "unit": open_unit,
        "locked_unit": locked_unit,
    }


@pytest.fixture
def teacher_user(make_user, catalog):
    return make_user(User.Role.TEACHER, name="Teacher", subject=catalog["subject"])


@pytest.fixture
def student_user(make_user):
    return make_user(User.Role.STUDENT, name="Student")


@pytest.fixture
def make_question(db):
    from apps.domains.exams.models import Question

    counter = itertools.count(1)

    def _make(unit, teacher, *, difficulty="easy", question_type="single"):
        return Question.objects.create(
            unit=unit,
            teacher=teacher,
            text=f"question {next(counter)} for {unit.name}",
            difficulty=difficulty,
            question_type=question_type,
            explanation_type="text",
            explanation_content="because",
            requests=request_items(question_type),
        )

    return _make
