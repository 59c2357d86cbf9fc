# PATH: apps/domains/students/urls.py
from django.urls import path

from .views import ExamRecordView, StudentLoginView, StudentRegisterView, StudentsDashView

# /api/auth/ 아래
auth_urlpatterns = [
    path("register", StudentRegisterView.as_view(), name="student-register"),
    path("login", StudentLoginView.as_view(), name="student-login"),
]

# /api/ctrl/ 아래
ctrl_urlpatterns = [
    path("students/dash", StudentsDashView.as_view(), name="students-dash"),
    path("student/exam_student", ExamRecordView.as_view(), name="student-exam-records"),
]
