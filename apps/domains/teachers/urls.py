# PATH: apps/domains/teachers/urls.py
from django.urls import path

from .views import TeacherRegisterView, TeachersDashView

# /api/auth/ 아래
auth_urlpatterns = [
    path("teacher/register", TeacherRegisterView.as_view(), name="teacher-register"),
]

# /api/ctrl/ 아래
ctrl_urlpatterns = [
    path("teachers/dash", TeachersDashView.as_view(), name="teachers-dash"),
]
