# apps/core/urls.py

from django.urls import path

from apps.core.views import (
    DashLoginView,
    DashRegisterView,
    LogoutView,
    ProfileDetailView,
    ProfileView,
    UsersDashView,
)
from apps.domains.students.urls import (
    auth_urlpatterns as student_auth_urlpatterns,
    ctrl_urlpatterns as student_ctrl_urlpatterns,
)
from apps.domains.teachers.urls import (
    auth_urlpatterns as teacher_auth_urlpatterns,
    ctrl_urlpatterns as teacher_ctrl_urlpatterns,
)

# /api/auth/
auth_urlpatterns = [
    path("dashadmin/register", DashRegisterView.as_view(), name="dash-register"),
    path("dashadmin/login", DashLoginView.as_view(), name="dash-login"),
    path("logout", LogoutView.as_view(), name="logout"),
    *teacher_auth_urlpatterns,
    *student_auth_urlpatterns,
]

# /api/ctrl/
ctrl_urlpatterns = [
    path("users/dash", UsersDashView.as_view(), name="users-dash"),
    path("users/profile", ProfileView.as_view(), name="profile"),
    path("users/profile/<int:user_id>", ProfileDetailView.as_view(), name="profile-detail"),
    path("profile", ProfileView.as_view(), name="profile-alias"),
    *teacher_ctrl_urlpatterns,
    *student_ctrl_urlpatterns,
]
