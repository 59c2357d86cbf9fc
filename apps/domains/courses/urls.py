# PATH: apps/domains/courses/urls.py
from rest_framework.routers import DefaultRouter

from .views import CourseViewSet

router = DefaultRouter(trailing_slash=False)
router.include_root_view = False
router.register("course", CourseViewSet, basename="course")

urlpatterns = router.urls
