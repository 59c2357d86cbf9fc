# apps/domains/exams/urls.py
from django.urls import path
from rest_framework.routers import DefaultRouter

from .views.catalog_view import SchoolClassViewSet, SubjectViewSet, UnitViewSet
from .views.question_view import QuestionViewSet
from .views.comment_view import CommentViewSet
from .views.exam_view import ExamGenerateView, ExamDetailView
from .views.favorite_view import FavoriteToggleView

router = DefaultRouter(trailing_slash=False)
router.include_root_view = False
router.register("class", SchoolClassViewSet, basename="exam-class")
router.register("subject", SubjectViewSet, basename="exam-subject")
router.register("unit", UnitViewSet, basename="exam-unit")
router.register("question", QuestionViewSet, basename="exam-question")
router.register("comment", CommentViewSet, basename="exam-comment")

urlpatterns = router.urls + [
    path("examgenerate", ExamGenerateView.as_view(), name="exam-generate"),
    path("examgenerate/<int:exam_id>", ExamDetailView.as_view(), name="exam-detail"),
    path("fav", FavoriteToggleView.as_view(), name="exam-favorite"),
]
