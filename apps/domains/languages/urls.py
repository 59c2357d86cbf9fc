# PATH: apps/domains/languages/urls.py
from rest_framework.routers import DefaultRouter

from .views import (
    EmptyQuestionViewSet,
    LanguageViewSet,
    LevelViewSet,
    ListenQuestionViewSet,
    MeanQuestionViewSet,
    RankingQuestionViewSet,
    ReadTalkQuestionViewSet,
)

router = DefaultRouter(trailing_slash=False)
router.include_root_view = False
router.register("language", LanguageViewSet, basename="language")
router.register("level", LevelViewSet, basename="language-level")
router.register("empty", EmptyQuestionViewSet, basename="language-empty")
router.register("mean", MeanQuestionViewSet, basename="language-mean")
router.register("listen", ListenQuestionViewSet, basename="language-listen")
router.register("readatalk", ReadTalkQuestionViewSet, basename="language-readatalk")
router.register("ranking", RankingQuestionViewSet, basename="language-ranking")

urlpatterns = router.urls
