import django_filters

from .models import (
    EmptyQuestion,
    Language,
    Level,
    ListenQuestion,
    MeanQuestion,
    RankingQuestion,
    ReadTalkQuestion,
)


class LanguageFilter(django_filters.FilterSet):
    languageName = django_filters.CharFilter(field_name="name", lookup_expr="icontains")

    class Meta:
        model = Language
        fields = ["languageName"]


class LevelFilter(django_filters.FilterSet):
    levelNumber = django_filters.NumberFilter(field_name="level_number")
    language = django_filters.NumberFilter(field_name="language_id")

    class Meta:
        model = Level
        fields = ["levelNumber", "language"]


def level_question_filter(question_model):
    """문항 5종 공통 ?levelId="""

    class LevelQuestionFilter(django_filters.FilterSet):
        levelId = django_filters.NumberFilter(field_name="level_id")

        class Meta:
            model = question_model
            fields = ["levelId"]

    LevelQuestionFilter.__name__ = f"{question_model.__name__}Filter"
    return LevelQuestionFilter


EmptyQuestionFilter = level_question_filter(EmptyQuestion)
MeanQuestionFilter = level_question_filter(MeanQuestion)
ListenQuestionFilter = level_question_filter(ListenQuestion)
ReadTalkQuestionFilter = level_question_filter(ReadTalkQuestion)
RankingQuestionFilter = level_question_filter(RankingQuestion)
