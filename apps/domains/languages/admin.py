from django.contrib import admin

from .models import (
    EmptyQuestion,
    Language,
    Level,
    ListenQuestion,
    MeanQuestion,
    RankingQuestion,
    ReadTalkQuestion,
)


@admin.register(Language)
class LanguageAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "created_at")
    search_fields = ("name",)


@admin.register(Level)
class LevelAdmin(admin.ModelAdmin):
    list_display = ("id", "language", "level_number", "available")
    list_filter = ("language", "available")


@admin.register(EmptyQuestion, MeanQuestion)
class ChoiceLevelQuestionAdmin(admin.ModelAdmin):
    list_display = ("id", "level", "word", "correct", "created_at")
    list_filter = ("level",)
    search_fields = ("text", "word")


@admin.register(ListenQuestion, ReadTalkQuestion, RankingQuestion)
class LevelQuestionAdmin(admin.ModelAdmin):
    list_display = ("id", "level", "text", "created_at")
    list_filter = ("level",)
    search_fields = ("text",)
