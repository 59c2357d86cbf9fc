from django.contrib import admin

from .models import SchoolClass, Subject, Unit, Question, Comment, Exam
from .services import cascade


class CascadeDeleteAdmin(admin.ModelAdmin):
    """
    PROTECT FK 때문에 기본 삭제는 실패한다.
    admin 삭제도 services.cascade 를 거치도록 고정.
    """

    cascade_delete = None

    def delete_model(self, request, obj):
        type(self).cascade_delete(obj)

    def delete_queryset(self, request, queryset):
        for obj in queryset:
            type(self).cascade_delete(obj)


@admin.register(SchoolClass)
class SchoolClassAdmin(CascadeDeleteAdmin):
    list_display = ("id", "name", "created_at")
    search_fields = ("name",)
    cascade_delete = cascade.delete_class


@admin.register(Subject)
class SubjectAdmin(CascadeDeleteAdmin):
    list_display = ("id", "name", "school_class", "created_at")
    list_filter = ("school_class",)
    search_fields = ("name",)
    cascade_delete = cascade.delete_subject


@admin.register(Unit)
class UnitAdmin(CascadeDeleteAdmin):
    list_display = ("id", "name", "subject", "available", "created_at")
    list_filter = ("available", "subject")
    search_fields = ("name",)
    cascade_delete = cascade.delete_unit


@admin.register(Question)
class QuestionAdmin(admin.ModelAdmin):
    list_display = ("id", "unit", "teacher", "difficulty", "question_type", "created_at")
    list_filter = ("difficulty", "question_type")
    search_fields = ("text",)


@admin.register(Comment)
class CommentAdmin(admin.ModelAdmin):
    list_display = ("id", "student", "question", "created_at")


@admin.register(Exam)
class ExamAdmin(admin.ModelAdmin):
    list_display = ("id", "created_by", "teacher", "difficulty", "number_of_questions", "created_at")
    list_filter = ("difficulty",)

    # 생성 후 불변: 조회만
    def has_change_permission(self, request, obj=None):
        return False
