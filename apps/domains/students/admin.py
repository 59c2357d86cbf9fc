from django.contrib import admin
from .models import Student, StudentExamRecord


class StudentExamRecordInline(admin.TabularInline):
    model = StudentExamRecord
    extra = 0
    fields = ("subject", "mark", "number_of_questions", "created_at")
    readonly_fields = ("created_at",)


@admin.register(Student)
class StudentAdmin(admin.ModelAdmin):
    list_display = ("id", "user", "created_at")
    search_fields = ("user__name", "user__phone")
    raw_id_fields = ("user",)
    filter_horizontal = (
        "purchased_units",
        "purchased_courses",
        "purchased_levels",
        "favorite_questions",
    )
    inlines = [StudentExamRecordInline]


@admin.register(StudentExamRecord)
class StudentExamRecordAdmin(admin.ModelAdmin):
    list_display = ("student", "subject", "mark", "number_of_questions", "created_at")
    list_filter = ("subject",)
