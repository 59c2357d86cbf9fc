from django.contrib import admin
from .models import Teacher


@admin.register(Teacher)
class TeacherAdmin(admin.ModelAdmin):
    list_display = ("id", "user", "subject", "created_at")
    search_fields = ("user__name", "user__phone")
    list_filter = ("subject",)
    raw_id_fields = ("user",)
    filter_horizontal = ("favorite_questions",)
