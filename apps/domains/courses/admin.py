from django.contrib import admin

from .models import Course


@admin.register(Course)
class CourseAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "teacher", "subject", "institute_name", "available", "created_at")
    list_filter = ("available", "subject")
    search_fields = ("name", "institute_name")
