# PATH: apps/core/admin.py
from django.contrib import admin

from apps.core.models import User


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "phone", "role", "gender", "age", "is_active", "date_joined")
    list_filter = ("role", "gender", "is_active")
    search_fields = ("name", "phone")
    exclude = ("password", "username", "groups", "user_permissions")
    readonly_fields = ("last_login", "date_joined")
