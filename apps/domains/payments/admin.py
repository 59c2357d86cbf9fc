from django.contrib import admin

from .models import QrPayment


@admin.register(QrPayment)
class QrPaymentAdmin(admin.ModelAdmin):
    list_display = ("id", "type", "entity_id", "used", "used_by", "used_at", "issued_by", "created_at")
    list_filter = ("type", "used")
    search_fields = ("unique_code",)
    readonly_fields = ("unique_code", "used", "used_by", "used_at", "issued_by")
