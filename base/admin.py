# base/admin.py
"""
لوحة الإدارة — عرض خانات التخزين فقط (القراءة للتشخيص).
"""
from django.contrib import admin

from .models import KeyValueSlot


@admin.register(KeyValueSlot)
class KeyValueSlotAdmin(admin.ModelAdmin):
    list_display = ("key", "entries", "updated_at")
    search_fields = ("key",)
    readonly_fields = ("created_at", "updated_at")
    ordering = ("key",)

    @admin.display(description="Entries")
    def entries(self, obj):
        return len(obj.payload) if isinstance(obj.payload, list) else "-"
