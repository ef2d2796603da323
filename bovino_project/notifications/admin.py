from django.contrib import admin
from django.utils.html import format_html

from .models import Reminder


@admin.register(Reminder)
class ReminderAdmin(admin.ModelAdmin):
    """
    Admin configuration for scheduled reminders.
    """

    # =====================================================
    # LIST VIEW
    # =====================================================
    list_display = (
        "id",
        "user",
        "cow",
        "category",
        "title",
        "due_at",
        "sent_badge",
        "created_at",
    )

    list_filter = (
        "category",
        "sent",
        "due_at",
    )

    search_fields = (
        "title",
        "body",
        "user__username",
        "user__email",
        "cow__code",
    )

    ordering = ("-due_at",)
    list_per_page = 25
    list_select_related = ("user", "cow")

    # =====================================================
    # FIELDSETS (DETAIL VIEW)
    # =====================================================
    fieldsets = (
        ("Recipient", {
            "fields": ("user", "cow"),
        }),
        ("Content", {
            "fields": ("category", "title", "body"),
        }),
        ("Schedule", {
            "fields": ("due_at", "sent", "created_at"),
        }),
    )

    # "sent" only ever flips to True from the dispatcher.
    readonly_fields = (
        "sent",
        "created_at",
    )

    def sent_badge(self, obj):
        color = "#16a34a" if obj.sent else "#f59e0b"
        label = "Enviado" if obj.sent else "Pendiente"
        return format_html(
            '<span style="color:{}; font-weight:600;">{}</span>',
            color,
            label,
        )

    sent_badge.short_description = "Estado"

