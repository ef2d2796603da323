from django.contrib import admin

from .models import Farm, Paddock, Cow


class PaddockInline(admin.TabularInline):
    model = Paddock
    extra = 0


@admin.register(Farm)
class FarmAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "location", "owner", "created_at")
    search_fields = ("name", "owner__username", "owner__email")
    inlines = [PaddockInline]


@admin.register(Paddock)
class PaddockAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "farm")
    list_filter = ("farm",)
    search_fields = ("name", "farm__name")


@admin.register(Cow)
class CowAdmin(admin.ModelAdmin):
    """
    Cow records, including the two alert anchors.
    """

    list_display = (
        "id",
        "code",
        "paddock",
        "breed",
        "pregnancy_date",
        "deworming_date",
    )

    list_filter = (
        "paddock__farm",
        "paddock",
    )

    search_fields = (
        "code",
        "paddock__name",
        "paddock__farm__name",
    )

    list_select_related = ("paddock", "paddock__farm")

    fieldsets = (
        ("Identificación", {
            "fields": ("code", "age", "breed", "paddock", "veterinarian"),
        }),
        ("Sanidad", {
            "fields": ("health_notes", "vaccines"),
        }),
        ("Alertas", {
            "fields": ("pregnancy_date", "deworming_date"),
        }),
    )
