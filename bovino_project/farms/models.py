from django.conf import settings
from django.db import models


class Farm(models.Model):
    name = models.CharField(max_length=150)
    location = models.CharField(max_length=255, blank=True)

    # Alerts for every cow on the farm go to the owner's email.
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="farms",
    )

    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return self.name


class Paddock(models.Model):
    name = models.CharField(max_length=150)

    farm = models.ForeignKey(
        Farm,
        on_delete=models.CASCADE,
        related_name="paddocks",
    )

    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return f"{self.name} - {self.farm.name}"


class Cow(models.Model):
    code = models.CharField(max_length=50)
    age = models.PositiveIntegerField(null=True, blank=True)
    breed = models.CharField(max_length=100, blank=True)
    health_notes = models.TextField(blank=True)
    vaccines = models.TextField(blank=True)

    paddock = models.ForeignKey(
        Paddock,
        on_delete=models.CASCADE,
        related_name="cows",
    )

    veterinarian = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="assigned_cows",
    )

    # =====================================================
    # ALERT ANCHORS
    # =====================================================
    pregnancy_date = models.DateTimeField(
        null=True,
        blank=True,
        help_text="Set when a pregnancy is recorded; cleared once the birth alert is sent",
    )

    deworming_date = models.DateTimeField(
        null=True,
        blank=True,
        help_text="Last deworming; advanced by the deworming interval each time an alert is sent",
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        indexes = [
            models.Index(fields=["paddock", "deworming_date"], name="cow_paddock_deworming_idx"),
            models.Index(fields=["pregnancy_date"], name="cow_pregnancy_idx"),
        ]

    def __str__(self):
        return f"Vaca {self.code}"
