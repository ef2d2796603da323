from django.conf import settings
from django.db import models
from django.utils import timezone


class Reminder(models.Model):
    """
    A user-scheduled reminder, emailed shortly before ``due_at``.

    ``sent`` is the idempotency marker: it only ever goes from False to
    True, and only after the email has been handed to the mail server.
    """

    # =====================================================
    # CATEGORY
    # =====================================================
    class Category(models.TextChoices):
        GENERAL = "general", "General"
        VACCINATION = "vacunacion", "Vacunación"
        DEWORMING = "desparasitacion", "Desparasitación"
        CHECKUP = "revision", "Revisión veterinaria"
        MILKING = "ordeno", "Ordeño"
        FEEDING = "alimentacion", "Alimentación"

    # =====================================================
    # CORE RELATIONSHIPS
    # =====================================================
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="reminders",
        help_text="User who receives the reminder email",
    )

    cow = models.ForeignKey(
        "farms.Cow",
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="reminders",
    )

    # =====================================================
    # CONTENT
    # =====================================================
    title = models.CharField(max_length=200)
    body = models.TextField(blank=True)
    category = models.CharField(
        max_length=30,
        choices=Category.choices,
        default=Category.GENERAL,
    )

    # =====================================================
    # SCHEDULE / STATE
    # =====================================================
    due_at = models.DateTimeField(db_index=True)

    sent = models.BooleanField(
        default=False,
        db_index=True,
    )

    created_at = models.DateTimeField(
        default=timezone.now,
        db_index=True,
    )

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["sent", "due_at"], name="reminder_sent_due_idx"),
        ]

    def __str__(self):
        return f"{self.title} @ {self.due_at:%Y-%m-%d %H:%M}"
