import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("farms", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Reminder",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=200)),
                ("body", models.TextField(blank=True)),
                ("category", models.CharField(choices=[("general", "General"), ("vacunacion", "Vacunación"), ("desparasitacion", "Desparasitación"), ("revision", "Revisión veterinaria"), ("ordeno", "Ordeño"), ("alimentacion", "Alimentación")], default="general", max_length=30)),
                ("due_at", models.DateTimeField(db_index=True)),
                ("sent", models.BooleanField(db_index=True, default=False)),
                ("created_at", models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ("cow", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name="reminders", to="farms.cow")),
                ("user", models.ForeignKey(blank=True, help_text="User who receives the reminder email", null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="reminders", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [models.Index(fields=["sent", "due_at"], name="reminder_sent_due_idx")],
            },
        ),
    ]
