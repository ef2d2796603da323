import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Farm",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=150)),
                ("location", models.CharField(blank=True, max_length=255)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("owner", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="farms", to=settings.AUTH_USER_MODEL)),
            ],
        ),
        migrations.CreateModel(
            name="Paddock",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=150)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("farm", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="paddocks", to="farms.farm")),
            ],
        ),
        migrations.CreateModel(
            name="Cow",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("code", models.CharField(max_length=50)),
                ("age", models.PositiveIntegerField(blank=True, null=True)),
                ("breed", models.CharField(blank=True, max_length=100)),
                ("health_notes", models.TextField(blank=True)),
                ("vaccines", models.TextField(blank=True)),
                ("pregnancy_date", models.DateTimeField(blank=True, help_text="Set when a pregnancy is recorded; cleared once the birth alert is sent", null=True)),
                ("deworming_date", models.DateTimeField(blank=True, help_text="Last deworming; advanced by the deworming interval each time an alert is sent", null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("paddock", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="cows", to="farms.paddock")),
                ("veterinarian", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="assigned_cows", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "indexes": [
                    models.Index(fields=["paddock", "deworming_date"], name="cow_paddock_deworming_idx"),
                    models.Index(fields=["pregnancy_date"], name="cow_pregnancy_idx"),
                ],
            },
        ),
    ]
