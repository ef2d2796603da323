from django.db import models
from django.contrib.auth.models import AbstractUser


class User(AbstractUser):
    phone = models.CharField(max_length=20, blank=True)

    role = models.CharField(
        max_length=50,
        choices=[
            ("rancher", "Ganadero"),
            ("veterinarian", "Veterinario"),
        ],
        default="rancher",
    )

    @property
    def display_name(self):
        return self.get_full_name() or self.username

    def __str__(self):
        full = self.get_full_name()
        return f"{full} ({self.username})" if full else self.username
