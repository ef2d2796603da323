from django import forms
from django.utils.dateparse import parse_datetime

from accounts.models import User
from notifications.models import Reminder
from notifications.services.alerts import WindowPolicy


class ReminderForm(forms.Form):
    fecha = forms.DateTimeField()
    titulo = forms.CharField(max_length=200)
    descripcion = forms.CharField(required=False)
    tipo = forms.ChoiceField(choices=Reminder.Category.choices, required=False)
    usuarioId = forms.IntegerField()

    def __init__(self, *args, policy=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.policy = policy or WindowPolicy.from_settings()

    def clean_fecha(self):
        # Users type local (UTC-5) wall-clock time; store it in UTC.
        raw = self.data.get("fecha")
        parsed = parse_datetime(raw.strip()) if isinstance(raw, str) else None
        if parsed is not None:
            return self.policy.to_utc(parsed)
        return self.policy.to_utc(self.cleaned_data["fecha"])

    def clean_usuarioId(self):
        user = User.objects.filter(pk=self.cleaned_data["usuarioId"]).first()
        if user is None:
            raise forms.ValidationError("Usuario no encontrado", code="not_found")
        return user

    def save(self, cow):
        return Reminder.objects.create(
            cow=cow,
            user=self.cleaned_data["usuarioId"],
            due_at=self.cleaned_data["fecha"],
            title=self.cleaned_data["titulo"],
            body=self.cleaned_data.get("descripcion", ""),
            category=self.cleaned_data.get("tipo") or Reminder.Category.GENERAL,
        )
