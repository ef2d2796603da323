from django import forms
from django.contrib.auth import get_user_model


def _existing_user(pk):
    user = get_user_model().objects.filter(pk=pk).first()
    if user is None:
        raise forms.ValidationError("Usuario no encontrado", code="not_found")
    return user


class FarmForm(forms.Form):
    nombre = forms.CharField(max_length=150)
    ubicacion = forms.CharField(max_length=255, required=False)
    usuarioId = forms.IntegerField()

    def clean_usuarioId(self):
        return _existing_user(self.cleaned_data["usuarioId"])


class PaddockForm(forms.Form):
    nombre = forms.CharField(max_length=150)


class CowForm(forms.Form):
    codigo = forms.CharField(max_length=50)
    edad = forms.IntegerField(min_value=0, required=False)
    raza = forms.CharField(max_length=100, required=False)
    novedadesSanitarias = forms.CharField(required=False)
    vacunas = forms.CharField(required=False)
    veterinarioId = forms.IntegerField(required=False)

    # Optional alert anchors at registration time.
    fechaEmbarazo = forms.DateTimeField(required=False)
    fechaDesparasitacion = forms.DateTimeField(required=False)

    def clean_veterinarioId(self):
        pk = self.cleaned_data.get("veterinarioId")
        if pk is None:
            return None
        return _existing_user(pk)


class PregnancyForm(forms.Form):
    # Empty value clears the anchor (pregnancy cancelled).
    fechaEmbarazo = forms.DateTimeField(required=False)


class DewormingForm(forms.Form):
    fechaDesparasitacion = forms.DateTimeField(required=False)
