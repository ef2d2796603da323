from django import forms
from django.core.exceptions import ValidationError


class ForgotPasswordForm(forms.Form):
    email = forms.EmailField()


class VerifyCodeForm(forms.Form):
    email = forms.EmailField()
    codigo = forms.RegexField(
        regex=r"^\d{6}$",
        error_messages={"invalid": "El código debe tener 6 dígitos."},
    )


class ResetPasswordForm(VerifyCodeForm):
    password = forms.CharField(strip=False)
    confirm_password = forms.CharField(strip=False)

    # ----------------------------
    # VALIDATION
    # ----------------------------
    def clean(self):
        cleaned_data = super().clean()

        password = cleaned_data.get("password")
        confirm = cleaned_data.get("confirm_password")

        if not password or not confirm:
            raise ValidationError("La contraseña y su confirmación son obligatorias.")

        if password != confirm:
            raise ValidationError("Las contraseñas no coinciden.")

        if len(password) < 8:
            raise ValidationError("La contraseña debe tener al menos 8 caracteres.")

        return cleaned_data
