from django.urls import path

from accounts.views import forgot_password, verify_code, reset_password

app_name = "accounts"

urlpatterns = [
    # Password reset (two-phase: validate code, then change password)
    path("olvide-contrasena/", forgot_password, name="forgot-password"),
    path("validar-codigo/", verify_code, name="verify-code"),
    path("restablecer-contrasena/", reset_password, name="reset-password"),
]
