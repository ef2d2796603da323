import logging

from django.template.loader import render_to_string
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_POST

from accounts.forms import ForgotPasswordForm, VerifyCodeForm, ResetPasswordForm
from accounts.models import User
from accounts.services import (
    CodeExpired,
    CodeMismatch,
    CodeNotFound,
    VerificationError,
    get_verification_store,
)
from bovino_project.http import InvalidJSONBody, form_errors, json_message, read_json
from notifications.services.alerts import MailSendFailed, send_notification

logger = logging.getLogger(__name__)

VERIFICATION_STATUS = {
    CodeNotFound: 404,
    CodeExpired: 410,
    CodeMismatch: 400,
}


def _verification_failed(exc):
    status = VERIFICATION_STATUS.get(type(exc), 400)
    return json_message(exc.message, status=status)


def _bound_form(request, form_class):
    try:
        return form_class(read_json(request))
    except InvalidJSONBody:
        return None


def _find_user(email):
    return User.objects.filter(email__iexact=email).first()


@csrf_exempt
@require_POST
def forgot_password(request):
    form = _bound_form(request, ForgotPasswordForm)
    if form is None:
        return json_message("Cuerpo JSON inválido", status=400)
    if not form.is_valid():
        return form_errors(form)

    email = form.cleaned_data["email"]
    user = _find_user(email)
    if user is None:
        return json_message("Usuario no encontrado", status=404)

    store = get_verification_store()
    code = store.issue(user.email)

    context = {"name": user.display_name, "code": code, "minutes": int(store.ttl.total_seconds() // 60)}
    try:
        send_notification(
            recipient=user.email,
            subject="Restablece tu contraseña",
            text=render_to_string("accounts/email/password_reset_code.txt", context),
        )
    except MailSendFailed:
        store.discard(user.email)
        logger.exception("Could not deliver password reset code to user %s", user.pk)
        return json_message("No se pudo enviar el correo de recuperación", status=502)

    return json_message("Correo de recuperación enviado")


@csrf_exempt
@require_POST
def verify_code(request):
    form = _bound_form(request, VerifyCodeForm)
    if form is None:
        return json_message("Cuerpo JSON inválido", status=400)
    if not form.is_valid():
        return form_errors(form)

    email = form.cleaned_data["email"]
    user = _find_user(email)
    if user is None:
        return json_message("Usuario no encontrado", status=404)

    try:
        get_verification_store().verify(user.email, form.cleaned_data["codigo"])
    except VerificationError as exc:
        return _verification_failed(exc)

    return json_message("El código es válido", userId=user.pk)


@csrf_exempt
@require_POST
def reset_password(request):
    form = _bound_form(request, ResetPasswordForm)
    if form is None:
        return json_message("Cuerpo JSON inválido", status=400)
    if not form.is_valid():
        return form_errors(form)

    email = form.cleaned_data["email"]
    user = _find_user(email)
    if user is None:
        return json_message("Usuario no encontrado", status=404)

    store = get_verification_store()
    try:
        store.verify(user.email, form.cleaned_data["codigo"])
    except VerificationError as exc:
        return _verification_failed(exc)

    user.set_password(form.cleaned_data["password"])
    user.save(update_fields=["password"])
    store.discard(user.email)

    logger.info("Password reset for user %s", user.pk)
    return json_message("Contraseña restablecida")
