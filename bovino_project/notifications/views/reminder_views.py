import logging

from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from bovino_project.http import InvalidJSONBody, form_errors, json_message, read_json
from farms.models import Cow
from notifications.forms import ReminderForm
from notifications.models import Reminder

logger = logging.getLogger(__name__)


def serialize_reminder(reminder):
    return {
        "id": reminder.pk,
        "fecha": reminder.due_at.isoformat(),
        "titulo": reminder.title,
        "descripcion": reminder.body,
        "tipo": reminder.category,
        "usuarioId": reminder.user_id,
        "vacaId": reminder.cow_id,
        "enviado": reminder.sent,
        "creado": reminder.created_at.isoformat(),
    }


@csrf_exempt
@require_http_methods(["GET", "POST"])
def cow_reminders(request, cow_id):
    cow = Cow.objects.filter(pk=cow_id).first()
    if cow is None:
        return json_message("Vaca no encontrada", status=404)

    if request.method == "GET":
        reminders = cow.reminders.order_by("-created_at", "-pk")
        return JsonResponse({
            "message": "Recordatorios obtenidos con éxito",
            "recordatorios": [serialize_reminder(r) for r in reminders],
        })

    try:
        form = ReminderForm(read_json(request))
    except InvalidJSONBody:
        return json_message("Cuerpo JSON inválido", status=400)

    if not form.is_valid():
        if form.has_error("usuarioId", code="not_found"):
            return json_message("Usuario no encontrado", status=404)
        return form_errors(form)

    reminder = form.save(cow)
    logger.info("Reminder %s registered for cow %s at %s", reminder.pk, cow.pk, reminder.due_at)

    return JsonResponse(
        {
            "message": "Recordatorio registrado con éxito",
            "recordatorio": serialize_reminder(reminder),
        },
        status=201,
    )


@csrf_exempt
@require_http_methods(["DELETE"])
def delete_reminder(request, reminder_id):
    reminder = Reminder.objects.filter(pk=reminder_id).first()
    if reminder is None:
        return json_message("Recordatorio no encontrado", status=404)

    data = serialize_reminder(reminder)
    reminder.delete()

    return JsonResponse({
        "message": "Recordatorio eliminado con éxito",
        "recordatorio": data,
    })
