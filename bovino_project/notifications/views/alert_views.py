# notifications/views/alert_views.py
#
# Parameterless endpoints hit by an external cron.

import logging

from django.http import JsonResponse
from django.views.decorators.http import require_GET

from notifications.services import check_animal_alerts, send_due_reminders
from notifications.services.alerts import StoreQueryFailed

logger = logging.getLogger(__name__)


@require_GET
def check_herd_alerts(request):
    try:
        result = check_animal_alerts()
    except StoreQueryFailed:
        return JsonResponse(
            {"error": "Error en la ejecución del recordatorio automático"},
            status=500,
        )

    return JsonResponse(result.as_response())


@require_GET
def dispatch_reminders(request):
    try:
        result = send_due_reminders()
    except StoreQueryFailed:
        return JsonResponse({"message": "Error al consultar recordatorios"}, status=500)

    if not result.found:
        return JsonResponse({"message": "Sin recordatorios próximos."})

    return JsonResponse(result.as_response())
