from django.urls import path

from notifications.views import alert_views, reminder_views

app_name = "notifications"

urlpatterns = [
    # Automatic alerts (external cron)
    path("revisar-vacas/", alert_views.check_herd_alerts, name="check-herd-alerts"),
    path("recordatorio/enviar/", alert_views.dispatch_reminders, name="dispatch-reminders"),

    # Reminders
    path("recordatorios/<int:cow_id>/", reminder_views.cow_reminders, name="cow-reminders"),
    path("recordatorios/eliminar/<int:reminder_id>/", reminder_views.delete_reminder, name="delete-reminder"),
]
