from django.contrib import admin
from django.urls import path, include


urlpatterns = [
    # DJANGO ADMIN (STAFF ONLY)
    path("control/django/admin/", admin.site.urls),

    # USERS / PASSWORD RESET
    path("usuario/", include("accounts.urls")),

    # HERD (farms, paddocks, cows and their alert anchors)
    path("api/", include("farms.urls")),

    # REMINDERS + AUTOMATIC ALERTS
    path("api/", include("notifications.urls")),
]
