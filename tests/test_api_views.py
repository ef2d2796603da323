import json
from datetime import datetime, timedelta, timezone as dt_timezone

import pytest
from django.utils import timezone

from notifications.models import Reminder
from notifications.services.alerts import DispatchResult, StoreQueryFailed

pytestmark = pytest.mark.django_db


def send_json(client, method, url, payload):
    return getattr(client, method)(url, data=json.dumps(payload), content_type="application/json")


# ============================================================
# COW ANCHORS
# ============================================================

def test_record_pregnancy_sets_anchor(client, make_cow):
    cow = make_cow("V-400")

    response = send_json(client, "put", f"/api/vacas/embarazo/{cow.pk}/", {
        "fechaEmbarazo": "2026-01-15T08:00:00-05:00",
    })

    assert response.status_code == 200
    cow.refresh_from_db()
    assert cow.pregnancy_date == datetime(2026, 1, 15, 13, 0, tzinfo=dt_timezone.utc)
    assert response.json()["vaca"]["codigo"] == "V-400"


def test_record_pregnancy_null_clears_anchor(client, make_cow, now):
    cow = make_cow("V-401", pregnancy_date=now)

    response = send_json(client, "put", f"/api/vacas/embarazo/{cow.pk}/", {"fechaEmbarazo": None})

    assert response.status_code == 200
    cow.refresh_from_db()
    assert cow.pregnancy_date is None


def test_record_deworming_unknown_cow(client):
    response = send_json(client, "put", "/api/vacas/desparasitacion/9999/", {
        "fechaDesparasitacion": "2026-07-01T08:00:00-05:00",
    })

    assert response.status_code == 404


def test_record_deworming_rejects_garbage(client, make_cow):
    cow = make_cow("V-402")

    response = send_json(client, "put", f"/api/vacas/desparasitacion/{cow.pk}/", {
        "fechaDesparasitacion": "mañana",
    })

    assert response.status_code == 400


def test_cow_profile(client, make_cow):
    cow = make_cow("V-403", breed="Holstein")

    response = client.get(f"/api/vacas/perfil/{cow.pk}/")

    assert response.status_code == 200
    assert response.json()["vaca"]["raza"] == "Holstein"


# ============================================================
# REMINDERS
# ============================================================

def test_register_reminder_converts_local_time_to_utc(client, make_cow, owner):
    cow = make_cow("V-500")

    response = send_json(client, "post", f"/api/recordatorios/{cow.pk}/", {
        "fecha": "2026-10-20T10:00",
        "titulo": "Vacuna",
        "descripcion": "Segunda dosis de aftosa",
        "tipo": "vacunacion",
        "usuarioId": owner.pk,
    })

    assert response.status_code == 201
    reminder = Reminder.objects.get()
    assert reminder.due_at == datetime(2026, 10, 20, 15, 0, tzinfo=dt_timezone.utc)
    assert reminder.sent is False
    assert reminder.cow == cow
    assert reminder.category == Reminder.Category.VACCINATION


def test_register_reminder_unknown_user(client, make_cow):
    cow = make_cow("V-501")

    response = send_json(client, "post", f"/api/recordatorios/{cow.pk}/", {
        "fecha": "2026-10-20T10:00",
        "titulo": "Vacuna",
        "usuarioId": 4242,
    })

    assert response.status_code == 404
    assert response.json()["message"] == "Usuario no encontrado"
    assert not Reminder.objects.exists()


def test_register_reminder_unknown_cow(client, owner):
    response = send_json(client, "post", "/api/recordatorios/9999/", {
        "fecha": "2026-10-20T10:00",
        "titulo": "Vacuna",
        "usuarioId": owner.pk,
    })

    assert response.status_code == 404


def test_register_reminder_missing_title(client, make_cow, owner):
    cow = make_cow("V-502")

    response = send_json(client, "post", f"/api/recordatorios/{cow.pk}/", {
        "fecha": "2026-10-20T10:00",
        "usuarioId": owner.pk,
    })

    assert response.status_code == 400
    assert "titulo" in response.json()["errors"]


def test_list_and_delete_reminders(client, make_cow, owner, now):
    cow = make_cow("V-503")
    reminder = Reminder.objects.create(user=owner, cow=cow, title="Ordeño", due_at=now)

    listed = client.get(f"/api/recordatorios/{cow.pk}/").json()["recordatorios"]
    assert [r["id"] for r in listed] == [reminder.pk]

    deleted = client.delete(f"/api/recordatorios/eliminar/{reminder.pk}/")
    assert deleted.status_code == 200
    assert not Reminder.objects.exists()

    assert client.delete(f"/api/recordatorios/eliminar/{reminder.pk}/").status_code == 404


# ============================================================
# CRON ENDPOINTS
# ============================================================

def test_check_herd_alerts_endpoint(client, make_cow, mailoutbox):
    cow = make_cow("V-600", pregnancy_date=timezone.now() - timedelta(days=277))

    response = client.get("/api/revisar-vacas/")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["detalles"] == ["Embarazo - Vaca V-600: Alerta enviada y fecha eliminada."]
    cow.refresh_from_db()
    assert cow.pregnancy_date is None
    assert len(mailoutbox) == 1


def test_check_herd_alerts_query_failure(client, monkeypatch):
    def broken():
        raise StoreQueryFailed("Error al consultar vacas")

    monkeypatch.setattr("notifications.views.alert_views.check_animal_alerts", broken)

    response = client.get("/api/revisar-vacas/")

    assert response.status_code == 500
    assert response.json() == {"error": "Error en la ejecución del recordatorio automático"}


def test_dispatch_reminders_with_nothing_due(client):
    response = client.get("/api/recordatorio/enviar/")

    assert response.status_code == 200
    assert response.json() == {"message": "Sin recordatorios próximos."}


def test_dispatch_reminders_sends_due(client, owner, mailoutbox):
    reminder = Reminder.objects.create(
        user=owner, title="Revisión", due_at=timezone.now() + timedelta(minutes=60),
    )

    response = client.get("/api/recordatorio/enviar/")

    assert response.status_code == 200
    assert response.json()["success"] is True
    reminder.refresh_from_db()
    assert reminder.sent is True
    assert len(mailoutbox) == 1


def test_dispatch_reminders_query_failure(client, monkeypatch):
    def broken():
        raise StoreQueryFailed("Error al consultar recordatorios")

    monkeypatch.setattr("notifications.views.alert_views.send_due_reminders", broken)

    response = client.get("/api/recordatorio/enviar/")

    assert response.status_code == 500
    assert response.json() == {"message": "Error al consultar recordatorios"}


def test_dispatch_reminders_reports_skips_as_found(client, monkeypatch):
    monkeypatch.setattr(
        "notifications.views.alert_views.send_due_reminders",
        lambda: DispatchResult(skipped=["reminder: Recordatorio 1: sin usuario asociado"], found=1),
    )

    body = client.get("/api/recordatorio/enviar/").json()

    assert body["omitidos"] == ["reminder: Recordatorio 1: sin usuario asociado"]
