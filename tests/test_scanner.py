from datetime import timedelta
from unittest import mock

import pytest
from django.db import DatabaseError

from farms.models import Farm, Paddock
from notifications.models import Reminder
from notifications.services.alerts import (
    DEWORMING,
    PREGNANCY,
    REMINDER,
    StoreQueryFailed,
    scan_animal_events,
    scan_reminder_events,
)

pytestmark = pytest.mark.django_db


def test_pregnancy_event_carries_owner_and_days(make_cow, owner, policy, now):
    cow = make_cow("V-001", pregnancy_date=now - timedelta(days=277))

    batch = scan_animal_events(now, policy)

    assert len(batch.events) == 1
    event = batch.events[0]
    assert event.kind == PREGNANCY
    assert event.subject_id == cow.pk
    assert event.recipient_email == owner.email
    assert event.recipient_name == "Juan Pérez"
    assert event.days_remaining == 3
    assert event.context["cow_code"] == "V-001"


def test_cow_outside_window_produces_nothing(make_cow, policy, now):
    make_cow("V-002", pregnancy_date=now - timedelta(days=200))
    make_cow("V-003")

    batch = scan_animal_events(now, policy)

    assert batch.events == []
    assert batch.skipped == []


def test_cow_with_both_anchors_yields_two_events(make_cow, policy, now):
    make_cow(
        "V-004",
        pregnancy_date=now - timedelta(days=279),
        deworming_date=now - timedelta(days=91),
    )

    batch = scan_animal_events(now, policy)

    assert sorted(e.kind for e in batch.events) == [DEWORMING, PREGNANCY]


def test_owner_without_email_is_skipped_not_fatal(make_cow, django_user_model, policy, now):
    silent = django_user_model.objects.create_user(username="sin-correo", email="")
    other_paddock = Paddock.objects.create(
        name="Potrero Sur", farm=Farm.objects.create(name="El Retiro", owner=silent)
    )
    make_cow("V-005", paddock=other_paddock, pregnancy_date=now - timedelta(days=278))
    make_cow("V-006", pregnancy_date=now - timedelta(days=278))

    batch = scan_animal_events(now, policy)

    assert [e.context["cow_code"] for e in batch.events] == ["V-006"]
    assert len(batch.skipped) == 1
    assert "no tiene correo" in batch.skipped[0]


def test_farm_without_owner_is_skipped(make_cow, policy, now):
    orphan = Paddock.objects.create(name="Potrero Huérfano", farm=Farm.objects.create(name="Sin dueño"))
    make_cow("V-007", paddock=orphan, pregnancy_date=now - timedelta(days=280))

    batch = scan_animal_events(now, policy)

    assert batch.events == []
    assert batch.skipped == ["pregnancy: Vaca V-007: sin usuario asociado"]


def test_unreadable_store_raises_query_failed(policy, now):
    with mock.patch("notifications.services.alerts.scanner.Cow") as cow_model:
        cow_model.objects.select_related.side_effect = DatabaseError("connection lost")

        with pytest.raises(StoreQueryFailed):
            scan_animal_events(now, policy)


# ============================================================
# REMINDERS
# ============================================================

def test_reminder_scan_picks_only_unsent_in_window(make_cow, owner, policy, now):
    cow = make_cow("V-010")
    due = Reminder.objects.create(user=owner, cow=cow, title="Vacuna", due_at=now + timedelta(minutes=60))
    Reminder.objects.create(user=owner, cow=cow, title="Ya enviado", due_at=now + timedelta(minutes=60), sent=True)
    Reminder.objects.create(user=owner, cow=cow, title="Muy tarde", due_at=now + timedelta(minutes=65))
    Reminder.objects.create(user=owner, cow=cow, title="Pasado", due_at=now - timedelta(minutes=5))

    batch = scan_reminder_events(now, policy)

    assert [e.subject_id for e in batch.events] == [due.pk]
    event = batch.events[0]
    assert event.kind == REMINDER
    assert event.context["title"] == "Vacuna"
    assert event.context["cow_code"] == "V-010"
    assert event.context["category"] == "General"


def test_reminder_without_user_is_skipped(policy, now):
    Reminder.objects.create(title="Huérfano", due_at=now + timedelta(minutes=59))

    batch = scan_reminder_events(now, policy)

    assert batch.events == []
    assert len(batch) == 1
    assert batch.skipped[0].startswith("reminder: Recordatorio")
