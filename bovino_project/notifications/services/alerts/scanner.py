"""
notifications/services/alerts/scanner.py

Read side of the alert scan.

Turns the current store snapshot into DueEvent records. Never writes:
every state change happens in the dispatcher after a successful send.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from django.db import DatabaseError
from django.db.models import Q
from django.utils import timezone

from farms.models import Cow
from notifications.models import Reminder

from .exceptions import RecipientUnresolvable, StoreQueryFailed

logger = logging.getLogger(__name__)


PREGNANCY = "pregnancy"
DEWORMING = "deworming"
REMINDER = "reminder"


@dataclass
class DueEvent:
    kind: str
    subject_id: int
    recipient_email: str
    recipient_name: str
    anchor: datetime
    due_date: datetime
    days_remaining: Optional[int] = None
    context: dict = field(default_factory=dict)


@dataclass
class ScanBatch:
    events: List[DueEvent] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)

    def __len__(self):
        return len(self.events) + len(self.skipped)


def resolve_recipient(user, label):
    if user is None:
        raise RecipientUnresolvable(f"{label}: sin usuario asociado")
    if not user.email:
        raise RecipientUnresolvable(f"{label}: el usuario {user.pk} no tiene correo")
    return user.email, user.display_name


# ============================================================
# ANIMALS (pregnancy + deworming)
# ============================================================

def _farm_owner(cow):
    paddock = cow.paddock
    farm = paddock.farm if paddock else None
    return farm.owner if farm else None


def _animal_context(cow):
    paddock = cow.paddock
    farm = paddock.farm if paddock else None
    return {
        "cow_code": cow.code,
        "paddock_id": cow.paddock_id,
        "paddock_name": paddock.name if paddock else str(cow.paddock_id),
        "farm_name": farm.name if farm else "",
    }


def scan_animal_events(now, policy):
    """
    Pregnancy and deworming events for every cow whose derived due date
    is inside the alert window, in primary-key order.
    """
    try:
        cows = list(
            Cow.objects
            .select_related("paddock__farm__owner")
            .filter(Q(pregnancy_date__isnull=False) | Q(deworming_date__isnull=False))
            .order_by("pk")
        )
    except DatabaseError as exc:
        logger.exception("Could not read cows for the alert scan")
        raise StoreQueryFailed("Error al consultar vacas") from exc

    batch = ScanBatch()

    for cow in cows:
        candidates = []

        if cow.pregnancy_date:
            due = policy.pregnancy_due_date(cow.pregnancy_date)
            days = policy.days_until(due, now)
            if policy.in_alert_window(days):
                candidates.append((PREGNANCY, cow.pregnancy_date, due, days))

        if cow.deworming_date:
            due = policy.deworming_due_date(cow.deworming_date)
            days = policy.days_until(due, now)
            if policy.in_alert_window(days):
                candidates.append((DEWORMING, cow.deworming_date, due, days))

        if not candidates:
            continue

        try:
            email, name = resolve_recipient(_farm_owner(cow), f"Vaca {cow.code}")
        except RecipientUnresolvable as exc:
            logger.warning("Skipping alerts for cow %s: %s", cow.pk, exc)
            batch.skipped.extend(f"{kind}: {exc}" for kind, *_ in candidates)
            continue

        for kind, anchor, due, days in candidates:
            batch.events.append(DueEvent(
                kind=kind,
                subject_id=cow.pk,
                recipient_email=email,
                recipient_name=name,
                anchor=anchor,
                due_date=due,
                days_remaining=days,
                context=_animal_context(cow),
            ))

    logger.info(
        "Animal scan at %s: %s due event(s), %s skipped",
        now, len(batch.events), len(batch.skipped),
    )
    return batch


# ============================================================
# SCHEDULED REMINDERS
# ============================================================

def scan_reminder_events(now, policy):
    """
    Unsent reminders whose ``due_at`` falls inside the reminder window.
    """
    start, end = policy.reminder_window(now)

    try:
        reminders = list(
            Reminder.objects
            .select_related("user", "cow")
            .filter(sent=False, due_at__gte=start, due_at__lte=end)
            .order_by("due_at", "pk")
        )
    except DatabaseError as exc:
        logger.exception("Could not read reminders for the alert scan")
        raise StoreQueryFailed("Error al consultar recordatorios") from exc

    logger.info("Looking for reminders between %s and %s: %s found", start, end, len(reminders))

    batch = ScanBatch()

    for reminder in reminders:
        try:
            email, name = resolve_recipient(reminder.user, f"Recordatorio {reminder.pk}")
        except RecipientUnresolvable as exc:
            logger.warning("Skipping reminder %s: %s", reminder.pk, exc)
            batch.skipped.append(f"{REMINDER}: {exc}")
            continue

        batch.events.append(DueEvent(
            kind=REMINDER,
            subject_id=reminder.pk,
            recipient_email=email,
            recipient_name=name,
            anchor=reminder.due_at,
            due_date=reminder.due_at,
            context={
                "title": reminder.title,
                "body": reminder.body,
                "category": reminder.get_category_display(),
                "cow_code": reminder.cow.code if reminder.cow else "",
                "local_time": timezone.localtime(reminder.due_at),
            },
        ))

    return batch
