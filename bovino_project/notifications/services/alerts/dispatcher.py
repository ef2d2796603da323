"""
notifications/services/alerts/dispatcher.py

Write side of the alert scan.

Events are handled strictly one after another:
- render + send
- on success only, apply the state change for the event kind
- a failed send or write is logged and the next event proceeds

State changes are conditional updates, so when two scans overlap only
one of them performs the transition (the other sees zero rows updated).
"""

import logging
from dataclasses import dataclass, field
from typing import List

from django.db import DatabaseError
from django.db.models import Q

from farms.models import Cow
from notifications.models import Reminder

from .exceptions import MailSendFailed, StoreWriteFailed
from .mail import send_notification
from .messages import render_event
from .scanner import DEWORMING, PREGNANCY, REMINDER

logger = logging.getLogger(__name__)


@dataclass
class DispatchResult:
    details: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    sent: int = 0
    found: int = 0

    def as_response(self):
        return {
            "success": True,
            "detalles": self.details,
            "fallidos": self.failed,
            "omitidos": self.skipped,
        }


# ============================================================
# STATE MUTATIONS (one per event kind)
# Each returns the number of rows it changed.
# ============================================================

def clear_pregnancy_anchor(event):
    return (
        Cow.objects
        .filter(pk=event.subject_id, pregnancy_date=event.anchor)
        .update(pregnancy_date=None)
    )


def advance_deworming_anchor(event):
    # The whole paddock moves to the due date that just fired; rows that
    # already sit at (or past) it were advanced by another scan.
    return (
        Cow.objects
        .filter(paddock_id=event.context["paddock_id"])
        .filter(Q(deworming_date__isnull=True) | Q(deworming_date__lt=event.due_date))
        .update(deworming_date=event.due_date)
    )


def mark_reminder_sent(event):
    return (
        Reminder.objects
        .filter(pk=event.subject_id, sent=False)
        .update(sent=True)
    )


MUTATIONS = {
    PREGNANCY: clear_pregnancy_anchor,
    DEWORMING: advance_deworming_anchor,
    REMINDER: mark_reminder_sent,
}


def describe(event):
    ctx = event.context
    if event.kind == PREGNANCY:
        return f"Embarazo - Vaca {ctx['cow_code']}"
    if event.kind == DEWORMING:
        return f"Desparasitación - Potrero {ctx['paddock_id']}"
    return f"Recordatorio {event.subject_id} - {ctx['title']}"


SUCCESS_SUFFIX = {
    PREGNANCY: "Alerta enviada y fecha eliminada.",
    DEWORMING: "Alerta enviada y fecha actualizada.",
    REMINDER: "Correo enviado y marcado como enviado.",
}


class AlertDispatcher:

    def __init__(self, sender=None, from_email=None):
        self.sender = sender or send_notification
        # Overrides the per-kind sender address when set.
        self.from_email = from_email

    def dispatch(self, batch):
        result = DispatchResult(skipped=list(batch.skipped), found=len(batch))

        # Scan-local: one deworming email per paddock per call.
        notified_paddocks = set()

        for event in batch.events:
            self.dispatch_event(event, result, notified_paddocks)

        logger.info(
            "Dispatch finished: %s sent, %s failed, %s skipped",
            result.sent, len(result.failed), len(result.skipped),
        )
        return result

    def dispatch_event(self, event, result, notified_paddocks):
        label = describe(event)

        if event.kind == DEWORMING:
            paddock_id = event.context["paddock_id"]
            if paddock_id in notified_paddocks:
                logger.info("%s: paddock already notified in this scan", label)
                return
            notified_paddocks.add(paddock_id)

        message = render_event(event)

        try:
            self.sender(
                recipient=event.recipient_email,
                subject=message.subject,
                text=message.text,
                html=message.html,
                from_email=self.from_email or message.from_email,
            )
        except MailSendFailed as exc:
            logger.error("%s: %s", label, exc)
            result.failed.append(f"{label}: no se pudo enviar el correo a {event.recipient_email}.")
            return

        result.sent += 1

        try:
            changed = MUTATIONS[event.kind](event)
        except DatabaseError as exc:
            err = StoreWriteFailed(f"{label}: {exc}")
            logger.exception("Email sent but state update failed (%s)", err)
            result.failed.append(f"{label}: correo enviado pero no se pudo actualizar el registro.")
            return

        if not changed:
            logger.warning("%s: already handled by a concurrent scan, email may be duplicated", label)
            result.details.append(f"{label}: Alerta enviada (ya estaba procesada).")
            return

        result.details.append(f"{label}: {SUCCESS_SUFFIX[event.kind]}")
