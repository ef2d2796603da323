"""
notifications/services/reminders/scheduled.py

User-scheduled reminders, emailed one hour ahead of ``due_at``.

The window is narrow (a few minutes around the one-hour horizon), so the
trigger is expected to run at least that often. A reminder outside the
window simply waits for a later scan.
"""

import logging

from django.utils import timezone

from notifications.services.alerts import (
    AlertDispatcher,
    WindowPolicy,
    scan_reminder_events,
)

logger = logging.getLogger(__name__)


def send_due_reminders(now=None, policy=None, dispatcher=None):
    now = now or timezone.now()
    policy = policy or WindowPolicy.from_settings()
    dispatcher = dispatcher or AlertDispatcher()

    logger.info(
        "Checking reminders to send %s ahead at %s",
        policy.reminder_lead, timezone.localtime(now),
    )

    batch = scan_reminder_events(now, policy)
    if not len(batch):
        logger.info("No reminders to send right now")

    return dispatcher.dispatch(batch)
