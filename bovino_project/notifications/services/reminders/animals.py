"""
notifications/services/reminders/animals.py

Automatic herd alerts: upcoming births and pending dewormings.
Triggered by an external cron (HTTP endpoint or management command).
"""

import logging

from django.utils import timezone

from notifications.services.alerts import (
    AlertDispatcher,
    WindowPolicy,
    scan_animal_events,
)

logger = logging.getLogger(__name__)


def check_animal_alerts(now=None, policy=None, dispatcher=None):
    """
    Scan every cow with a pregnancy or deworming anchor and email the
    farm owner for those inside the alert window.

    Raises StoreQueryFailed if the cows cannot be read.
    """
    now = now or timezone.now()
    policy = policy or WindowPolicy.from_settings()
    dispatcher = dispatcher or AlertDispatcher()

    logger.info("Checking herd alerts at %s", timezone.localtime(now))

    batch = scan_animal_events(now, policy)
    return dispatcher.dispatch(batch)
