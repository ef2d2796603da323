"""
notifications/services/alerts/policy.py

Due-date windows for automatic alerts.

Pure date math: nothing here touches the database. Day counts are whole
calendar days between local dates in ``settings.TIME_ZONE``.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone as dt_timezone

from dateutil.relativedelta import relativedelta
from django.conf import settings
from django.utils import timezone


# ============================================================
# DEFAULTS (overridable through settings.ALERTS)
# ============================================================

PREGNANCY_DAYS = 280
DEWORMING_MONTHS = 3
ALERT_WINDOW_DAYS = 3
REMINDER_LEAD = timedelta(hours=1)
REMINDER_TOLERANCE = timedelta(minutes=2)
SOURCE_UTC_OFFSET_HOURS = -5


def local_date(value):
    if isinstance(value, datetime):
        if timezone.is_aware(value):
            return timezone.localtime(value).date()
        return value.date()
    return value


@dataclass(frozen=True)
class WindowPolicy:
    pregnancy_days: int = PREGNANCY_DAYS
    deworming_months: int = DEWORMING_MONTHS
    alert_window_days: int = ALERT_WINDOW_DAYS
    reminder_lead: timedelta = REMINDER_LEAD
    reminder_tolerance: timedelta = REMINDER_TOLERANCE
    source_utc_offset_hours: int = SOURCE_UTC_OFFSET_HOURS

    # False: a due date already in the past never fires (an anchor whose
    # window was missed stays set until someone resets it).
    # True: anything up to the upper bound fires, overdue included.
    catch_up_overdue: bool = False

    @classmethod
    def from_settings(cls):
        conf = getattr(settings, "ALERTS", {})
        return cls(
            pregnancy_days=conf.get("PREGNANCY_DAYS", PREGNANCY_DAYS),
            deworming_months=conf.get("DEWORMING_MONTHS", DEWORMING_MONTHS),
            alert_window_days=conf.get("ALERT_WINDOW_DAYS", ALERT_WINDOW_DAYS),
            reminder_lead=timedelta(
                minutes=conf.get("REMINDER_LEAD_MINUTES", REMINDER_LEAD.total_seconds() / 60)
            ),
            reminder_tolerance=timedelta(
                minutes=conf.get("REMINDER_TOLERANCE_MINUTES", REMINDER_TOLERANCE.total_seconds() / 60)
            ),
            source_utc_offset_hours=conf.get("SOURCE_UTC_OFFSET_HOURS", SOURCE_UTC_OFFSET_HOURS),
            catch_up_overdue=conf.get("CATCH_UP_OVERDUE", False),
        )

    # --------------------------------------------
    # ANCHOR -> DUE DATE
    # --------------------------------------------
    def pregnancy_due_date(self, anchor):
        return anchor + timedelta(days=self.pregnancy_days)

    def deworming_due_date(self, anchor):
        # Calendar months in local time; relativedelta clamps the day
        # (Jan 31 + 1 month -> Feb 28/29).
        if isinstance(anchor, datetime) and timezone.is_aware(anchor):
            anchor = timezone.localtime(anchor)
        return anchor + relativedelta(months=self.deworming_months)

    # --------------------------------------------
    # DAY WINDOW
    # --------------------------------------------
    def days_until(self, due, now):
        return (local_date(due) - local_date(now)).days

    def in_alert_window(self, days_remaining):
        if days_remaining > self.alert_window_days:
            return False
        return self.catch_up_overdue or days_remaining >= 0

    def pregnancy_is_due(self, anchor, now):
        return self.in_alert_window(self.days_until(self.pregnancy_due_date(anchor), now))

    def deworming_is_due(self, anchor, now):
        return self.in_alert_window(self.days_until(self.deworming_due_date(anchor), now))

    # --------------------------------------------
    # REMINDER WINDOW
    # --------------------------------------------
    def reminder_window(self, now):
        """
        Inclusive ``(start, end)`` range for ``due_at``: ``now + lead``
        must fall within ``due_at`` +/- tolerance.
        """
        horizon = now + self.reminder_lead
        return horizon - self.reminder_tolerance, horizon + self.reminder_tolerance

    def reminder_is_due(self, due_at, now):
        start, end = self.reminder_window(now)
        return start <= due_at <= end

    # --------------------------------------------
    # USER INPUT
    # --------------------------------------------
    @property
    def source_timezone(self):
        return dt_timezone(timedelta(hours=self.source_utc_offset_hours))

    def to_utc(self, value):
        """Interpret a naive user-supplied time in the source offset."""
        if timezone.is_naive(value):
            value = value.replace(tzinfo=self.source_timezone)
        return value.astimezone(dt_timezone.utc)
