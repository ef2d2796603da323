"""
Reminder notification service layer.

This package contains time-based alert emitters
that are triggered by schedulers (management commands,
cron hitting the HTTP endpoints, or the optional
in-process scheduler).

Reminder logic is:
- service-layer only
- date-based
- idempotent through persisted state changes
"""

# =====================================================
# HERD ALERTS (pregnancy + deworming)
# =====================================================
from .animals import (
    check_animal_alerts,
)

# =====================================================
# USER-SCHEDULED REMINDERS
# =====================================================
from .scheduled import (
    send_due_reminders,
)

__all__ = [
    "check_animal_alerts",
    "send_due_reminders",
]
