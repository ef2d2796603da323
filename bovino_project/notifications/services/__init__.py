"""
Notification service layer.

- alerts: window policy, scanner and dispatcher shared by every alert
- reminders: the two scan entry points built on top of them
"""

from .reminders import (
    check_animal_alerts,
    send_due_reminders,
)

__all__ = [
    "check_animal_alerts",
    "send_due_reminders",
]
