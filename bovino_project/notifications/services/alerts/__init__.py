"""
Automatic alert core.

- policy: when a pregnancy / deworming / reminder is due
- scanner: reads the store, produces DueEvent records
- dispatcher: sends each event and applies its state change
"""

from .exceptions import (
    AlertError,
    StoreQueryFailed,
    RecipientUnresolvable,
    MailSendFailed,
    StoreWriteFailed,
)
from .policy import WindowPolicy
from .scanner import (
    DueEvent,
    ScanBatch,
    PREGNANCY,
    DEWORMING,
    REMINDER,
    scan_animal_events,
    scan_reminder_events,
)
from .mail import send_notification
from .dispatcher import AlertDispatcher, DispatchResult

__all__ = [
    # Errors
    "AlertError",
    "StoreQueryFailed",
    "RecipientUnresolvable",
    "MailSendFailed",
    "StoreWriteFailed",

    # Policy
    "WindowPolicy",

    # Scanner
    "DueEvent",
    "ScanBatch",
    "PREGNANCY",
    "DEWORMING",
    "REMINDER",
    "scan_animal_events",
    "scan_reminder_events",

    # Dispatch
    "send_notification",
    "AlertDispatcher",
    "DispatchResult",
]
