"""
Alert scan error taxonomy.

Only StoreQueryFailed aborts a scan; the others are per-event and the
dispatcher logs them and moves on.
"""


class AlertError(Exception):
    pass


class StoreQueryFailed(AlertError):
    """Reading animals or reminders failed; nothing was sent."""


class RecipientUnresolvable(AlertError):
    """The event has no owner/recipient or the recipient has no email."""


class MailSendFailed(AlertError):

    def __init__(self, recipient, reason):
        self.recipient = recipient
        self.reason = reason
        super().__init__(f"Could not send email to {recipient}: {reason}")


class StoreWriteFailed(AlertError):
    """The email went out but the idempotency mutation did not land."""
