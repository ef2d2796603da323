import logging
from smtplib import SMTPException

from django.conf import settings
from django.core.mail import send_mail

from .exceptions import MailSendFailed

logger = logging.getLogger(__name__)


def send_notification(recipient, subject, text, html=None, from_email=None):
    """
    Send one email through the configured Django mail backend.

    Raises MailSendFailed on any transport error or when the backend
    reports that nothing was delivered.
    """
    try:
        delivered = send_mail(
            subject=subject,
            message=text,
            from_email=from_email or settings.DEFAULT_FROM_EMAIL,
            recipient_list=[recipient],
            html_message=html,
            fail_silently=False,
        )
    except (SMTPException, OSError, ValueError) as exc:
        # ValueError covers header injection (BadHeaderError).
        raise MailSendFailed(recipient, str(exc)) from exc

    if not delivered:
        raise MailSendFailed(recipient, "backend reported no delivery")

    logger.info("Email sent to %s: %s", recipient, subject)
    return delivered
