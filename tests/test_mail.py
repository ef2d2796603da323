from smtplib import SMTPException

import pytest

from notifications.services.alerts import MailSendFailed, send_notification


def test_send_notification_delivers(mailoutbox, settings):
    settings.DEFAULT_FROM_EMAIL = "Control Bovino <noreply@example.com>"

    send_notification("ganadero@example.com", "Asunto", "Texto", html="<p>Texto</p>")

    assert mailoutbox[0].from_email == "Control Bovino <noreply@example.com>"
    assert mailoutbox[0].alternatives[0][1] == "text/html"


def test_transport_error_becomes_mail_send_failed(monkeypatch):
    def boom(**kwargs):
        raise SMTPException("connection refused")

    monkeypatch.setattr("notifications.services.alerts.mail.send_mail", boom)

    with pytest.raises(MailSendFailed) as excinfo:
        send_notification("ganadero@example.com", "Asunto", "Texto")

    assert excinfo.value.recipient == "ganadero@example.com"


def test_zero_delivery_count_is_a_failure(monkeypatch):
    monkeypatch.setattr("notifications.services.alerts.mail.send_mail", lambda **kwargs: 0)

    with pytest.raises(MailSendFailed):
        send_notification("ganadero@example.com", "Asunto", "Texto")
