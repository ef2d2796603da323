from datetime import datetime
from zoneinfo import ZoneInfo

import pytest
from django.core.cache import cache

from farms.models import Farm, Paddock, Cow
from notifications.services.alerts import WindowPolicy

BOGOTA = ZoneInfo("America/Bogota")


@pytest.fixture(autouse=True)
def clear_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def now():
    """A fixed Monday morning in the operating timezone."""
    return datetime(2026, 10, 19, 9, 30, tzinfo=BOGOTA)


@pytest.fixture
def policy():
    return WindowPolicy()


@pytest.fixture
def owner(django_user_model):
    return django_user_model.objects.create_user(
        username="ganadero",
        email="ganadero@example.com",
        password="secreto123",
        first_name="Juan",
        last_name="Pérez",
    )


@pytest.fixture
def farm(owner):
    return Farm.objects.create(name="La Esperanza", owner=owner)


@pytest.fixture
def paddock(farm):
    return Paddock.objects.create(name="Potrero Norte", farm=farm)


@pytest.fixture
def make_cow(paddock):
    def _make(code, **kwargs):
        kwargs.setdefault("paddock", paddock)
        return Cow.objects.create(code=code, **kwargs)
    return _make


class FailingSender:
    """Mail collaborator that always fails and records who it tried."""

    def __init__(self):
        self.attempts = []

    def __call__(self, recipient, subject, text, html=None, from_email=None):
        from notifications.services.alerts import MailSendFailed

        self.attempts.append(recipient)
        raise MailSendFailed(recipient, "smtp down")


@pytest.fixture
def failing_sender():
    return FailingSender()
