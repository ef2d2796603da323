from dataclasses import dataclass
from typing import Optional

from django.conf import settings
from django.template.loader import render_to_string

from .scanner import DEWORMING, PREGNANCY, REMINDER


@dataclass
class RenderedMessage:
    subject: str
    text: str
    html: Optional[str] = None
    from_email: Optional[str] = None


# Colours and copy for the two animal alert kinds.
ANIMAL_ALERT_STYLES = {
    PREGNANCY: {
        "icon": "🐄",
        "primary": "#E91E63",
        "secondary": "#FCE4EC",
        "accent": "#AD1457",
        "tip": "Prepara un área limpia y segura para el parto. Mantén contacto con el veterinario.",
    },
    DEWORMING: {
        "icon": "💉",
        "primary": "#FF9800",
        "secondary": "#FFF3E0",
        "accent": "#F57C00",
        "tip": "Programa la desparasitación con anticipación para mantener la salud del ganado.",
    },
}


def _animal_alert(event):
    ctx = event.context

    if event.kind == PREGNANCY:
        subject = f"🐄 Vaca {ctx['cow_code']} próxima a parir"
        title = f"Vaca {ctx['cow_code']} próxima a parir"
    else:
        subject = "💉 Desparasitación pendiente"
        title = "Desparasitación pendiente"

    context = {
        "subject": subject,
        "title": title,
        "kind": event.kind,
        "style": ANIMAL_ALERT_STYLES[event.kind],
        "recipient_name": event.recipient_name or "ganadero",
        "due_date": event.due_date,
        "days_remaining": event.days_remaining,
        "cow_code": ctx.get("cow_code"),
        "paddock_name": ctx.get("paddock_name"),
        "farm_name": ctx.get("farm_name"),
        "is_pregnancy": event.kind == PREGNANCY,
    }

    return RenderedMessage(
        subject=subject,
        text=render_to_string("notifications/email/animal_alert.txt", context),
        html=render_to_string("notifications/email/animal_alert.html", context),
        from_email=settings.DEFAULT_FROM_EMAIL,
    )


def _reminder(event):
    ctx = event.context
    context = {
        "recipient_name": event.recipient_name,
        "title": ctx["title"],
        "body": ctx["body"],
        "category": ctx["category"],
        "cow_code": ctx.get("cow_code"),
        "local_time": ctx["local_time"],
    }
    return RenderedMessage(
        subject=f"📌 Recordatorio: {ctx['title']}",
        text=render_to_string("notifications/email/reminder.txt", context),
        from_email=getattr(settings, "REMINDER_FROM_EMAIL", settings.DEFAULT_FROM_EMAIL),
    )


RENDERERS = {
    PREGNANCY: _animal_alert,
    DEWORMING: _animal_alert,
    REMINDER: _reminder,
}


def render_event(event):
    return RENDERERS[event.kind](event)
