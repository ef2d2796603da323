"""
accounts/services/verification.py

Expiring password-reset codes.

Codes are kept in a Django cache backend, one entry per recipient email.
Consumption is two-phase: ``verify`` never evicts on success, the password
change calls ``discard`` once the new password is stored.
"""

import logging
import secrets
from datetime import timedelta

from django.conf import settings
from django.core.cache import caches
from django.utils import timezone

logger = logging.getLogger(__name__)

KEY_PREFIX = "verification-code"

# Entries stay in the backend a little past their TTL so an expired
# code is reported as expired rather than missing.
EXPIRED_GRACE = timedelta(hours=1)


class VerificationError(Exception):
    message = "Código inválido"


class CodeNotFound(VerificationError):
    message = "Código no encontrado"


class CodeExpired(VerificationError):
    message = "El código ha expirado"


class CodeMismatch(VerificationError):
    message = "El código no coincide"


def generate_code():
    """Six-digit numeric code, never with a leading zero."""
    return str(secrets.randbelow(900000) + 100000)


class VerificationCodeStore:

    def __init__(self, backend=None, ttl=None, clock=None):
        if backend is None:
            backend = caches[getattr(settings, "VERIFICATION_CODE_CACHE", "default")]
        if ttl is None:
            ttl = getattr(settings, "VERIFICATION_CODE_TTL", 15 * 60)
        if not isinstance(ttl, timedelta):
            ttl = timedelta(seconds=ttl)

        self.backend = backend
        self.ttl = ttl
        self.clock = clock or timezone.now

    def _key(self, email):
        return f"{KEY_PREFIX}:{email.strip().lower()}"

    def issue(self, email):
        """Store a fresh code for ``email``, replacing any previous one."""
        code = generate_code()
        expires_at = self.clock() + self.ttl

        self.backend.set(
            self._key(email),
            {"code": code, "expires_at": expires_at},
            timeout=int((self.ttl + EXPIRED_GRACE).total_seconds()),
        )

        logger.info("Issued verification code for %s (expires %s)", email, expires_at)
        return code

    def verify(self, email, code):
        key = self._key(email)
        entry = self.backend.get(key)

        if entry is None:
            raise CodeNotFound()

        if self.clock() >= entry["expires_at"]:
            self.backend.delete(key)
            logger.info("Verification code for %s expired, evicted", email)
            raise CodeExpired()

        if str(code).strip() != entry["code"]:
            raise CodeMismatch()

        return True

    def discard(self, email):
        self.backend.delete(self._key(email))


def get_verification_store():
    return VerificationCodeStore()
