"""Encryption at rest for the user's application-specific password."""

from __future__ import annotations

import base64
import hashlib

from cryptography.fernet import Fernet, InvalidToken


def _derive_key(secret: str) -> bytes:
    return base64.urlsafe_b64encode(hashlib.sha256(secret.encode("utf-8")).digest())


class PasswordCipher:
    """Protect the ASP stored in ``REVAPI_USER_PASSWORD``.

    The Fernet key is derived from ``REVAPI_ENCRYPTION_SECRET``, so the
    ciphertext written by ``scripts/encrypt_secret.py`` can only be read by a
    process that is given the same secret.
    """

    def __init__(self, *, secret: str) -> None:
        if not secret:
            raise ValueError("Encryption secret must be provided.")
        self._fernet = Fernet(_derive_key(secret))

    def encrypt(self, password: str) -> str:
        return self._fernet.encrypt(password.encode("utf-8")).decode("ascii")

    def decrypt(self, stored: str) -> str:
        """Return the plaintext ASP; a wrong secret or tampered value raises ``ValueError``."""
        try:
            return self._fernet.decrypt(stored.encode("ascii")).decode("utf-8")
        except (InvalidToken, UnicodeEncodeError) as exc:
            raise ValueError(
                "Stored password cannot be decrypted; check REVAPI_ENCRYPTION_SECRET."
            ) from exc


__all__ = ["PasswordCipher"]
