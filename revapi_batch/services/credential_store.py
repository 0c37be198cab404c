"""
Sources for the client identity and the user's credentials.

A Batch application must keep the user's application-specific password (ASP)
private; how and where it is stored is up to the deployment. The flow only
depends on the ``CredentialStore`` protocol.
"""

from __future__ import annotations

from typing import Optional, Protocol

from pydantic import ValidationError

from revapi_batch.core.config import AppSettings
from revapi_batch.schemas import ClientIdentity, UserCredentials
from revapi_batch.services.password_cipher import PasswordCipher


class CredentialsNotConfiguredError(Exception):
    """Raised when the store cannot supply a client identity or user credentials."""


class CredentialStore(Protocol):
    def get_client_identity(self) -> ClientIdentity:
        ...

    def get_user_credentials(self) -> UserCredentials:
        ...


class SettingsCredentialStore:
    """Read credentials from application settings, decrypting the ASP when required."""

    def __init__(
        self,
        settings: AppSettings,
        *,
        cipher: Optional[PasswordCipher] = None,
    ) -> None:
        self._settings = settings
        self._cipher = cipher

    def get_client_identity(self) -> ClientIdentity:
        revolution = self._settings.revolution
        if not revolution.client_id or not revolution.client_secret:
            raise CredentialsNotConfiguredError(
                "Client id and client secret must both be configured."
            )
        try:
            return ClientIdentity(
                client_id=revolution.client_id,
                client_secret=revolution.client_secret,
            )
        except ValidationError as exc:
            raise CredentialsNotConfiguredError(
                f"Client id or client secret is not usable: {exc}"
            ) from exc

    def get_user_credentials(self) -> UserCredentials:
        user = self._settings.user
        if not user.username or not user.password:
            raise CredentialsNotConfiguredError(
                "Username and application-specific password must both be configured."
            )

        password = user.password
        if user.password_encrypted:
            try:
                password = self._get_cipher().decrypt(password)
            except ValueError as exc:
                raise CredentialsNotConfiguredError(str(exc)) from exc
        return UserCredentials(username=user.username, password=password)

    def _get_cipher(self) -> PasswordCipher:
        if self._cipher is None:
            secret = self._settings.security.encryption_secret
            if not secret:
                raise CredentialsNotConfiguredError(
                    "REVAPI_ENCRYPTION_SECRET is required to decrypt the stored password."
                )
            self._cipher = PasswordCipher(secret=secret)
        return self._cipher


__all__ = ["CredentialStore", "CredentialsNotConfiguredError", "SettingsCredentialStore"]
