"""
StatPro Revolution OAuth2 Server client.

Batch applications obtain access tokens with the OAuth 2.0 Resource Owner
Password flow: the user's username and application-specific password are
swapped for an access token at the token endpoint.
"""

from __future__ import annotations

import json
import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from revapi_batch.core.config import RevolutionSettings
from revapi_batch.schemas import (
    ClientIdentity,
    OAuthErrorPayload,
    TokenResponse,
    UserCredentials,
)

logger = logging.getLogger(__name__)


class RevolutionApiError(Exception):
    """Base error carrying the raw response body of a failed call."""

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        body: str = "",
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class AuthenticationError(RevolutionApiError):
    """Raised when the token endpoint does not issue an access token.

    ``body`` may hold an RFC 6749 error object such as
    ``{"error": "invalid_grant", "error_description": "..."}``. The OAuth2
    Server also returns the non-standard ``termsofuse_not_accepted`` code when
    the user has not accepted the latest Terms of Use; the user must visit
    https://revapiauth.statpro.com to do so. A revoked ASP surfaces as
    ``invalid_grant`` until the user creates a new batch authorization.
    """

    @property
    def provider_error(self) -> Optional[OAuthErrorPayload]:
        """Best-effort parse of the OAuth2 error object in ``body``."""
        try:
            payload = json.loads(self.body)
        except ValueError:
            return None
        if not isinstance(payload, dict):
            return None
        try:
            return OAuthErrorPayload.model_validate(payload)
        except ValidationError:
            return None


class RevolutionOAuthClient:
    """Exchange a user's username and ASP for an access token."""

    def __init__(
        self,
        settings: RevolutionSettings,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._settings = settings
        self._transport = transport

    async def request_token(
        self, credentials: UserCredentials, identity: ClientIdentity
    ) -> TokenResponse:
        """
        Perform the password grant (RFC 6749 section 4.3.2) and return the token response.

        A single request is made; failures are not retried.
        """
        payload = {
            "grant_type": "password",
            "username": credentials.username,
            "password": credentials.password,
            "scope": self._settings.scope,
        }
        headers = {"Authorization": identity.basic_authorization()}

        async with httpx.AsyncClient(transport=self._transport) as client:
            try:
                response = await client.post(
                    self._settings.token_url, data=payload, headers=headers
                )
            except httpx.HTTPError as exc:
                raise AuthenticationError(
                    f"Failed to reach the token endpoint: {exc}"
                ) from exc

        content = response.text
        if not response.is_success:
            error = AuthenticationError(
                f"Token endpoint returned HTTP {response.status_code}: {content}",
                status_code=response.status_code,
                body=content,
            )
            provider_error = error.provider_error
            logger.warning(
                "Token request rejected (status=%s, error=%s)",
                response.status_code,
                provider_error.error if provider_error else "unknown",
            )
            raise error

        try:
            token = TokenResponse.model_validate_json(content)
        except ValidationError as exc:
            raise AuthenticationError(
                f"Malformed token response: {content}",
                status_code=response.status_code,
                body=content,
            ) from exc

        logger.info(
            "Obtained access token (token_type=%s, expires_in=%s)",
            token.token_type,
            token.expires_in,
        )
        return token

    async def get_access_token(
        self, credentials: UserCredentials, identity: ClientIdentity
    ) -> str:
        """Return only the access token from a fresh password grant."""
        token = await self.request_token(credentials, identity)
        return token.access_token


__all__ = ["AuthenticationError", "RevolutionApiError", "RevolutionOAuthClient"]
