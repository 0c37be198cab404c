"""Schemas related to the Resource Owner Password flow."""

from __future__ import annotations

import base64
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UserCredentials(BaseModel):
    """A user's username and application-specific password (ASP)."""

    username: str = Field(..., description="The user's email address.")
    password: str = Field(..., description="The ASP generated for this Batch app.")


class ClientIdentity(BaseModel):
    """The registered Batch application's client id and secret."""

    client_id: str
    client_secret: str

    @field_validator("client_id", "client_secret")
    @classmethod
    def _ascii_only(cls, value: str) -> str:
        # The Basic credentials are sent as ASCII, byte for byte.
        if not value.isascii():
            raise ValueError("must contain ASCII characters only")
        return value

    def basic_authorization(self) -> str:
        """Return the HTTP Basic ``Authorization`` header value for the token request."""
        raw = f"{self.client_id}:{self.client_secret}".encode("ascii")
        return "Basic " + base64.b64encode(raw).decode("ascii")


class TokenResponse(BaseModel):
    """Successful token endpoint response.

    Batch applications are not issued refresh tokens; a new access token is
    obtained by re-submitting the username and ASP.
    """

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    access_token: str
    expires_in: int = Field(..., description="Token lifetime in seconds.")
    token_type: str = Field(..., description="Expected to be 'Bearer'.")
    scope: str = Field(..., description="Expected to be 'RevolutionWebApi'.")
    user_id: str = Field(..., description="The user's unique identifier.")
    user_name: str = Field(..., description="The user's non-unique name.")


class OAuthErrorPayload(BaseModel):
    """Error body returned by the OAuth2 Server (RFC 6749 section 5.2)."""

    model_config = ConfigDict(extra="ignore")

    error: str
    error_description: Optional[str] = None


__all__ = ["ClientIdentity", "OAuthErrorPayload", "TokenResponse", "UserCredentials"]
