"""Public schema exports."""

from .auth import ClientIdentity, OAuthErrorPayload, TokenResponse, UserCredentials

__all__ = [
    "ClientIdentity",
    "OAuthErrorPayload",
    "TokenResponse",
    "UserCredentials",
]
