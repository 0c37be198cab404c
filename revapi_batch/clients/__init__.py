"""Expose constructed client wrappers."""

from .revolution_auth import AuthenticationError, RevolutionApiError, RevolutionOAuthClient
from .web_api import ResourceFetchError, RevolutionWebApiClient

__all__ = [
    "AuthenticationError",
    "ResourceFetchError",
    "RevolutionApiError",
    "RevolutionOAuthClient",
    "RevolutionWebApiClient",
]
