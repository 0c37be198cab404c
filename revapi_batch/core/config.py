"""
Application configuration models and helpers.

Centralizes the Revolution endpoints, the Batch application's client identity
and the user's application-specific password so the batch flow and the helper
scripts share a consistent configuration surface.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional, Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

TOKEN_URL = "https://revapiaccess.statpro.com/OAuth2/Token"
WEB_API_URL = "https://revapi.statpro.com/v1"
WEB_API_SCOPE = "RevolutionWebApi"
SERVICE_NAMESPACE = "http://statpro.com/2012/Revolution"


class RevolutionSettings(BaseSettings):
    """Endpoints and client identity for the Revolution OAuth2 Server and Web API."""

    model_config = SettingsConfigDict(
        env_prefix="REVAPI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    token_url: str = Field(TOKEN_URL, description="OAuth2 Server token endpoint.")
    web_api_url: str = Field(WEB_API_URL, description="Web API entry point.")
    scope: str = Field(
        WEB_API_SCOPE,
        description="Scope identifier; required by the OAuth2 Server.",
    )
    service_namespace: str = Field(SERVICE_NAMESPACE)
    client_id: str = Field(
        ...,
        description="Client identifier issued when the Batch app was registered.",
    )
    client_secret: str = Field(..., description="Client secret issued with the client id.")

    @field_validator("client_id", "client_secret")
    @classmethod
    def _ascii_only(cls, value: str) -> str:
        if not value.isascii():
            raise ValueError("must contain ASCII characters only")
        return value


class BatchUserSettings(BaseSettings):
    """The single user whose data this Batch application reads."""

    model_config = SettingsConfigDict(
        env_prefix="REVAPI_USER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    username: str = Field(..., description="The user's email address.")
    password: str = Field(
        ...,
        description="Application-specific password from the user's batch authorization.",
    )
    password_encrypted: bool = Field(
        False,
        description="Whether ``password`` holds Fernet ciphertext rather than plaintext.",
    )


class SecuritySettings(BaseSettings):
    """Security-related configuration."""

    model_config = SettingsConfigDict(
        env_prefix="REVAPI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    encryption_secret: Optional[str] = Field(
        None,
        description="Secret used to derive the key protecting the stored ASP.",
    )


class AppSettings(BaseSettings):
    """Root settings object for the batch application."""

    # The prefix keeps group fields such as ``user`` from matching $USER.
    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    environment: str = Field("development", validation_alias="APP_ENV")
    log_level: str = "INFO"
    revolution: RevolutionSettings = Field(default_factory=RevolutionSettings)
    user: BatchUserSettings = Field(default_factory=BatchUserSettings)
    security: SecuritySettings = Field(default_factory=SecuritySettings)


@lru_cache()
def get_settings() -> AppSettings:
    """Return a cached settings object."""
    return AppSettings()  # type: ignore[call-arg]


def load_settings(env_file: Union[str, Path]) -> AppSettings:
    """Build settings from an explicit env file; process environment still takes precedence."""
    return AppSettings(
        _env_file=env_file,
        revolution=RevolutionSettings(_env_file=env_file),  # type: ignore[call-arg]
        user=BatchUserSettings(_env_file=env_file),  # type: ignore[call-arg]
        security=SecuritySettings(_env_file=env_file),
    )


__all__ = [
    "AppSettings",
    "BatchUserSettings",
    "RevolutionSettings",
    "SecuritySettings",
    "SERVICE_NAMESPACE",
    "TOKEN_URL",
    "WEB_API_SCOPE",
    "WEB_API_URL",
    "get_settings",
    "load_settings",
]
