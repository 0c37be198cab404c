"""Pytest configuration shared across the suite."""

try:
    from . import _bootstrap  # noqa: F401
    from .stubs import SERVICE_XML, TOKEN_URL, WEB_API_URL, RecordingTransport, token_body
except ImportError:  # pragma: no cover
    import _bootstrap  # type: ignore # noqa: F401
    from stubs import SERVICE_XML, TOKEN_URL, WEB_API_URL, RecordingTransport, token_body

import httpx
import pytest

from revapi_batch.core.config import (
    AppSettings,
    BatchUserSettings,
    RevolutionSettings,
    SecuritySettings,
)


@pytest.fixture
def revolution_settings() -> RevolutionSettings:
    return RevolutionSettings(
        token_url=TOKEN_URL,
        web_api_url=WEB_API_URL,
        client_id="batch-client",
        client_secret="s3cr3t",
    )


@pytest.fixture
def app_settings(revolution_settings: RevolutionSettings) -> AppSettings:
    return AppSettings(
        revolution=revolution_settings,
        user=BatchUserSettings(username="user@example.com", password="asp-value"),
        security=SecuritySettings(),
    )


@pytest.fixture
def token_transport() -> RecordingTransport:
    return RecordingTransport(lambda request: httpx.Response(200, json=token_body()))


@pytest.fixture
def service_transport() -> RecordingTransport:
    return RecordingTransport(
        lambda request: httpx.Response(
            200, text=SERVICE_XML, headers={"Content-Type": "application/xml"}
        )
    )
