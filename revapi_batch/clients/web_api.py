"""Revolution Web API client."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from revapi_batch.clients.revolution_auth import RevolutionApiError
from revapi_batch.core.config import RevolutionSettings

logger = logging.getLogger(__name__)


class ResourceFetchError(RevolutionApiError):
    """Raised when the Web API does not return the requested resource."""


class RevolutionWebApiClient:
    """Fetch resources from the Web API on behalf of a user."""

    def __init__(
        self,
        settings: RevolutionSettings,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._settings = settings
        self._transport = transport

    async def get_service_resource(self, access_token: str) -> str:
        """Return the XML representation of the Web API's Service resource."""
        # The access token is already base64-encoded and is sent verbatim.
        headers = {
            "Authorization": f"Bearer {access_token}",
            "Accept": "application/xml",
        }

        async with httpx.AsyncClient(transport=self._transport) as client:
            try:
                response = await client.get(self._settings.web_api_url, headers=headers)
            except httpx.HTTPError as exc:
                raise ResourceFetchError(
                    f"Failed to reach the Web API: {exc}"
                ) from exc

        content = response.text
        if not response.is_success:
            logger.warning("Web API request failed (status=%s)", response.status_code)
            raise ResourceFetchError(
                f"Web API returned HTTP {response.status_code}: {content}",
                status_code=response.status_code,
                body=content,
            )
        return content


__all__ = ["ResourceFetchError", "RevolutionWebApiClient"]
