"""Canned Revolution responses and a recording mock transport."""

from __future__ import annotations

import json
from typing import Callable

import httpx

TOKEN_URL = "https://auth.example.test/OAuth2/Token"
WEB_API_URL = "https://api.example.test/v1"

SERVICE_XML = (
    '<?xml version="1.0" encoding="utf-8"?>'
    '<service xmlns="http://statpro.com/2012/Revolution">'
    "<portfolios><total>7</total>"
    '<link rel="portfolios" href="https://api.example.test/v1/portfolios"/>'
    "</portfolios>"
    "</service>"
)


def token_body(access_token: str = "access-token-123") -> dict:
    return {
        "access_token": access_token,
        "expires_in": 3600,
        "scope": "RevolutionWebApi",
        "token_type": "Bearer",
        "user_id": "b4f3e1c2",
        "user_name": "Test User",
    }


def oauth_error(error: str, description: str | None = None) -> str:
    payload = {"error": error}
    if description:
        payload["error_description"] = description
    return json.dumps(payload)


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)
