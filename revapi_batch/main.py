"""
Batch entrypoint: report how many portfolios the configured user has.

The flow is strictly sequential. An access token is obtained from the user's
username and ASP, the Web API's Service resource is fetched with it, and the
portfolio total is printed. Any failure ends the run without output on stdout.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import Optional, TextIO

from pydantic import ValidationError

from revapi_batch.clients import (
    AuthenticationError,
    ResourceFetchError,
    RevolutionOAuthClient,
    RevolutionWebApiClient,
)
from revapi_batch.core.config import SERVICE_NAMESPACE, AppSettings, get_settings
from revapi_batch.core.logging import configure_logging
from revapi_batch.services import (
    CredentialStore,
    CredentialsNotConfiguredError,
    FieldExtractionError,
    SettingsCredentialStore,
    extract_portfolio_total,
    format_portfolio_line,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIG_ERROR = 2


async def fetch_portfolio_count(
    store: CredentialStore,
    oauth_client: RevolutionOAuthClient,
    web_api_client: RevolutionWebApiClient,
    *,
    namespace: str = SERVICE_NAMESPACE,
) -> int:
    """Acquire a token, fetch the Service resource and return the portfolio total."""
    identity = store.get_client_identity()
    credentials = store.get_user_credentials()
    access_token = await oauth_client.get_access_token(credentials, identity)

    document = await web_api_client.get_service_resource(access_token)
    return extract_portfolio_total(document, namespace)


async def run(
    settings: AppSettings,
    *,
    store: Optional[CredentialStore] = None,
    oauth_client: Optional[RevolutionOAuthClient] = None,
    web_api_client: Optional[RevolutionWebApiClient] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """Run the batch flow, writing the result or the failure to the given streams."""
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    store = store or SettingsCredentialStore(settings)
    oauth_client = oauth_client or RevolutionOAuthClient(settings.revolution)
    web_api_client = web_api_client or RevolutionWebApiClient(settings.revolution)

    try:
        total = await fetch_portfolio_count(
            store,
            oauth_client,
            web_api_client,
            namespace=settings.revolution.service_namespace,
        )
    except (CredentialsNotConfiguredError, AuthenticationError) as exc:
        print(f"Failed to get access token.  {exc}", file=stderr)
        return EXIT_FAILURE
    except ResourceFetchError as exc:
        print(f"Failed to get resource from the Revolution Web API.  {exc}", file=stderr)
        return EXIT_FAILURE
    except FieldExtractionError as exc:
        print(f"Failed to read the portfolio total.  {exc}", file=stderr)
        return EXIT_FAILURE

    print(format_portfolio_line(total), file=stdout)
    return EXIT_OK


def main() -> int:
    """Console entry point."""
    try:
        settings = get_settings()
    except ValidationError as exc:
        print(
            "Settings validation failed. Missing or invalid values detected:\n"
            f"{exc}",
            file=sys.stderr,
        )
        return EXIT_CONFIG_ERROR

    configure_logging(settings.log_level)
    logger.info("Starting batch run (environment=%s)", settings.environment)
    return asyncio.run(run(settings))


if __name__ == "__main__":  # pragma: no cover - script entry point
    sys.exit(main())
