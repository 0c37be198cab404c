"""Service layer exports."""

from .credential_store import (
    CredentialStore,
    CredentialsNotConfiguredError,
    SettingsCredentialStore,
)
from .portfolios import FieldExtractionError, extract_portfolio_total, format_portfolio_line
from .password_cipher import PasswordCipher

__all__ = [
    "CredentialStore",
    "CredentialsNotConfiguredError",
    "FieldExtractionError",
    "SettingsCredentialStore",
    "PasswordCipher",
    "extract_portfolio_total",
    "format_portfolio_line",
]
