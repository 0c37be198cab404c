#!/usr/bin/env python
"""Encrypt a user's application-specific password for storage in ``.env``.

The output goes into ``REVAPI_USER_PASSWORD`` together with
``REVAPI_USER_PASSWORD_ENCRYPTED=true``; the same ``REVAPI_ENCRYPTION_SECRET``
must be available when the batch job runs.
"""

from __future__ import annotations

import getpass
import os
import sys

from revapi_batch.services import PasswordCipher

SECRET_ENV = "REVAPI_ENCRYPTION_SECRET"


def main() -> int:
    secret = os.environ.get(SECRET_ENV)
    if not secret:
        print(f"Environment variable {SECRET_ENV} must be set.", file=sys.stderr)
        return 1

    password = getpass.getpass("Application-specific password: ")
    if not password:
        print("No password entered.", file=sys.stderr)
        return 1

    print(PasswordCipher(secret=secret).encrypt(password))
    return 0


if __name__ == "__main__":  # pragma: no cover - manual execution path
    sys.exit(main())
