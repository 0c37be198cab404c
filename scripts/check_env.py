"""Verify that the Batch application's configuration is complete and unchanged.

Run before scheduling the batch job. The tool:

1. Loads ``AppSettings`` from the given ``.env`` file and resolves the user's
   credentials through the credential store, so a missing client secret or an
   ASP that cannot be decrypted is reported before the job runs.
2. Records or verifies a checksum of the ``.env`` file to detect drift.

Example usages::

    python -m scripts.check_env record --env-file /opt/revapi-batch/.env \
        --hash-file /opt/revapi-batch/.env.sha256

    # From cron, before each batch run.
    python -m scripts.check_env verify --env-file /opt/revapi-batch/.env \
        --hash-file /opt/revapi-batch/.env.sha256
"""

from __future__ import annotations

import argparse
import hashlib
import sys
from pathlib import Path

from pydantic import ValidationError

from revapi_batch.core.config import load_settings
from revapi_batch.services import CredentialsNotConfiguredError, SettingsCredentialStore

EXIT_OK = 0
EXIT_VALIDATION_ERROR = 2
EXIT_CHECKSUM_ERROR = 3
EXIT_RUNTIME_ERROR = 5


def _checksum(env_file: Path) -> str:
    return hashlib.sha256(env_file.read_bytes()).hexdigest()


def _validate(env_file: Path) -> None:
    """Load settings from ``env_file`` and resolve both credential pairs."""
    store = SettingsCredentialStore(load_settings(env_file))
    store.get_client_identity()
    store.get_user_credentials()


def _record(env_file: Path, hash_file: Path) -> int:
    checksum = _checksum(env_file)
    hash_file.write_text(f"{checksum}\n", encoding="utf-8")
    print(f"Recorded checksum to {hash_file} ({checksum})")
    return EXIT_OK


def _verify(env_file: Path, hash_file: Path) -> int:
    if not hash_file.exists():
        print(
            f"Checksum file {hash_file} is missing; run 'record' first.",
            file=sys.stderr,
        )
        return EXIT_RUNTIME_ERROR

    expected = hash_file.read_text(encoding="utf-8").strip()
    actual = _checksum(env_file)
    if expected != actual:
        print(
            "Environment checksum mismatch!\n"
            f"  expected: {expected}\n"
            f"  actual:   {actual}",
            file=sys.stderr,
        )
        return EXIT_CHECKSUM_ERROR

    print("Environment checksum OK.")
    return EXIT_OK


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Validate batch settings and detect .env drift."
    )
    parser.add_argument(
        "command",
        choices=("record", "verify", "check"),
        help="'check' validates only; 'record'/'verify' also manage the checksum baseline.",
    )
    parser.add_argument("--env-file", default=".env", type=Path)
    parser.add_argument(
        "--hash-file",
        type=Path,
        help="Checksum baseline location (required for record and verify).",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command != "check" and args.hash_file is None:
        parser.error(f"--hash-file is required for '{args.command}'")

    env_file: Path = args.env_file
    if not env_file.exists():
        print(f"Environment file {env_file} does not exist.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    try:
        _validate(env_file)
    except ValidationError as exc:
        print(
            "Settings validation failed. Missing or invalid values detected:\n"
            f"{exc.json(indent=2)}",
            file=sys.stderr,
        )
        return EXIT_VALIDATION_ERROR
    except CredentialsNotConfiguredError as exc:
        print(f"Credentials are not usable: {exc}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    if args.command == "record":
        return _record(env_file, args.hash_file)
    if args.command == "verify":
        return _verify(env_file, args.hash_file)
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover - script entry point
    sys.exit(main())
