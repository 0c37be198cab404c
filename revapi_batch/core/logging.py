"""
Logging utilities for the batch application and helper scripts.

Log records go to stderr; stdout is reserved for the program's result line.
"""

import logging
import sys


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging with a sensible default format."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        stream=sys.stderr,
    )
    # httpx logs every request line at INFO, including the token endpoint.
    logging.getLogger("httpx").setLevel(logging.WARNING)


__all__ = ["configure_logging"]
