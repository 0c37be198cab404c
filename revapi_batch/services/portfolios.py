"""Read the portfolio count from the Web API's Service resource."""

from __future__ import annotations

import re
from xml.etree import ElementTree

from revapi_batch.core.config import SERVICE_NAMESPACE

_CANONICAL_COUNT = re.compile(r"0|[1-9][0-9]*", re.ASCII)


class FieldExtractionError(Exception):
    """Raised when the Service resource lacks a usable portfolio total."""


def extract_portfolio_total(document: str, namespace: str = SERVICE_NAMESPACE) -> int:
    """Return ``service/portfolios/total`` from the Service resource XML."""
    try:
        root = ElementTree.fromstring(document)
    except ElementTree.ParseError as exc:
        raise FieldExtractionError(f"Service resource is not valid XML: {exc}") from exc

    service_tag = f"{{{namespace}}}service"
    if root.tag != service_tag:
        raise FieldExtractionError(f"Expected root element {service_tag}, got {root.tag}.")

    total = root.find(f"{{{namespace}}}portfolios/{{{namespace}}}total")
    if total is None or total.text is None:
        raise FieldExtractionError("Service resource has no portfolios/total element.")

    # Canonical ASCII decimals only.
    text = total.text.strip()
    if _CANONICAL_COUNT.fullmatch(text) is None:
        raise FieldExtractionError(f"Portfolio total is not an integer: {total.text!r}")
    return int(text)


def format_portfolio_line(total: int) -> str:
    return f"The user has {total:d} portfolios."


__all__ = ["FieldExtractionError", "extract_portfolio_total", "format_portfolio_line"]
