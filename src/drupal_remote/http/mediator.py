"""Helpers for reading remote API responses."""

from __future__ import annotations

import math
import re
from typing import Any

import requests

from drupal_remote.exceptions import RateLimitExceededError

RATE_LIMIT_HEADER = "X-RateLimit-Remaining"

_LINK_PATTERN = re.compile(r'<(.*)>; rel="(.*)"', re.IGNORECASE)


def get_content(response: requests.Response) -> Any:
    """Return the decoded JSON payload of *response*, or its raw text.

    Never raises on malformed bodies: anything that is not valid JSON is
    returned unchanged as text.
    """
    try:
        return response.json()
    except ValueError:
        return response.text


def get_pagination(response: requests.Response) -> dict[str, str] | None:
    """Parse the ``Link`` header into a ``{rel: url}`` mapping.

    Returns:
        The pagination links, or None if the response has no Link header.
        Entries that do not look like ``<url>; rel="name"`` are skipped.
    """
    header = response.headers.get("Link")
    if not header:
        return None

    pagination: dict[str, str] = {}
    for link in header.split(","):
        match = _LINK_PATTERN.search(link.strip(", "))
        if match:
            pagination[match.group(2)] = match.group(1)
    return pagination


def get_remaining_calls(response: requests.Response) -> float | None:
    """Return the numeric ``X-RateLimit-Remaining`` value, if any.

    Fractional values such as ``0.0`` are accepted.
    """
    remaining = response.headers.get(RATE_LIMIT_HEADER)
    if remaining is None or remaining.strip() == "":
        return None
    try:
        value = float(remaining)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def get_api_limit(response: requests.Response) -> None:
    """Raise if the response reports no remaining API calls.

    Raises:
        RateLimitExceededError: If the remaining-calls header is below 1.
    """
    remaining = get_remaining_calls(response)
    if remaining is not None and remaining < 1:
        raise RateLimitExceededError(int(remaining))
