"""Classification of failed remote API responses into typed errors."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import urlsplit

import requests

from drupal_remote.exceptions import (
    BadRequestError,
    GenericRequestError,
    RateLimitExceededError,
    TwoFactorRequiredError,
    ValidationFailedError,
)
from drupal_remote.http.mediator import get_content, get_remaining_calls
from drupal_remote.logging import get_logger

LOG = get_logger(__name__)

TWO_FACTOR_HEADER = "X-SauceLabs-OTP"
TWO_FACTOR_PREFIX = "required;"

# Requests to this resource may legitimately report zero remaining calls.
RATE_LIMIT_RESOURCE = "rate_limit"


def is_error_status(status_code: int) -> bool:
    """Return True for client (4xx) and server (5xx) error statuses."""
    return 400 <= status_code < 600


def _requested_path(response: requests.Response) -> str:
    url = response.request.url if response.request is not None else response.url
    return urlsplit(url or "").path


def describe_validation_error(error: Mapping[str, Any]) -> str:
    """Render one entry of a 422 ``errors`` list as a sentence."""
    code = error.get("code")
    field = error.get("field")
    resource = error.get("resource")

    if code == "missing":
        return f'The {field} {error.get("value")} does not exist, for resource "{resource}"'
    if code == "missing_field":
        return f'Field "{field}" is missing, for resource "{resource}"'
    if code == "invalid":
        return f'Field "{field}" is invalid, for resource "{resource}"'
    if code == "already_exists":
        return f'Field "{field}" already exists, for resource "{resource}"'
    return str(error.get("message", ""))


def check_response(response: requests.Response, api_limit: int | None = None) -> None:
    """Raise a typed error if *response* is a client or server error.

    Successful responses pass through untouched.

    Args:
        response: Completed response.
        api_limit: Configured call budget, reported on rate-limit errors.

    Raises:
        RateLimitExceededError: No API calls remain.
        TwoFactorRequiredError: A 401 carrying a two-factor challenge.
        BadRequestError: A 400 with a structured message.
        ValidationFailedError: A 422 with field-level errors.
        GenericRequestError: Any other error response.
    """
    status = response.status_code
    if not is_error_status(status):
        return

    content = get_content(response)

    remaining = get_remaining_calls(response)
    if (
        remaining is not None
        and remaining < 1
        and _requested_path(response)[1:11] != RATE_LIMIT_RESOURCE
    ):
        raise RateLimitExceededError(api_limit)

    if status == 401:
        challenge = response.headers.get(TWO_FACTOR_HEADER)
        if challenge is not None and challenge.startswith(TWO_FACTOR_PREFIX):
            raise TwoFactorRequiredError(challenge[len(TWO_FACTOR_PREFIX) :])

    if isinstance(content, Mapping) and "message" in content:
        if status == 400:
            raise BadRequestError(str(content["message"]))
        if status == 422 and "errors" in content:
            errors = [describe_validation_error(error) for error in content["errors"]]
            raise ValidationFailedError("Validation Failed: " + ", ".join(errors))

    if isinstance(content, Mapping) and "error" in content:
        content = content["error"]
    if isinstance(content, Mapping) and "message" in content:
        message = str(content["message"])
    elif isinstance(content, str):
        message = content
    else:
        message = str(content)

    LOG.debug("http_error_classified", status_code=status, message=message)
    raise GenericRequestError(message, status)
