"""Authentication strategies applied to outgoing requests.

A ``Credential`` is installed on the HTTP client as a ``DrupalAuth``
instance, which requests calls for every prepared request before it is sent.
"""

from __future__ import annotations

import base64
from dataclasses import dataclass
from enum import StrEnum

import requests
from requests.auth import AuthBase

from drupal_remote.exceptions import AuthMethodNotImplementedError


class AuthMethod(StrEnum):
    """Supported authentication methods."""

    # Username and token in the URL (deprecated).
    URL_TOKEN = "url_token"
    # Client id and secret in the URL, for unauthenticated rate-limited access.
    URL_CLIENT_ID = "url_client_id"
    # HTTP basic authentication with username and password.
    HTTP_PASSWORD = "http_password"
    # Token in the Authorization header.
    HTTP_TOKEN = "http_token"
    # Username and password in the custom Drupal-Auth header.
    HTTP_DRUPAL_LOGIN = "http_drupal_login"


def parse_auth_method(method: str | AuthMethod | None) -> AuthMethod | str | None:
    """Normalize *method* to an AuthMethod, keeping unknown tags as-is."""
    if method is None or isinstance(method, AuthMethod):
        return method
    try:
        return AuthMethod(method)
    except ValueError:
        return method


@dataclass(frozen=True)
class Credential:
    """Login material for a remote site.

    Attributes:
        identifier: Username, token or client id.
        secret: Password or client secret, if the method needs one.
        method: Authentication method; None sends requests unauthenticated.
        cookie: Literal Cookie header value sent with Drupal-Auth logins.
    """

    identifier: str
    secret: str | None = None
    method: AuthMethod | str | None = AuthMethod.HTTP_PASSWORD
    cookie: str | None = None

    def __repr__(self) -> str:
        return (
            f"Credential(identifier={self.identifier!r}, secret={'***' if self.secret else None}, "
            f"method={self.method!r}, cookie={'***' if self.cookie else None})"
        )


def _encode_pair(identifier: str, secret: str | None) -> str:
    raw = f"{identifier}:{secret or ''}".encode()
    return base64.b64encode(raw).decode("ascii")


class DrupalAuth(AuthBase):
    """requests auth hook that applies a Credential to each request."""

    def __init__(self, credential: Credential) -> None:
        self.credential = credential

    def __call__(self, request: requests.PreparedRequest) -> requests.PreparedRequest:
        credential = self.credential
        method = credential.method

        if method is None:
            return request

        if method == AuthMethod.HTTP_PASSWORD:
            request.headers["Authorization"] = (
                f"Basic {_encode_pair(credential.identifier, credential.secret)}"
            )
        elif method == AuthMethod.HTTP_TOKEN:
            request.headers["Authorization"] = f"token {credential.identifier}"
        elif method == AuthMethod.URL_CLIENT_ID:
            request.prepare_url(
                request.url,
                {"client_id": credential.identifier, "client_secret": credential.secret or ""},
            )
        elif method == AuthMethod.URL_TOKEN:
            request.prepare_url(request.url, {"access_token": credential.identifier})
        elif method == AuthMethod.HTTP_DRUPAL_LOGIN:
            request.headers["Drupal-Auth"] = _encode_pair(credential.identifier, credential.secret)
            if credential.cookie is not None:
                request.headers["Cookie"] = credential.cookie
        else:
            raise AuthMethodNotImplementedError(str(method))

        return request
