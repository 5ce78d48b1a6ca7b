"""HTTP transport wrapper around ``requests.Session``.

``HttpClient`` owns the session used to talk to the remote site: it joins
resource paths onto the configured base URL, applies default headers and
transport options, installs the authentication hook and runs the error
classifier on every response through a requests response hook.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any
from urllib.parse import urlsplit

import requests

from drupal_remote.config import ClientOptions
from drupal_remote.http.auth import AuthMethod, Credential, DrupalAuth
from drupal_remote.http.errors import check_response
from drupal_remote.logging import get_logger, redact_headers

LOG = get_logger(__name__)

DEFAULT_HEADERS: dict[str, str] = {"Accept": "application/json"}

ResponseHook = Callable[..., Any]


def log_response(response: requests.Response, *args: Any, **kwargs: Any) -> None:
    """Response hook that logs one request/response cycle at debug level."""
    request = response.request
    LOG.debug(
        "http_request",
        method=request.method if request is not None else None,
        path=urlsplit(response.url).path,
        status_code=response.status_code,
        elapsed_ms=round(response.elapsed.total_seconds() * 1000, 1),
        request_headers=redact_headers(request.headers) if request is not None else {},
    )


class HttpClient:
    """Sends requests to the remote site.

    Args:
        options: Client options; read at request time, so later changes to
            the same object take effect on the next request.
        session: Optional pre-built requests session (useful for testing).
    """

    def __init__(
        self,
        options: ClientOptions | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.options = options if options is not None else ClientOptions()
        self.session = session if session is not None else requests.Session()
        self.headers: dict[str, str] = {}
        self.last_response: requests.Response | None = None
        self.clear_headers()
        self.session.hooks["response"].extend([self._record_response, self._check_response])

    def _record_response(self, response: requests.Response, *args: Any, **kwargs: Any) -> None:
        self.last_response = response

    def _check_response(self, response: requests.Response, *args: Any, **kwargs: Any) -> None:
        check_response(response, self.options.api_limit)

    # -- authentication ----------------------------------------------------

    @property
    def credential(self) -> Credential | None:
        """The credential applied to outgoing requests, if any."""
        auth = self.session.auth
        return auth.credential if isinstance(auth, DrupalAuth) else None

    def authenticate(
        self,
        identifier: str,
        secret: str | None = None,
        method: AuthMethod | str | None = AuthMethod.HTTP_PASSWORD,
        cookie: str | None = None,
    ) -> None:
        """Replace the active credential.

        Args:
            identifier: Username, token or client id.
            secret: Password or client secret.
            method: Authentication method tag.
            cookie: Literal Cookie header for Drupal-Auth logins.
        """
        credential = Credential(identifier=identifier, secret=secret, method=method, cookie=cookie)
        self.session.auth = DrupalAuth(credential)
        LOG.info("authenticated", identifier=identifier, method=str(method))

    # -- headers -----------------------------------------------------------

    def clear_headers(self) -> None:
        """Reset request headers to the defaults."""
        self.headers = dict(DEFAULT_HEADERS)

    def get_headers(self) -> dict[str, str]:
        """Return a copy of the headers sent with every request."""
        return dict(self.headers)

    def set_headers(self, headers: Mapping[str, str]) -> None:
        """Merge *headers* into the headers sent with every request."""
        self.headers.update(headers)

    def add_response_hook(self, hook: ResponseHook, *, first: bool = False) -> None:
        """Register an extra requests response hook.

        Args:
            hook: Callable receiving the response.
            first: Run the hook before the error classifier.
        """
        hooks = self.session.hooks["response"]
        if hook in hooks:
            return
        if first:
            hooks.insert(0, hook)
        else:
            hooks.append(hook)

    # -- requests ----------------------------------------------------------

    def build_url(self, path: str) -> str:
        """Join *path* onto the configured base URL.

        Absolute URLs are returned unchanged.
        """
        if urlsplit(path).scheme:
            return path
        return f"{self.options.base_url.rstrip('/')}/{path.lstrip('/')}"

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> requests.Response:
        """Send one request and return the response.

        Raises:
            RequestError: Subclass matching the error response, raised by
                the response hook.
            requests.RequestException: On transport failures and timeouts.
        """
        merged = {"User-Agent": self.options.user_agent, **self.headers, **(headers or {})}
        response = self.session.request(
            method.upper(),
            self.build_url(path),
            params=params,
            json=json,
            headers=merged,
            timeout=self.options.timeout,
            verify=self.options.verify_ssl,
            allow_redirects=self.options.allow_redirects,
        )
        return response

    def get(
        self, path: str, params: Mapping[str, Any] | None = None, **kwargs: Any
    ) -> requests.Response:
        return self.request("GET", path, params=params, **kwargs)

    def post(self, path: str, json: Any = None, **kwargs: Any) -> requests.Response:
        return self.request("POST", path, json=json, **kwargs)

    def put(self, path: str, json: Any = None, **kwargs: Any) -> requests.Response:
        return self.request("PUT", path, json=json, **kwargs)

    def delete(self, path: str, json: Any = None, **kwargs: Any) -> requests.Response:
        return self.request("DELETE", path, json=json, **kwargs)
