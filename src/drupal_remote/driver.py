"""Test-automation driver backed by a remote Drupal site.

``RemoteDriver`` exposes the operations a Behat-style test harness needs
(create users, nodes and terms, clear caches, run cron, read watchdog) on top
of a ``Client``. Every operation runs inside one translation boundary: any
failure beneath it is re-raised as a plain ``RuntimeError`` carrying the
original message, with the typed error chained as ``__cause__``.

Example:
    >>> driver = RemoteDriver("https://example.com", "admin", "secret")
    >>> user = driver.user_create({"name": "alice", "mail": "alice@example.com", "pass": "pw"})
    >>> driver.user_add_role(user, "editor")
    >>> driver.user_delete(user)
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, MutableMapping
from contextlib import contextmanager
from typing import Any

from drupal_remote.client import Client
from drupal_remote.config import DrupalRemoteSettings, get_settings
from drupal_remote.exceptions import BootstrapError
from drupal_remote.http.auth import AuthMethod
from drupal_remote.logging import get_logger

LOG = get_logger(__name__)


@contextmanager
def _translate_errors(operation: str) -> Iterator[None]:
    """Re-raise any exception from the block as ``RuntimeError``."""
    try:
        yield
    except Exception as exc:
        LOG.warning("driver_operation_failed", operation=operation, error=type(exc).__name__)
        raise RuntimeError(str(exc)) from exc


class RemoteDriver:
    """Drives a remote Drupal site through its HTTP API.

    Args:
        base_url: Base URL of the site, e.g. ``http://192.168.44.44/drupal``.
        login_username: Account used for Drupal-Auth logins.
        login_password: Password for that account.
        request_cookie: Literal Cookie header sent with every request.
        remote_client: A ready ``Client`` (used as-is), a ``Client`` subclass
            to instantiate at bootstrap, or None for the default ``Client``.
        options: Extra client options applied at bootstrap.

    Raises:
        BootstrapError: If no base URL is given.
    """

    def __init__(
        self,
        base_url: str | None = None,
        login_username: str | None = None,
        login_password: str | None = None,
        request_cookie: str | None = None,
        remote_client: Client | type[Client] | None = None,
        options: Mapping[str, Any] | None = None,
    ) -> None:
        if not base_url:
            raise BootstrapError("A site base url is required.")
        self.base_url = base_url
        self.login_username = login_username
        self.login_password = login_password
        self.request_cookie = request_cookie
        self.options = dict(options or {})
        self._remote_client = remote_client
        self._bootstrapped = False

    @classmethod
    def from_settings(cls, settings: DrupalRemoteSettings | None = None) -> RemoteDriver:
        """Build a driver from ``DRUPAL_REMOTE_*`` settings.

        Raises:
            BootstrapError: If no base URL is configured.
        """
        settings = settings or get_settings()
        return cls(
            base_url=settings.base_url,
            login_username=settings.username,
            login_password=settings.password.get_secret_value() if settings.password else None,
            request_cookie=(
                settings.request_cookie.get_secret_value() if settings.request_cookie else None
            ),
            options=settings.client_options(),
        )

    # -- lifecycle ---------------------------------------------------------

    def bootstrap(self) -> None:
        """Create and authenticate the client unless one was injected.

        Idempotent: later calls do nothing.
        """
        if self._bootstrapped:
            return
        if not isinstance(self._remote_client, Client):
            client_class = self._remote_client or Client
            client = client_class()
            client.set_option("base_url", self.base_url)
            for name, value in self.options.items():
                client.set_option(name, value)
            client.authenticate(
                self.login_username or "",
                self.login_password,
                AuthMethod.HTTP_DRUPAL_LOGIN,
                self.request_cookie,
            )
            self._remote_client = client
        self._bootstrapped = True
        LOG.info("driver_bootstrapped", base_url=self.base_url)

    def is_bootstrapped(self) -> bool:
        return self._bootstrapped

    @property
    def client(self) -> Client | type[Client] | None:
        """The configured client, or the class to build one from."""
        return self._remote_client

    def set_client(self, client: Client) -> None:
        self._remote_client = client

    def api(self, name: str) -> Any:
        """Return the named API handler, bootstrapping first if needed."""
        self.bootstrap()
        assert isinstance(self._remote_client, Client)  # for type narrowing
        return self._remote_client.api(name)

    # -- users -------------------------------------------------------------

    def user_create(self, user: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
        with _translate_errors("user_create"):
            return self.api("user").user_create(user)

    def user_delete(self, user: MutableMapping[str, Any]) -> None:
        with _translate_errors("user_delete"):
            self.api("user").user_delete(user)

    def user_add_role(self, user: MutableMapping[str, Any], role: str) -> None:
        with _translate_errors("user_add_role"):
            self.api("user").user_add_role(user, role)

    # -- content -----------------------------------------------------------

    def create_node(self, node: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
        with _translate_errors("create_node"):
            return self.api("node").create_node(node)

    def node_delete(self, node: MutableMapping[str, Any]) -> None:
        with _translate_errors("node_delete"):
            self.api("node").delete_node(node)

    def create_term(self, term: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
        with _translate_errors("create_term"):
            return self.api("term").term_create(term)

    def term_delete(self, term: MutableMapping[str, Any]) -> None:
        with _translate_errors("term_delete"):
            self.api("term").term_delete(term)

    # -- maintenance -------------------------------------------------------

    def clear_cache(self, type: str | None = None) -> None:
        with _translate_errors("clear_cache"):
            self.api("cache").clear_cache(type)

    def run_cron(self) -> None:
        with _translate_errors("run_cron"):
            self.api("cron").run_cron()

    def fetch_watchdog(
        self,
        count: int = 10,
        type: str | None = None,
        severity: str | int | None = None,
    ) -> str:
        with _translate_errors("fetch_watchdog"):
            return self.api("watchdog").fetch_watchdog(count, type, severity)

    def clear_static_caches(self) -> None:
        """No-op: a remote site keeps no static caches in this process."""

    def process_batch(self) -> None:
        """No-op: batch processing happens on the remote site."""
