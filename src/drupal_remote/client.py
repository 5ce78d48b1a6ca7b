"""Gateway to a remote Drupal site's API.

``Client`` owns the configuration, the HTTP transport and the active
credential, and resolves named sub-APIs to handler instances.

Handlers are looked up in a registry mapping names to ``module:Class``
paths. Strings enable lazy loading and let other packages register their
own handlers:

    >>> from drupal_remote.client import Client, register_api
    >>> register_api("menu", "mypackage.api:Menu")
    >>> client = Client()
    >>> client.set_option("base_url", "https://example.com")
    >>> client.authenticate("admin", "secret", "http_drupal_login")
    >>> client.api("cache").clear_cache()
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict
from importlib import import_module
from types import MappingProxyType
from typing import Any

from drupal_remote.api.base import ApiInterface
from drupal_remote.config import SUPPORTED_API_VERSIONS, ClientOptions, check_api_version
from drupal_remote.exceptions import UnknownApiError, UnknownOptionError
from drupal_remote.http.auth import AuthMethod, parse_auth_method
from drupal_remote.http.client import HttpClient, log_response
from drupal_remote.logging import get_logger

LOG = get_logger(__name__)

# API registry maps names to module:class paths
_API_REGISTRY: dict[str, str] = {
    "node": "drupal_remote.api.node:Node",
    "nodes": "drupal_remote.api.node:Node",
    "term": "drupal_remote.api.term:Term",
    "terms": "drupal_remote.api.term:Term",
    "user": "drupal_remote.api.user:User",
    "users": "drupal_remote.api.user:User",
    "cache": "drupal_remote.api.cache:Cache",
    "cron": "drupal_remote.api.cron:Cron",
    "watchdog": "drupal_remote.api.watchdog:Watchdog",
}


def register_api(name: str, module_class_path: str) -> None:
    """Register a custom API handler.

    Args:
        name: Handler name passed to ``Client.api()``.
        module_class_path: Import path in format "module.path:ClassName".

    Raises:
        ValueError: If name is already registered or path format is invalid.
    """
    if name in _API_REGISTRY:
        raise ValueError(f"API '{name}' is already registered")

    if ":" not in module_class_path:
        raise ValueError(
            f"Invalid module_class_path '{module_class_path}'. "
            "Expected format: 'module.path:ClassName'"
        )

    _API_REGISTRY[name] = module_class_path


def unregister_api(name: str) -> None:
    """Remove a handler registered with ``register_api()``."""
    _API_REGISTRY.pop(name, None)


def list_apis() -> list[str]:
    """List registered API handler names.

    Returns:
        Sorted list of registered names, aliases included.
    """
    return sorted(_API_REGISTRY.keys())


def _load_class(path: str) -> type:
    """Import a class from ``module:Class`` or ``module.Class``."""
    if ":" in path:
        module_path, class_name = path.rsplit(":", 1)
    else:
        module_path, _, class_name = path.rpartition(".")
    if not module_path or not class_name:
        raise ImportError(f"'{path}' is not an importable class path")

    cls = getattr(import_module(module_path), class_name)
    if not isinstance(cls, type):
        raise ImportError(f"'{path}' does not name a class")
    return cls


class Client:
    """Remote API client.

    Args:
        http_client: Optional pre-built transport (useful for testing). When
            omitted, one is built from the current options on first use.
        options: Optional option overrides applied on top of the defaults.

    Raises:
        UnknownOptionError: If *options* names an unknown option.
        UnsupportedVersionError: If *options* sets an unsupported api_version.
    """

    def __init__(
        self,
        http_client: HttpClient | None = None,
        options: Mapping[str, Any] | None = None,
    ) -> None:
        self._options = ClientOptions()
        self._http_client = http_client
        self._apis: dict[type, Any] = {}
        for name, value in (options or {}).items():
            self.set_option(name, value)

    # -- sub-APIs ----------------------------------------------------------

    def api(self, name: str | type) -> Any:
        """Return the API handler for *name*.

        Args:
            name: A registered name (e.g. "user"), an import path
                ("module:Class" or "module.Class") or a handler class. The
                class is constructed with this client.

        Returns:
            The handler instance, cached per client.

        Raises:
            UnknownApiError: If nothing resolves to a valid handler.
        """
        handler_class = self._resolve_handler_class(name)

        api = self._apis.get(handler_class)
        if api is not None:
            return api

        try:
            api = handler_class(self)
        except TypeError as exc:
            raise UnknownApiError(f'Undefined api instance called: "{name}"') from exc
        if not isinstance(api, ApiInterface):
            raise UnknownApiError(f'Undefined api instance called: "{name}"')

        self._apis[handler_class] = api
        LOG.debug("api_resolved", name=str(name), handler=handler_class.__name__)
        return api

    def _resolve_handler_class(self, name: str | type) -> type:
        if isinstance(name, type):
            return name

        if not isinstance(name, str):
            raise UnknownApiError(f'Undefined api instance called: "{name}"')

        path = _API_REGISTRY.get(name)
        if path is None and ("." in name or ":" in name):
            path = name
        if path is None:
            raise UnknownApiError(f'Undefined api instance called: "{name}"')

        try:
            return _load_class(path)
        except (ImportError, AttributeError) as exc:
            raise UnknownApiError(f'Undefined api instance called: "{name}"') from exc

    # -- authentication ----------------------------------------------------

    def authenticate(
        self,
        identifier: str,
        secret: str | None = None,
        method: AuthMethod | str | None = None,
        cookie: str | None = None,
    ) -> None:
        """Authenticate all subsequent requests.

        The method may be passed in place of the secret:
        ``authenticate("token", "http_token")`` is the same as
        ``authenticate("token", None, "http_token")``.

        Args:
            identifier: Username, token or client id.
            secret: Password or client secret (or an AuthMethod tag).
            method: Authentication method; defaults to HTTP basic.
            cookie: Literal Cookie header sent with Drupal-Auth logins.

        Raises:
            ValueError: If neither a secret nor a method is given.
        """
        if secret is None and method is None:
            raise ValueError("You need to specify authentication method!")

        if method is None and secret in set(AuthMethod):
            method = secret
            secret = None

        if method is None:
            method = AuthMethod.HTTP_PASSWORD

        self.http_client.authenticate(identifier, secret, parse_auth_method(method), cookie)

    def enable_logging(self) -> None:
        """Log every request/response cycle at debug level."""
        self.http_client.add_response_hook(log_response, first=True)

    # -- transport ---------------------------------------------------------

    @property
    def http_client(self) -> HttpClient:
        """The HTTP transport, built from the current options on first use."""
        if self._http_client is None:
            self._http_client = HttpClient(self._options)
        return self._http_client

    def set_http_client(self, http_client: HttpClient) -> None:
        self._http_client = http_client

    def clear_headers(self) -> None:
        self.http_client.clear_headers()

    def get_headers(self) -> dict[str, str]:
        return self.http_client.get_headers()

    def set_headers(self, headers: Mapping[str, str]) -> None:
        self.http_client.set_headers(headers)

    # -- options -----------------------------------------------------------

    @property
    def options(self) -> Mapping[str, Any]:
        """Read-only view of the current options."""
        return MappingProxyType(asdict(self._options))

    def get_option(self, name: str) -> Any:
        """Get an option value by name.

        Raises:
            UnknownOptionError: If *name* is not a recognised option.
        """
        if name not in ClientOptions.names():
            raise UnknownOptionError(f'Undefined option called: "{name}"')
        return getattr(self._options, name)

    def set_option(self, name: str, value: Any) -> None:
        """Set an option value by name.

        Raises:
            UnknownOptionError: If *name* is not a recognised option.
            UnsupportedVersionError: If an unsupported api_version is given.
        """
        if name not in ClientOptions.names():
            raise UnknownOptionError(f'Undefined option called: "{name}"')
        if name == "api_version":
            check_api_version(value)
        setattr(self._options, name, value)

    def get_supported_api_versions(self) -> list[str]:
        return list(SUPPORTED_API_VERSIONS)

    def get_base_path(self) -> str:
        return f"/api/{self._options.api_version}"
