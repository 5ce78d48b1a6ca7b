"""drupal_remote - drive a Drupal site through its HTTP API.

Create and delete users, nodes and taxonomy terms, clear caches, run cron
and read watchdog entries on a remote site, for use from test harnesses.

This package provides:
- A gateway client resolving named sub-APIs (node, term, user, cache, ...)
- Pluggable request authentication (HTTP basic, token, Drupal-Auth header, URL)
- Typed errors for rate limits, two-factor challenges and validation failures
- A driver façade with a uniform RuntimeError failure surface

Example:
    >>> from drupal_remote import RemoteDriver
    >>> driver = RemoteDriver("https://example.com", "admin", "secret")
    >>> node = driver.create_node({"type": "article", "title": "Hello"})
    >>> driver.node_delete(node)
"""

from drupal_remote.api import AbstractApi, ApiInterface, BaseDrupalRemoteApi
from drupal_remote.client import Client, list_apis, register_api
from drupal_remote.config import ClientOptions, DrupalRemoteSettings, get_settings
from drupal_remote.driver import RemoteDriver
from drupal_remote.exceptions import (
    AuthMethodNotImplementedError,
    BadRequestError,
    BootstrapError,
    DrupalRemoteError,
    DrupalResponseCodeError,
    DrupalResponseError,
    FilterFormatError,
    GenericRequestError,
    RateLimitExceededError,
    RequestError,
    TwoFactorRequiredError,
    UnknownApiError,
    UnknownOptionError,
    UnsupportedVersionError,
    ValidationFailedError,
)
from drupal_remote.http import AuthMethod, Credential, HttpClient

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Python API
    "Client",
    "RemoteDriver",
    "HttpClient",
    # Handlers
    "AbstractApi",
    "ApiInterface",
    "BaseDrupalRemoteApi",
    "list_apis",
    "register_api",
    # Authentication
    "AuthMethod",
    "Credential",
    # Configuration
    "ClientOptions",
    "DrupalRemoteSettings",
    "get_settings",
    # Exceptions
    "DrupalRemoteError",
    "UnknownApiError",
    "UnknownOptionError",
    "UnsupportedVersionError",
    "BootstrapError",
    "RequestError",
    "RateLimitExceededError",
    "TwoFactorRequiredError",
    "BadRequestError",
    "ValidationFailedError",
    "GenericRequestError",
    "DrupalResponseCodeError",
    "DrupalResponseError",
    "FilterFormatError",
    "AuthMethodNotImplementedError",
]
