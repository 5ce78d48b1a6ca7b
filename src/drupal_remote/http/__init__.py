"""HTTP transport, authentication and response handling."""

from drupal_remote.http.auth import AuthMethod, Credential, DrupalAuth
from drupal_remote.http.client import HttpClient
from drupal_remote.http.errors import check_response
from drupal_remote.http.mediator import get_api_limit, get_content, get_pagination

__all__ = [
    "AuthMethod",
    "Credential",
    "DrupalAuth",
    "HttpClient",
    "check_response",
    "get_api_limit",
    "get_content",
    "get_pagination",
]
