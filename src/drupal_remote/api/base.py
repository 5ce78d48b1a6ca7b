"""Base protocol and class for resource API handlers.

A handler wraps a ``Client`` with resource-specific verbs. Every request goes
through the client's ``HttpClient``, so authentication and error
classification apply uniformly; handlers receive the decoded payload.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from drupal_remote.http.mediator import get_content

if TYPE_CHECKING:
    from drupal_remote.client import Client


@runtime_checkable
class ApiInterface(Protocol):
    """Protocol every API handler must satisfy.

    Handlers are constructed with the owning ``Client`` as their only
    argument and expose a page-size setting.
    """

    client: Client

    def get_per_page(self) -> int | None:
        """Return the page size sent with list requests, or None."""
        ...

    def set_per_page(self, per_page: int | None) -> None:
        """Set the page size sent with list requests."""
        ...


class AbstractApi:
    """Shared request plumbing for API handlers."""

    def __init__(self, client: Client) -> None:
        self.client = client
        self.per_page: int | None = None

    def get_per_page(self) -> int | None:
        return self.per_page

    def set_per_page(self, per_page: int | None) -> None:
        self.per_page = per_page

    def get(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Send a GET request and return the decoded payload."""
        query = dict(params or {})
        if self.per_page is not None:
            query.setdefault("per_page", self.per_page)
        response = self.client.http_client.get(path, params=query or None, headers=headers)
        return get_content(response)

    def post(
        self,
        path: str,
        payload: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Send a POST request with a JSON body and return the decoded payload."""
        response = self.client.http_client.post(path, json=payload, headers=headers)
        return get_content(response)

    def put(
        self,
        path: str,
        payload: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Send a PUT request with a JSON body and return the decoded payload."""
        response = self.client.http_client.put(path, json=payload, headers=headers)
        return get_content(response)

    def delete(
        self,
        path: str,
        payload: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Send a DELETE request and return the decoded payload."""
        response = self.client.http_client.delete(path, json=payload, headers=headers)
        return get_content(response)
