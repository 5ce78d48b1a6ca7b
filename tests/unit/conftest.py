"""Shared fixtures for unit tests."""

from __future__ import annotations

import json as jsonlib
from collections.abc import Callable
from typing import Any

import pytest
import requests
from requests.adapters import BaseAdapter
from requests.structures import CaseInsensitiveDict

from drupal_remote.client import Client

BASE_URL = "https://drupal.test"


def build_response(
    status_code: int = 200,
    json: Any = None,
    text: str | None = None,
    headers: dict[str, str] | None = None,
    url: str = f"{BASE_URL}/node.json",
    method: str = "GET",
) -> requests.Response:
    """Build a complete ``requests.Response`` without any network I/O."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = "Test"
    response.encoding = "utf-8"
    if text is not None:
        response._content = text.encode("utf-8")
    elif json is not None:
        response._content = jsonlib.dumps(json).encode("utf-8")
    else:
        response._content = b""
    response.headers = CaseInsensitiveDict(headers or {})
    response.url = url
    response.request = requests.Request(method, url).prepare()
    return response


class FakeAdapter(BaseAdapter):
    """Transport adapter that records requests and replays queued responses.

    Unqueued requests are answered with ``200 {}``.
    """

    def __init__(self) -> None:
        super().__init__()
        self.queued: list[dict[str, Any]] = []
        self.requests: list[requests.PreparedRequest] = []
        self.send_kwargs: list[dict[str, Any]] = []

    def queue(
        self,
        status_code: int = 200,
        json: Any = None,
        text: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.queued.append(
            {"status_code": status_code, "json": json, "text": text, "headers": headers}
        )

    def send(self, request: requests.PreparedRequest, **kwargs: Any) -> requests.Response:
        self.requests.append(request)
        self.send_kwargs.append(kwargs)
        reply = self.queued.pop(0) if self.queued else {"status_code": 200, "json": {}}
        response = build_response(url=request.url or "", method=request.method or "GET", **reply)
        response.request = request
        return response

    def close(self) -> None:
        pass

    @property
    def last_request(self) -> requests.PreparedRequest:
        return self.requests[-1]

    def last_json(self) -> Any:
        body = self.last_request.body
        if isinstance(body, bytes):
            body = body.decode("utf-8")
        return jsonlib.loads(body) if body else None


@pytest.fixture
def make_response() -> Callable[..., requests.Response]:
    """Factory fixture for offline ``requests.Response`` objects."""
    return build_response


@pytest.fixture
def adapter() -> FakeAdapter:
    return FakeAdapter()


@pytest.fixture
def client(adapter: FakeAdapter) -> Client:
    """Client whose transport is answered by the fake adapter."""
    client = Client(options={"base_url": BASE_URL})
    client.http_client.session.mount("https://", adapter)
    return client
