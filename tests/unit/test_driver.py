"""Tests for drupal_remote.driver (RemoteDriver façade)."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from drupal_remote.client import Client
from drupal_remote.config import get_settings, reset_settings
from drupal_remote.driver import RemoteDriver
from drupal_remote.exceptions import (
    BootstrapError,
    DrupalResponseCodeError,
    RateLimitExceededError,
    UnsupportedVersionError,
)
from drupal_remote.http.auth import AuthMethod, Credential


class CustomClient(Client):
    """Client subclass used to check class injection."""


def _mock_client() -> MagicMock:
    return MagicMock(spec=Client)


# ---------------------------------------------------------------------------
# Construction and bootstrap
# ---------------------------------------------------------------------------


class TestBootstrap:
    """Tests for RemoteDriver construction and bootstrap."""

    @pytest.mark.parametrize("base_url", [None, ""])
    def test_requires_base_url(self, base_url) -> None:
        with pytest.raises(BootstrapError, match="base url is required"):
            RemoteDriver(base_url)

    def test_not_bootstrapped_initially(self) -> None:
        driver = RemoteDriver("https://example.com", "admin", "pw")
        assert not driver.is_bootstrapped()
        assert driver.client is None

    def test_bootstrap_builds_default_client(self) -> None:
        driver = RemoteDriver("https://example.com", "admin", "pw", "sid=1")
        driver.bootstrap()

        client = driver.client
        assert isinstance(client, Client)
        assert driver.is_bootstrapped()
        assert client.get_option("base_url") == "https://example.com"
        assert client.http_client.credential == Credential(
            "admin", "pw", AuthMethod.HTTP_DRUPAL_LOGIN, "sid=1"
        )

    def test_bootstrap_is_idempotent(self) -> None:
        driver = RemoteDriver("https://example.com", "admin", "pw")
        driver.bootstrap()
        client = driver.client
        driver.bootstrap()
        assert driver.client is client

    def test_bootstrap_applies_options(self) -> None:
        driver = RemoteDriver("https://example.com", "admin", "pw", options={"timeout": 3})
        driver.bootstrap()
        assert driver.client.get_option("timeout") == 3

    def test_bootstrap_rejects_bad_options(self) -> None:
        driver = RemoteDriver("https://example.com", options={"api_version": "v2"})
        with pytest.raises(UnsupportedVersionError):
            driver.bootstrap()
        assert not driver.is_bootstrapped()

    def test_client_class_injection(self) -> None:
        driver = RemoteDriver("https://example.com", "admin", "pw", remote_client=CustomClient)
        driver.bootstrap()
        assert type(driver.client) is CustomClient
        assert driver.client.get_option("base_url") == "https://example.com"

    def test_client_instance_is_used_as_is(self) -> None:
        client = Client()
        driver = RemoteDriver("https://example.com", remote_client=client)
        driver.bootstrap()
        assert driver.client is client
        assert client.http_client.credential is None

    def test_set_client(self) -> None:
        driver = RemoteDriver("https://example.com")
        client = Client()
        driver.set_client(client)
        driver.bootstrap()
        assert driver.client is client

    def test_api_bootstraps_lazily(self) -> None:
        driver = RemoteDriver("https://example.com", "admin", "pw")
        api = driver.api("cache")
        assert driver.is_bootstrapped()
        assert api.client is driver.client


class TestFromSettings:
    """Tests for RemoteDriver.from_settings."""

    def test_from_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("DRUPAL_REMOTE_BASE_URL", "https://env.test")
        monkeypatch.setenv("DRUPAL_REMOTE_USERNAME", "admin")
        monkeypatch.setenv("DRUPAL_REMOTE_PASSWORD", "pw")
        monkeypatch.setenv("DRUPAL_REMOTE_REQUEST_COOKIE", "sid=9")
        monkeypatch.setenv("DRUPAL_REMOTE_TIMEOUT", "15")
        reset_settings()

        driver = RemoteDriver.from_settings()

        assert driver.base_url == "https://env.test"
        assert driver.login_username == "admin"
        assert driver.login_password == "pw"
        assert driver.request_cookie == "sid=9"
        assert driver.options["timeout"] == 15

    def test_missing_base_url(self) -> None:
        with pytest.raises(BootstrapError):
            RemoteDriver.from_settings(get_settings())


# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------


class TestOperations:
    """Each operation delegates to client.api(name).verb(...)."""

    @pytest.mark.parametrize(
        ("operation", "args", "api_name", "verb", "verb_args"),
        [
            ("user_create", ({"name": "a"},), "user", "user_create", ({"name": "a"},)),
            ("user_delete", ({"uid": 1},), "user", "user_delete", ({"uid": 1},)),
            ("user_add_role", ({"uid": 1}, "editor"), "user", "user_add_role", ({"uid": 1}, "editor")),
            ("create_node", ({"title": "t"},), "node", "create_node", ({"title": "t"},)),
            ("node_delete", ({"nid": 2},), "node", "delete_node", ({"nid": 2},)),
            ("create_term", ({"name": "x"},), "term", "term_create", ({"name": "x"},)),
            ("term_delete", ({"tid": 3},), "term", "term_delete", ({"tid": 3},)),
            ("clear_cache", (), "cache", "clear_cache", (None,)),
            ("clear_cache", ("menu",), "cache", "clear_cache", ("menu",)),
            ("run_cron", (), "cron", "run_cron", ()),
            ("fetch_watchdog", (), "watchdog", "fetch_watchdog", (10, None, None)),
            ("fetch_watchdog", (5, "php", 3), "watchdog", "fetch_watchdog", (5, "php", 3)),
        ],
    )
    def test_delegation(self, operation, args, api_name, verb, verb_args) -> None:
        client = _mock_client()
        driver = RemoteDriver("https://example.com", remote_client=client)

        getattr(driver, operation)(*args)

        client.api.assert_called_with(api_name)
        getattr(client.api.return_value, verb).assert_called_once_with(*verb_args)

    def test_returns_handler_result(self) -> None:
        client = _mock_client()
        client.api.return_value.create_node.return_value = {"title": "t", "nid": 5}
        driver = RemoteDriver("https://example.com", remote_client=client)
        assert driver.create_node({"title": "t"}) == {"title": "t", "nid": 5}

    def test_noop_hooks(self) -> None:
        client = _mock_client()
        driver = RemoteDriver("https://example.com", remote_client=client)
        assert driver.process_batch() is None
        assert driver.clear_static_caches() is None
        client.api.assert_not_called()


class TestErrorTranslation:
    """Failures surface as RuntimeError carrying the original message."""

    @pytest.mark.parametrize(
        "error",
        [
            DrupalResponseCodeError("Remote API Exception: boom"),
            RateLimitExceededError(5000),
            ValueError("Cannot address node without 'nid'"),
            KeyError("vocabulary_machine_name"),
        ],
    )
    def test_flattens_errors(self, error: Exception) -> None:
        client = _mock_client()
        client.api.return_value.create_node.side_effect = error
        driver = RemoteDriver("https://example.com", remote_client=client)

        with pytest.raises(RuntimeError) as exc_info:
            driver.create_node({})

        assert type(exc_info.value) is RuntimeError
        assert str(exc_info.value) == str(error)
        assert exc_info.value.__cause__ is error

    def test_bootstrap_errors_are_translated(self) -> None:
        driver = RemoteDriver("https://example.com", options={"nope": 1})
        with pytest.raises(RuntimeError, match="Undefined option called"):
            driver.run_cron()

    def test_end_to_end_http_failure(self, client: Client, adapter) -> None:
        adapter.queue(500, json={"error": {"message": "Database offline"}})
        driver = RemoteDriver("https://drupal.test", remote_client=client)
        with pytest.raises(RuntimeError, match="Database offline"):
            driver.clear_cache()

    def test_end_to_end_success(self, client: Client, adapter) -> None:
        adapter.queue(200, json={"id": 9})
        driver = RemoteDriver("https://drupal.test", remote_client=client)
        user = driver.user_create({"name": "alice"})
        assert user["uid"] == 9
