"""Tests for drupal_remote.exceptions module."""

from __future__ import annotations

import pytest

from drupal_remote.exceptions import (
    AuthMethodNotImplementedError,
    BadRequestError,
    DrupalRemoteError,
    GenericRequestError,
    OptionError,
    RateLimitExceededError,
    RequestError,
    TwoFactorRequiredError,
    UnknownOptionError,
    UnsupportedVersionError,
    ValidationFailedError,
)


class TestRequestErrors:
    """Tests for the RequestError family."""

    @pytest.mark.parametrize(
        "error_class",
        [BadRequestError, ValidationFailedError, GenericRequestError],
    )
    def test_inherits_from_request_error(self, error_class: type) -> None:
        assert issubclass(error_class, RequestError)
        assert issubclass(error_class, DrupalRemoteError)

    def test_rate_limit_carries_limit(self) -> None:
        err = RateLimitExceededError(5000)
        assert err.limit == 5000
        assert "5000" in str(err)

    def test_two_factor_carries_challenge_type(self) -> None:
        err = TwoFactorRequiredError("sms")
        assert err.challenge_type == "sms"
        assert err.status_code == 401

    def test_bad_request_status(self) -> None:
        err = BadRequestError("Problems parsing JSON")
        assert err.status_code == 400
        assert err.message == "Problems parsing JSON"
        assert str(err) == "Problems parsing JSON"

    def test_generic_request_error_status(self) -> None:
        err = GenericRequestError("Not Found", 404)
        assert err.status_code == 404
        assert str(err) == "Not Found"


class TestOptionErrors:
    """Tests for configuration errors."""

    def test_option_errors_share_base(self) -> None:
        assert issubclass(UnknownOptionError, OptionError)
        assert issubclass(UnsupportedVersionError, OptionError)

    def test_option_error_is_not_request_error(self) -> None:
        assert not issubclass(OptionError, RequestError)


class TestAuthMethodNotImplementedError:
    """Tests for AuthMethodNotImplementedError."""

    def test_is_not_recoverable_error(self) -> None:
        """Unimplemented auth methods are programming errors."""
        assert issubclass(AuthMethodNotImplementedError, NotImplementedError)
        assert not issubclass(AuthMethodNotImplementedError, DrupalRemoteError)

    def test_message_names_method(self) -> None:
        err = AuthMethodNotImplementedError("oauth2")
        assert str(err) == "oauth2 not yet implemented"
        assert err.method == "oauth2"
