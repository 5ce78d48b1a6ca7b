"""Custom exceptions for drupal_remote package."""


class DrupalRemoteError(Exception):
    """Base exception class for all drupal_remote errors."""


class UnknownApiError(DrupalRemoteError):
    """Raised when a sub-API name resolves to no registered handler."""


class OptionError(DrupalRemoteError):
    """Raised when client configuration is accessed incorrectly."""


class UnknownOptionError(OptionError):
    """Raised when an option name is not part of the client option set."""


class UnsupportedVersionError(OptionError):
    """Raised when ``api_version`` is set to a version the client cannot speak."""


class BootstrapError(DrupalRemoteError):
    """Raised when the driver is missing the parameters it needs to connect."""


class RequestError(DrupalRemoteError):
    """Raised when the remote site answers with a client or server error.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code of the failed response, if known.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class RateLimitExceededError(RequestError):
    """The remote API call quota has been used up.

    Attributes:
        limit: The configured call limit (or remaining count) reported.
    """

    def __init__(self, limit: int | str | None = None) -> None:
        super().__init__(f"You have reached the API call limit! Actual limit is: {limit}", 403)
        self.limit = limit


class TwoFactorRequiredError(RequestError):
    """The remote site demands a second authentication factor.

    Attributes:
        challenge_type: Type of challenge requested (e.g. 'app', 'sms').
    """

    def __init__(self, challenge_type: str) -> None:
        super().__init__(f"Two factor authentication is required ({challenge_type})", 401)
        self.challenge_type = challenge_type


class BadRequestError(RequestError):
    """Raised for a 400 response carrying a structured message."""

    def __init__(self, message: str) -> None:
        super().__init__(message, 400)


class ValidationFailedError(RequestError):
    """Raised for a 422 response carrying field-level validation errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message, 422)


class GenericRequestError(RequestError):
    """Raised for any other client or server error response."""


class DrupalResponseCodeError(DrupalRemoteError):
    """Raised when a response reports a logical failure despite HTTP success."""


class DrupalResponseError(DrupalRemoteError):
    """Raised when a deletion did not produce an empty result."""


class FilterFormatError(DrupalRemoteError):
    """Raised when a node body asks for a text format the site does not offer."""


class AuthMethodNotImplementedError(NotImplementedError):
    """Raised when a credential carries an authentication method with no strategy.

    This signals a programming error, so it does not derive from
    DrupalRemoteError.
    """

    def __init__(self, method: str) -> None:
        super().__init__(f"{method} not yet implemented")
        self.method = method
