"""Configuration management.

Two layers live here:

- ``ClientOptions`` is the option store owned by a single ``Client``. Its
  field names are the complete set of options ``Client.get_option()`` and
  ``Client.set_option()`` accept.
- ``DrupalRemoteSettings`` loads driver and logging settings from the
  environment with pydantic-settings (``DRUPAL_REMOTE_`` prefix).
"""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from drupal_remote.exceptions import UnsupportedVersionError

SUPPORTED_API_VERSIONS: tuple[str, ...] = ("v1",)

DEFAULT_USER_AGENT = "drupal-remote (python-requests)"


def check_api_version(version: str) -> None:
    """Validate an API version against the supported set.

    Raises:
        UnsupportedVersionError: If *version* is not supported.
    """
    if version not in SUPPORTED_API_VERSIONS:
        raise UnsupportedVersionError(
            f'Invalid API version ("{version}"), valid are: {", ".join(SUPPORTED_API_VERSIONS)}'
        )


@dataclass
class ClientOptions:
    """Options for a remote API client.

    Attributes:
        base_url: Root URL of the remote Drupal site.
        user_agent: User-Agent header sent with every request.
        timeout: Request timeout in seconds.
        api_limit: Call budget reported when the rate limit is exhausted.
        api_version: Remote API version; must be one of SUPPORTED_API_VERSIONS.
        verify_ssl: Verify TLS certificates of the remote site.
        allow_redirects: Follow HTTP redirects.
        cache_dir: Optional directory reserved for transport caching.
    """

    base_url: str = "https://some-url.com/"
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = 10
    api_limit: int = 5000
    api_version: str = "v1"
    verify_ssl: bool = False
    allow_redirects: bool = True
    cache_dir: Path | None = None

    def __post_init__(self) -> None:
        check_api_version(self.api_version)

    @classmethod
    def names(cls) -> frozenset[str]:
        """Return the set of recognised option names."""
        return frozenset(f.name for f in fields(cls))


class DrupalRemoteSettings(BaseSettings):
    """drupal_remote settings loaded from environment variables.

    All settings use the DRUPAL_REMOTE_ prefix for environment variables.
    """

    # Remote site
    base_url: str | None = Field(default=None, description="Base URL of the remote site")
    username: str | None = Field(default=None, description="Login username")
    password: SecretStr | None = Field(default=None, description="Login password")
    request_cookie: SecretStr | None = Field(
        default=None,
        description="Literal Cookie header sent with every request",
    )

    # Transport
    timeout: float = Field(default=10, description="Request timeout in seconds")
    api_version: str = Field(default="v1", description="Remote API version")
    verify_ssl: bool = Field(default=False, description="Verify TLS certificates")

    # Logging configuration
    log_level: str = Field(default="WARNING", description="Logging level")
    log_format: str = Field(default="console", description="Log format: console or json")

    model_config = SettingsConfigDict(
        env_prefix="DRUPAL_REMOTE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def client_options(self) -> dict[str, Any]:
        """Get client option overrides derived from these settings.

        Returns:
            Mapping of ClientOptions names to values.

        Raises:
            UnsupportedVersionError: If api_version is not supported.
        """
        check_api_version(self.api_version)
        return {
            "timeout": self.timeout,
            "api_version": self.api_version,
            "verify_ssl": self.verify_ssl,
        }


# Global settings instance
_settings: DrupalRemoteSettings | None = None


def get_settings() -> DrupalRemoteSettings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = DrupalRemoteSettings()
    return _settings


def reset_settings() -> None:
    """Reset the global settings instance (useful for testing)."""
    global _settings
    _settings = None
