"""Remote cache clearing."""

from __future__ import annotations

from drupal_remote.api.drupal import BaseDrupalRemoteApi

CACHE_PATH = "/drupal-remote-api/cache"


class Cache(BaseDrupalRemoteApi):
    def clear_cache(self, type: str | None = None) -> None:
        """Initiate a remote cache clear.

        Args:
            type: Optional cache bin to clear; all caches when omitted.

        Raises:
            DrupalResponseCodeError: When the site reports the clear failed.
        """
        params = {"type": type} if type else None
        response = self.get(CACHE_PATH, params)
        self.confirm_status_200(response)
