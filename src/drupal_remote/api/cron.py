"""Remote cron runs."""

from __future__ import annotations

from drupal_remote.api.drupal import BaseDrupalRemoteApi

CRON_PATH = "/drupal-remote-api/cron"


class Cron(BaseDrupalRemoteApi):
    def run_cron(self) -> None:
        """Run scheduled maintenance on the remote site.

        Raises:
            DrupalResponseCodeError: When the site reports cron failed.
        """
        response = self.get(CRON_PATH)
        self.confirm_status_200(response)
