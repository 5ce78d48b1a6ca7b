"""Remote watchdog (dblog) access."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from drupal_remote.api.drupal import BaseDrupalRemoteApi

WATCHDOG_PATH = "/drupal-remote-api/watchdog"

# RFC 5424 severity levels as used by Drupal's watchdog.
SEVERITY_NAMES: dict[int, str] = {
    0: "emergency",
    1: "alert",
    2: "critical",
    3: "error",
    4: "warning",
    5: "notice",
    6: "info",
    7: "debug",
}


def format_watchdog_entry(entry: Mapping[str, Any]) -> str:
    """Render one watchdog entry as ``type (severity): message``.

    Placeholders in the message are replaced with the entry's variables in
    a single pass, longest placeholder first. Substituted text is not
    scanned again.
    """
    message = str(entry.get("message", ""))
    variables = entry.get("variables") or {}
    if isinstance(variables, Mapping):
        replacements = {str(key): str(value) for key, value in variables.items()}
        keys = sorted((key for key in replacements if key), key=len, reverse=True)
        if keys:
            pattern = re.compile("|".join(re.escape(key) for key in keys))
            message = pattern.sub(lambda match: replacements[match.group(0)], message)

    severity = entry.get("severity")
    try:
        severity_name = SEVERITY_NAMES.get(int(severity), str(severity))
    except (TypeError, ValueError):
        severity_name = str(severity)
    return f"{entry.get('type', '')} ({severity_name}): {message}"


class Watchdog(BaseDrupalRemoteApi):
    def fetch_watchdog(
        self,
        count: int = 10,
        type: str | None = None,
        severity: str | int | None = None,
    ) -> str:
        """Fetch the most recent watchdog entries.

        Args:
            count: Maximum number of entries.
            type: Only entries of this type (e.g. 'php').
            severity: Only entries of this severity.

        Returns:
            Formatted entries, one per line, newest first.

        Raises:
            DrupalResponseCodeError: If the response carries no entry list.
        """
        params: dict[str, Any] = {"count": count}
        if type is not None:
            params["type"] = type
        if severity is not None:
            params["severity"] = severity

        response = self.get(WATCHDOG_PATH, params)
        self.confirm_filter_list_response(response)
        return "\n".join(format_watchdog_entry(entry) for entry in response["list"])
