"""Response validators shared by the Drupal resource handlers."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any

from drupal_remote.api.base import AbstractApi
from drupal_remote.exceptions import DrupalResponseCodeError, DrupalResponseError


class BaseDrupalRemoteApi(AbstractApi):
    """Handler base adding semantic checks on decoded Drupal responses."""

    def confirm_status_200(self, response: Any) -> None:
        """Confirm that a response reports success.

        Responses carrying an ``id`` count as successful whatever their
        ``response_code``: RestWS entity responses omit the status code.

        Raises:
            DrupalResponseCodeError: If there is no ``id`` and ``response_code``
                is present and not 200.
        """
        if not isinstance(response, Mapping):
            return
        if (
            "id" not in response
            and "response_code" in response
            and response["response_code"] != 200
        ):
            raise DrupalResponseCodeError(f"Remote API Exception: {response.get('message', '')}")

    def confirm_filter_list_response(self, response: Any) -> None:
        """Confirm that a filtered collection query returned a ``list``.

        Raises:
            DrupalResponseCodeError: If the ``list`` key is absent.
        """
        if not isinstance(response, Mapping) or "list" not in response:
            raise DrupalResponseCodeError(
                f"Remote API Exception: RestWS filter list not present: {response}"
            )

    def confirm_deletion_response(self, result: Any) -> None:
        """Confirm that a deletion returned an empty collection.

        Raises:
            DrupalResponseError: If *result* is anything but an empty list or dict.
        """
        if not (isinstance(result, (list, tuple, Mapping)) and len(result) == 0):
            raise DrupalResponseError(f"Remote API Exception: Deletion has failed: {result}")

    def confirm_created(self, response: Any, resource: str) -> Any:
        """Return the id of a newly created entity.

        Raises:
            DrupalResponseCodeError: If the response reports failure or has no id.
        """
        self.confirm_status_200(response)
        if not isinstance(response, Mapping) or response.get("id") is None:
            raise DrupalResponseCodeError(
                f"Remote API Exception: {resource} was not created: {response}"
            )
        return response["id"]

    @staticmethod
    def entity_id(entity: MutableMapping[str, Any], key: str, resource: str) -> Any:
        """Return ``entity[key]``.

        Raises:
            ValueError: If the entity has not been saved remotely.
        """
        value = entity.get(key)
        if value is None:
            raise ValueError(f"Cannot address {resource} without '{key}'")
        return value
