"""Remote taxonomy term management."""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any

from drupal_remote.api.drupal import BaseDrupalRemoteApi
from drupal_remote.exceptions import DrupalResponseCodeError
from drupal_remote.logging import get_logger

LOG = get_logger(__name__)


class Term(BaseDrupalRemoteApi):
    def find_vocabulary_id(self, machine_name: str) -> Any:
        """Look up a vocabulary id by machine name.

        Raises:
            DrupalResponseCodeError: If no such vocabulary exists.
        """
        response = self.get("/taxonomy_vocabulary.json", {"machine_name": machine_name})
        self.confirm_filter_list_response(response)
        if not response["list"]:
            raise DrupalResponseCodeError(
                f'Remote API Exception: vocabulary "{machine_name}" does not exist'
            )
        return response["list"][0]["vid"]

    def find_term_id(self, name: str, vid: Any) -> Any:
        """Look up a term id by name within a vocabulary.

        Raises:
            DrupalResponseCodeError: If no such term exists.
        """
        response = self.get("/taxonomy_term.json", {"name": name, "vocabulary": vid})
        self.confirm_filter_list_response(response)
        if not response["list"]:
            raise DrupalResponseCodeError(f'Remote API Exception: term "{name}" does not exist')
        return response["list"][0]["tid"]

    def term_create(self, term: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
        """Create *term* remotely and record its ``tid`` and ``vid``.

        The term names its vocabulary by ``vocabulary_machine_name`` and may
        name a ``parent`` term in the same vocabulary.

        Returns:
            The same term dict, with ``tid`` and ``vid`` set.
        """
        vid = self.find_vocabulary_id(term["vocabulary_machine_name"])
        payload: dict[str, Any] = {"name": term["name"], "vocabulary": vid}
        if term.get("description") is not None:
            payload["description"] = term["description"]
        if term.get("weight") is not None:
            payload["weight"] = term["weight"]
        if term.get("parent"):
            payload["parent"] = self.find_term_id(term["parent"], vid)

        response = self.post("/taxonomy_term.json", payload)
        term["tid"] = self.confirm_created(response, "taxonomy_term")
        term["vid"] = vid
        LOG.info("term_created", tid=term["tid"], vid=vid)
        return term

    def term_delete(self, term: MutableMapping[str, Any]) -> None:
        tid = self.entity_id(term, "tid", "taxonomy_term")
        result = self.delete(f"/taxonomy_term/{tid}.json")
        self.confirm_deletion_response(result)
        LOG.info("term_deleted", tid=tid)
