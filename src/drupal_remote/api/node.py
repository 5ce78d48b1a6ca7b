"""Remote node creation and deletion."""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any

from drupal_remote.api.drupal import BaseDrupalRemoteApi
from drupal_remote.exceptions import FilterFormatError
from drupal_remote.logging import get_logger

LOG = get_logger(__name__)

FILTER_FORMATS_PATH = "/drupal-remote-api/filter-formats"

# Keys consumed while building the payload rather than sent as fields.
_LOCAL_KEYS = frozenset({"nid", "format"})


class Node(BaseDrupalRemoteApi):
    def get_filter_formats(self) -> list[str]:
        """Return the machine names of the text formats the site offers."""
        response = self.get(FILTER_FORMATS_PATH)
        self.confirm_filter_list_response(response)
        return [str(item.get("format")) for item in response["list"]]

    def build_payload(self, node: MutableMapping[str, Any]) -> dict[str, Any]:
        """Shape a node dict into a RestWS create payload.

        A plain-string ``body`` is wrapped as ``{"value", "format"}`` using
        the node's ``format`` when given.

        Raises:
            FilterFormatError: If ``format`` is not offered by the site.
        """
        payload = {
            key: value
            for key, value in node.items()
            if key not in _LOCAL_KEYS and value is not None
        }
        text_format = node.get("format")
        if text_format is not None:
            formats = self.get_filter_formats()
            if text_format not in formats:
                raise FilterFormatError(
                    f'Filter format "{text_format}" is not available, '
                    f"valid are: {', '.join(formats)}"
                )
        if isinstance(payload.get("body"), str):
            body: dict[str, Any] = {"value": payload["body"]}
            if text_format is not None:
                body["format"] = text_format
            payload["body"] = body
        return payload

    def create_node(self, node: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
        """Create *node* remotely and record its ``nid``.

        Returns:
            The same node dict, with ``nid`` set.
        """
        response = self.post("/node.json", self.build_payload(node))
        node["nid"] = self.confirm_created(response, "node")
        LOG.info("node_created", nid=node["nid"], type=node.get("type"))
        return node

    def delete_node(self, node: MutableMapping[str, Any]) -> None:
        """Delete a previously created node.

        Raises:
            DrupalResponseError: If the deletion did not succeed.
        """
        nid = self.entity_id(node, "nid", "node")
        result = self.delete(f"/node/{nid}.json")
        self.confirm_deletion_response(result)
        LOG.info("node_deleted", nid=nid)
