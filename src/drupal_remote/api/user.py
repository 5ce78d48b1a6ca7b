"""Remote user management."""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any

from drupal_remote.api.drupal import BaseDrupalRemoteApi
from drupal_remote.logging import get_logger

LOG = get_logger(__name__)

_USER_FIELDS = ("name", "mail", "pass", "status", "roles")


class User(BaseDrupalRemoteApi):
    """Create, delete and grant roles to remote user accounts."""

    def user_create(self, user: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
        """Create *user* remotely and record its ``uid``.

        Accounts are created active unless ``status`` says otherwise.

        Returns:
            The same user dict, with ``uid`` set.
        """
        payload = {key: user[key] for key in _USER_FIELDS if user.get(key) is not None}
        payload.setdefault("status", 1)
        response = self.post("/user.json", payload)
        user["uid"] = self.confirm_created(response, "user")
        LOG.info("user_created", uid=user["uid"], name=user.get("name"))
        return user

    def user_delete(self, user: MutableMapping[str, Any]) -> None:
        uid = self.entity_id(user, "uid", "user")
        result = self.delete(f"/user/{uid}.json")
        self.confirm_deletion_response(result)
        LOG.info("user_deleted", uid=uid)

    def user_add_role(self, user: MutableMapping[str, Any], role: str) -> None:
        """Grant *role* (by name) to a previously created user."""
        uid = self.entity_id(user, "uid", "user")
        response = self.post(f"/drupal-remote-api/user/{uid}/role", {"role": role})
        self.confirm_status_200(response)
        LOG.info("user_role_added", uid=uid, role=role)
