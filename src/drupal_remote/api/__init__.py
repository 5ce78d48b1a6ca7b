"""Resource API handlers.

Handlers are resolved by name through ``Client.api()``:

    - node / nodes: Node
    - term / terms: Term
    - user / users: User
    - cache: Cache
    - cron: Cron
    - watchdog: Watchdog
"""

from drupal_remote.api.base import AbstractApi, ApiInterface
from drupal_remote.api.cache import Cache
from drupal_remote.api.cron import Cron
from drupal_remote.api.drupal import BaseDrupalRemoteApi
from drupal_remote.api.node import Node
from drupal_remote.api.term import Term
from drupal_remote.api.user import User
from drupal_remote.api.watchdog import Watchdog

__all__ = [
    "AbstractApi",
    "ApiInterface",
    "BaseDrupalRemoteApi",
    "Cache",
    "Cron",
    "Node",
    "Term",
    "User",
    "Watchdog",
]
