"""
Service layer for newsletter subscriptions.

A subscription list is created by the first subscription to it.  Adding
an address is a single ``find_one_and_update`` with ``$addToSet`` and
``upsert=True``: MongoDB applies it atomically to one document, so
concurrent subscriptions to the same list never lose an address and
repeating a subscription changes nothing.  The unique index on
``listId`` (created by the model registry) prevents two concurrent
first subscriptions from producing two documents for one list.

No format validation is applied to either value, and any list name is
accepted.
"""

import logging
from typing import Any, Optional, Set

from fastapi import status

from event_platform_api.app.core.errors import RouterError
from event_platform_api.app.models.registry import ModelHandle

logger = logging.getLogger(__name__)


def _is_present(value: Any) -> bool:
    return isinstance(value, str) and value != ""


class NewsletterService:
    """Operations on newsletter subscription lists."""

    @classmethod
    async def subscribe(cls, handle: ModelHandle, list_name: Optional[str], email_address: Optional[str]) -> None:
        """Add ``email_address`` to the list ``list_name``, creating the list if needed.

        Raises ``RouterError(400, "InvalidParams")`` without touching
        storage when either value is missing or empty.  Storage errors
        propagate unchanged.
        """
        if not _is_present(list_name) or not _is_present(email_address):
            raise RouterError(status.HTTP_400_BAD_REQUEST, "InvalidParams")

        await handle.collection.find_one_and_update(
            {"listId": list_name},
            {"$addToSet": {"subscribers": email_address}},
            upsert=True,
        )
        logger.info("Subscribed address to newsletter list %s", list_name)

    @classmethod
    async def get_subscribers(cls, handle: ModelHandle, list_name: str) -> Optional[Set[str]]:
        """Return the subscribers of ``list_name``, or ``None`` if the list does not exist."""
        document = await handle.collection.find_one({"listId": list_name})
        if document is None:
            return None
        subscription = handle.parse(document)
        return set(subscription.subscribers)
