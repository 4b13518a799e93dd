"""
Records for the newsletter domain.

A subscription list is keyed by an arbitrary caller-supplied ``listId``
and holds a set of subscriber email addresses.  Lists are created
lazily by the first subscription and never deleted by the API.
"""

from typing import List

from pydantic import Field

from .base import Record


class NewsletterSubscription(Record):
    """One newsletter list and its subscribers."""

    unique_fields = ("listId",)

    list_id: str = Field(..., description="Name of the newsletter list")
    subscribers: List[str] = Field(default_factory=list, description="Subscribed email addresses, without duplicates")
