"""Records for the shop domain."""

from typing import List

from pydantic import Field

from .base import Record


class ShopItem(Record):
    """An item that attendees can buy with coins.

    ``instances`` holds the redeemable codes still available; the
    quantity left is the length of that list.
    """

    unique_fields = ("itemId",)

    item_id: str
    name: str
    price: int = Field(..., ge=0)
    is_raffle: bool = False
    image_url: str = ""
    instances: List[str] = Field(default_factory=list)
