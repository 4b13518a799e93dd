"""
Pydantic schemas for the newsletter endpoints.

Both request fields are optional at the schema level; presence and
emptiness are checked by the service so that every malformed request
yields the same ``InvalidParams`` error.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SubscribeRequest(BaseModel):
    """Body of ``POST /newsletter/subscribe/``."""

    model_config = ConfigDict(populate_by_name=True)

    list_name: Optional[str] = Field(None, alias="listName", description="Name of the list to add the address to")
    email_address: Optional[str] = Field(None, alias="emailAddress", description="Email address to subscribe")


class SubscribeResponse(BaseModel):
    status: str = "Success"
