"""Records for the auth domain."""

from typing import List

from pydantic import Field

from .base import Record


class AuthInfo(Record):
    """Identity provider link and granted roles for one user."""

    unique_fields = ("userId",)

    user_id: str
    provider: str
    roles: List[str] = Field(default_factory=list)
