"""Records for the user domain."""

from typing import List

from pydantic import Field

from .base import Record


class UserInfo(Record):
    unique_fields = ("userId",)

    user_id: str
    email: str
    name: str


class UserAttendance(Record):
    unique_fields = ("userId",)

    user_id: str
    attendance: List[str] = Field(default_factory=list, description="Event IDs the user checked into")
