"""
Records for the attendee domain.

Metadata tracks per-attendee bookkeeping used by staff (food wave,
coin balance); the profile is the public, leaderboard-facing view;
following lists the events an attendee has chosen to follow.
"""

from typing import List

from pydantic import Field

from .base import Record


class AttendeeMetadata(Record):
    unique_fields = ("userId",)

    user_id: str
    food_wave: int = 0
    coins: int = Field(0, ge=0, description="Shop currency balance")


class AttendeeProfile(Record):
    unique_fields = ("userId",)

    user_id: str
    display_name: str
    avatar_url: str = ""
    discord_tag: str = ""
    points: int = 0


class AttendeeFollowing(Record):
    unique_fields = ("userId",)

    user_id: str
    following: List[str] = Field(default_factory=list, description="Event IDs followed by this attendee")
