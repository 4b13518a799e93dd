"""
Records for the event domain.

``Event`` is the schedule entry itself.  Attendance and followers are
kept in separate collections keyed by ``eventId`` so that check-ins and
follows can be recorded with single-document set additions.
"""

from typing import List, Optional

from pydantic import Field

from .base import Record


class Location(Record):
    description: str
    tags: List[str] = Field(default_factory=list)
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class Event(Record):
    unique_fields = ("eventId",)

    event_id: str
    name: str
    description: str = ""
    start_time: int = Field(..., description="Start time as a Unix timestamp (seconds)")
    end_time: int = Field(..., description="End time as a Unix timestamp (seconds)")
    event_type: str = "OTHER"
    locations: List[Location] = Field(default_factory=list)
    points: int = 0
    is_staff: bool = False
    is_private: bool = False
    is_asynchronous: bool = False
    display_only: bool = False


class EventAttendance(Record):
    unique_fields = ("eventId",)

    event_id: str
    attendees: List[str] = Field(default_factory=list)


class EventFollowers(Record):
    unique_fields = ("eventId",)

    event_id: str
    followers: List[str] = Field(default_factory=list)
