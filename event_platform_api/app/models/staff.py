"""Records for the staff domain."""

from typing import List

from pydantic import Field

from .base import Record


class StaffShift(Record):
    """Shifts (event IDs) assigned to one staff member."""

    unique_fields = ("userId",)

    user_id: str
    shifts: List[str] = Field(default_factory=list)
