"""Records for the registration domain."""

from typing import List

from pydantic import Field

from .base import Record


class RegistrationApplication(Record):
    """A submitted hacker application."""

    unique_fields = ("userId",)

    user_id: str
    preferred_name: str
    legal_name: str
    email_address: str
    university: str = ""
    graduation_year: int = 0
    major: str = ""
    hackathons_attended: int = 0
    dietary_restrictions: List[str] = Field(default_factory=list)
    requested_travel_reimbursement: bool = False
