"""Records for the admission domain."""

from enum import Enum

from .base import Record


class DecisionStatus(str, Enum):
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"
    WAITLISTED = "WAITLISTED"
    TBD = "TBD"


class DecisionResponse(str, Enum):
    ACCEPTED = "ACCEPTED"
    DECLINED = "DECLINED"
    PENDING = "PENDING"


class AdmissionDecision(Record):
    """Admission outcome for one applicant and the applicant's RSVP."""

    unique_fields = ("userId",)

    user_id: str
    status: DecisionStatus = DecisionStatus.TBD
    response: DecisionResponse = DecisionResponse.PENDING
    email_sent: bool = False
    reimbursement_value: float = 0
