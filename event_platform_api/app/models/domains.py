"""
Domain and collection tags.

A domain is a top-level namespace for related data; each domain owns a
closed set of collection tags.  The pair (domain, tag) names exactly one
backing collection through :func:`~.registry.collection_identifier`.
"""

from enum import Enum
from typing import Dict, Type


class Domain(str, Enum):
    AUTH = "auth"
    USER = "user"
    EVENT = "event"
    ADMISSION = "admission"
    ATTENDEE = "attendee"
    NEWSLETTER = "newsletter"
    REGISTRATION = "registration"
    SHOP = "shop"
    STAFF = "staff"


class AttendeeCollection(str, Enum):
    METADATA = "metadata"
    PROFILE = "profile"
    FOLLOWING = "following"


class AuthCollection(str, Enum):
    INFO = "info"


class AdmissionCollection(str, Enum):
    DECISION = "decision"


class EventCollection(str, Enum):
    METADATA = "metadata"
    ATTENDANCE = "attendance"
    EVENTS = "events"
    FOLLOWERS = "followers"


class NewsletterCollection(str, Enum):
    SUBSCRIPTIONS = "subscriptions"


class RegistrationCollection(str, Enum):
    APPLICATIONS = "applications"


class ShopCollection(str, Enum):
    ITEMS = "items"


class UserCollection(str, Enum):
    INFO = "users"
    ATTENDANCE = "attendance"


class StaffCollection(str, Enum):
    SHIFT = "shift"


# Collection tag enum owned by each domain.
DOMAIN_COLLECTIONS: Dict[Domain, Type[Enum]] = {
    Domain.ATTENDEE: AttendeeCollection,
    Domain.AUTH: AuthCollection,
    Domain.ADMISSION: AdmissionCollection,
    Domain.EVENT: EventCollection,
    Domain.NEWSLETTER: NewsletterCollection,
    Domain.REGISTRATION: RegistrationCollection,
    Domain.SHOP: ShopCollection,
    Domain.USER: UserCollection,
    Domain.STAFF: StaffCollection,
}
