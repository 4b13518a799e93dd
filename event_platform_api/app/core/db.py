"""
MongoDB integration and the application's model table.

This module owns the process-wide MongoDB client (``create_client``),
the fixed table of registered collections (``MODEL_TABLE``) and the
startup function ``init_db`` that registers every entry and returns the
resulting :class:`Models`.  Route handlers receive the ``Models``
instance through the ``get_models`` dependency.
"""

import logging
from dataclasses import dataclass, fields
from typing import Optional, Tuple, Type

from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from .config import Settings, settings as default_settings
from .errors import RegistryError
from event_platform_api.app.models.admission import AdmissionDecision
from event_platform_api.app.models.attendee import AttendeeFollowing, AttendeeMetadata, AttendeeProfile
from event_platform_api.app.models.auth import AuthInfo
from event_platform_api.app.models.base import Record
from event_platform_api.app.models.domains import (
    AdmissionCollection,
    AttendeeCollection,
    AuthCollection,
    Domain,
    EventCollection,
    NewsletterCollection,
    RegistrationCollection,
    ShopCollection,
    StaffCollection,
    UserCollection,
)
from event_platform_api.app.models.event import Event, EventAttendance, EventFollowers
from event_platform_api.app.models.newsletter import NewsletterSubscription
from event_platform_api.app.models.registration import RegistrationApplication
from event_platform_api.app.models.registry import ModelHandle, ModelRegistry
from event_platform_api.app.models.shop import ShopItem
from event_platform_api.app.models.staff import StaffShift
from event_platform_api.app.models.user import UserAttendance, UserInfo

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Models:
    """Every model handle the API uses, built once at startup."""

    attendee_metadata: ModelHandle
    attendee_profile: ModelHandle
    attendee_following: ModelHandle
    auth_info: ModelHandle
    admission_decision: ModelHandle
    event: ModelHandle
    event_attendance: ModelHandle
    event_followers: ModelHandle
    newsletter_subscription: ModelHandle
    registration_application: ModelHandle
    shop_item: ModelHandle
    user_info: ModelHandle
    user_attendance: ModelHandle
    staff_shift: ModelHandle


# (Models attribute, domain, collection tag, record schema)
MODEL_TABLE: Tuple[Tuple[str, Domain, str, Type[Record]], ...] = (
    # Attendee
    ("attendee_metadata", Domain.ATTENDEE, AttendeeCollection.METADATA, AttendeeMetadata),
    ("attendee_profile", Domain.ATTENDEE, AttendeeCollection.PROFILE, AttendeeProfile),
    ("attendee_following", Domain.ATTENDEE, AttendeeCollection.FOLLOWING, AttendeeFollowing),
    # Auth
    ("auth_info", Domain.AUTH, AuthCollection.INFO, AuthInfo),
    # Admission
    ("admission_decision", Domain.ADMISSION, AdmissionCollection.DECISION, AdmissionDecision),
    # Event
    ("event", Domain.EVENT, EventCollection.EVENTS, Event),
    ("event_attendance", Domain.EVENT, EventCollection.ATTENDANCE, EventAttendance),
    ("event_followers", Domain.EVENT, EventCollection.FOLLOWERS, EventFollowers),
    # Newsletter
    ("newsletter_subscription", Domain.NEWSLETTER, NewsletterCollection.SUBSCRIPTIONS, NewsletterSubscription),
    # Registration
    ("registration_application", Domain.REGISTRATION, RegistrationCollection.APPLICATIONS, RegistrationApplication),
    # Shop
    ("shop_item", Domain.SHOP, ShopCollection.ITEMS, ShopItem),
    # User
    ("user_info", Domain.USER, UserCollection.INFO, UserInfo),
    ("user_attendance", Domain.USER, UserCollection.ATTENDANCE, UserAttendance),
    # Staff
    ("staff_shift", Domain.STAFF, StaffCollection.SHIFT, StaffShift),
)


def create_client(config: Optional[Settings] = None) -> AsyncIOMotorClient:
    """Create the MongoDB client shared by all requests."""
    config = config or default_settings
    return AsyncIOMotorClient(config.mongodb_uri)


def get_database(client: AsyncIOMotorClient, config: Optional[Settings] = None) -> AsyncIOMotorDatabase:
    config = config or default_settings
    return client[config.mongodb_database]


async def init_db(database: AsyncIOMotorDatabase) -> Models:
    """Register every entry of ``MODEL_TABLE`` and return the handles.

    Any registration failure propagates to the caller; during application
    startup that aborts the process.
    """
    registry = ModelRegistry(database)
    handles = {}
    for attribute, domain, collection_tag, schema in MODEL_TABLE:
        handles[attribute] = await registry.register(domain, collection_tag, schema)

    missing = {f.name for f in fields(Models)} - handles.keys()
    if missing:
        raise RegistryError(f"MODEL_TABLE has no entry for {sorted(missing)}")

    logger.info("Initialised %d collections in database %s", len(handles), database.name)
    return Models(**handles)


def get_models(request: Request) -> Models:
    """FastAPI dependency returning the startup-built model handles."""
    return request.app.state.models
