"""
Domain model registry.

The registry maps a (domain, collection tag) pair to the single MongoDB
collection that stores it and hands out a :class:`ModelHandle` bound to
that collection and its record schema.  Collection names are produced
only by :func:`collection_identifier`; route code never builds them by
hand.

Registration happens once per pair at startup.  Registering the same
pair with the same schema again returns the existing handle.  Any other
attempt to claim an identifier that is already taken is a configuration
error and raises :class:`RegistryError`, which aborts startup.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Set, Type, Union

from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase

from event_platform_api.app.core.errors import RegistryError
from event_platform_api.app.models.base import Record
from event_platform_api.app.models.domains import DOMAIN_COLLECTIONS, Domain

logger = logging.getLogger(__name__)

SEPARATOR = "_"


def collection_identifier(domain: Union[Domain, str], collection_tag: Union[Enum, str]) -> str:
    """Return the storage collection name for ``domain`` and ``collection_tag``.

    Both arguments may be enum members or their plain string values.
    """
    tag = getattr(collection_tag, "value", collection_tag)
    return f"{Domain(domain).value}{SEPARATOR}{tag}"


@dataclass(frozen=True)
class ModelHandle:
    """Typed accessor for one registry-managed collection."""

    domain: Domain
    collection_tag: str
    identifier: str
    schema: Type[Record]
    collection: AsyncIOMotorCollection

    def parse(self, document: Mapping[str, Any]) -> Record:
        """Validate a stored document into this handle's schema."""
        data = {key: value for key, value in document.items() if key != "_id"}
        return self.schema.model_validate(data)


class ModelRegistry:
    """Owns the mapping from (domain, collection tag) to model handles."""

    def __init__(self, database: AsyncIOMotorDatabase) -> None:
        self._database = database
        self._handles: Dict[str, ModelHandle] = {}
        self._existing: Optional[Set[str]] = None

    async def register(
        self,
        domain: Union[Domain, str],
        collection_tag: str,
        schema: Type[Record],
    ) -> ModelHandle:
        """Bind ``schema`` to the collection named by ``domain`` and ``collection_tag``.

        The backing collection is created if it does not exist yet and a
        unique index is ensured for each of ``schema.unique_fields``.
        """
        domain = self._coerce_domain(domain)
        tag = self._coerce_tag(domain, collection_tag)
        if not (isinstance(schema, type) and issubclass(schema, Record)):
            raise RegistryError(f"Schema for {domain.value}/{tag} must be a Record subclass, got {schema!r}")

        identifier = collection_identifier(domain, tag)
        existing = self._handles.get(identifier)
        if existing is not None:
            if (existing.domain, existing.collection_tag, existing.schema) == (domain, tag, schema):
                return existing
            logger.error(
                "Collection %s already registered for %s/%s with schema %s",
                identifier,
                existing.domain.value,
                existing.collection_tag,
                existing.schema.__name__,
            )
            raise RegistryError(
                f"Collection identifier {identifier!r} is already registered "
                f"for {existing.domain.value}/{existing.collection_tag} ({existing.schema.__name__})"
            )

        collection = await self._ensure_collection(identifier, schema)
        handle = ModelHandle(
            domain=domain,
            collection_tag=tag,
            identifier=identifier,
            schema=schema,
            collection=collection,
        )
        self._handles[identifier] = handle
        logger.info("Registered %s as %s", schema.__name__, identifier)
        return handle

    def get(self, domain: Union[Domain, str], collection_tag: str) -> ModelHandle:
        """Return the handle registered for ``domain`` and ``collection_tag``."""
        domain = self._coerce_domain(domain)
        tag = self._coerce_tag(domain, collection_tag)
        handle = self._handles.get(collection_identifier(domain, tag))
        if handle is None:
            raise RegistryError(f"No model registered for {domain.value}/{tag}")
        return handle

    def handles(self) -> List[ModelHandle]:
        """All registered handles in registration order."""
        return list(self._handles.values())

    @staticmethod
    def _coerce_domain(domain: Union[Domain, str]) -> Domain:
        try:
            return Domain(domain)
        except ValueError:
            raise RegistryError(f"Unknown domain {domain!r}") from None

    @staticmethod
    def _coerce_tag(domain: Domain, collection_tag: str) -> str:
        tag = getattr(collection_tag, "value", collection_tag)
        if not isinstance(tag, str) or not tag:
            raise RegistryError(f"Collection tag for domain {domain.value!r} must be a non-empty string")
        allowed = {member.value for member in DOMAIN_COLLECTIONS[domain]}
        if tag not in allowed:
            raise RegistryError(f"Unknown collection {tag!r} for domain {domain.value!r}")
        return tag

    async def _ensure_collection(self, identifier: str, schema: Type[Record]) -> AsyncIOMotorCollection:
        if self._existing is None:
            self._existing = set(await self._database.list_collection_names())
        if identifier not in self._existing:
            await self._database.create_collection(identifier)
            self._existing.add(identifier)
            logger.debug("Created collection %s", identifier)
        collection = self._database[identifier]
        for field_name in schema.unique_fields:
            await collection.create_index(field_name, unique=True)
        return collection
