"""
Base class for stored records.

Every collection handled by the model registry is described by a
subclass of :class:`Record`.  Field names are snake_case in Python and
camelCase in storage (``list_id`` is stored as ``listId``).  Records
never carry a schema-version bookkeeping field; ``to_document`` emits
exactly the declared fields.
"""

from typing import Any, ClassVar, Dict, Tuple

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Record(BaseModel):
    """A document stored in one registry-managed collection."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    # Storage (camelCase) names of fields that must be unique within the
    # collection.  The registry creates a unique index for each of them.
    unique_fields: ClassVar[Tuple[str, ...]] = ()

    def to_document(self) -> Dict[str, Any]:
        """Return the storage representation of this record."""
        return self.model_dump(by_alias=True)
