"""
Stored record schemas and the registry that binds them to collections.

Each domain (attendee, event, newsletter, ...) defines its records in
its own module.  ``registry`` maps a (domain, collection tag) pair to
the MongoDB collection that stores it.
"""

from .base import Record
from .domains import Domain
from .registry import ModelHandle, ModelRegistry, collection_identifier

__all__ = ["Domain", "ModelHandle", "ModelRegistry", "Record", "collection_identifier"]
