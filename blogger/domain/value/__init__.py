"""Domain value objects for Blogger."""

from blogger.domain.value.identifiers import FIXED_EPOCH, EntityId, new_id
from blogger.domain.value.types import RecordState, slugify

__all__ = [
    # Identifiers
    "EntityId",
    "FIXED_EPOCH",
    "new_id",
    # Types
    "RecordState",
    "slugify",
]
