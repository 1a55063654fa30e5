"""Base models for all domain entities."""

from datetime import datetime
from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from blogger.domain.value import EntityId, RecordState, new_id, slugify

# Ids double as file names
ID_PATTERN = r"^[A-Za-z0-9_-]+$"

_E = TypeVar("_E", bound="Entity")


class DomainModel(BaseModel):
    """Base class for all domain models.

    Provides common configuration for immutability and custom types.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        arbitrary_types_allowed=True,  # Allow custom value objects
    )


class EntityPatch(BaseModel):
    """Partial update for an entity.

    Every field is optional and only fields explicitly set are applied.
    Keys that are not mutable fields (id, slug, saved, ...) are ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str | None = None

    def changes(self) -> dict[str, Any]:
        """Return the fields explicitly set on this patch."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class Entity(DomainModel):
    """Base record held by a table.

    The slug is always derived from the current name. Bookkeeping state
    (saved, lifecycle state, whether a backing file exists) is private and
    only changed by the owning table; it is never serialized.
    """

    kind: ClassVar[str]  # Storage sub-directory name
    patch_type: ClassVar[type[EntityPatch]] = EntityPatch

    id: EntityId = Field(default_factory=new_id, pattern=ID_PATTERN)
    name: str
    edited: datetime | None = None

    _saved: bool = PrivateAttr(default=False)
    _state: RecordState = PrivateAttr(default=RecordState.ACTIVE)
    _persisted: bool = PrivateAttr(default=False)

    @property
    def slug(self) -> str:
        """URL-safe identifier derived from the name."""
        return slugify(self.name)

    @property
    def saved(self) -> bool:
        return self._saved

    @property
    def dirty(self) -> bool:
        """True while the in-memory state differs from disk."""
        return not self._saved

    @property
    def state(self) -> RecordState:
        return self._state

    @property
    def tombstoned(self) -> bool:
        return self._state is RecordState.TOMBSTONED

    @property
    def persisted(self) -> bool:
        """True when a backing file exists under the current id."""
        return self._persisted

    def revise(self: _E, changes: dict[str, Any]) -> _E:
        """Build a validated copy with changes applied and marked dirty.

        Args:
            changes: Field values to replace

        Returns:
            New entity of the same type, keeping id and backing file
        """
        revised = self.model_validate({**self.model_dump(), **changes})
        revised._persisted = self._persisted
        return revised

    def detached(self: _E) -> _E:
        """Build an active, dirty copy with no backing file."""
        return self.model_validate(self.model_dump())

    def with_id(self: _E, entity_id: EntityId) -> _E:
        """Build a dirty copy under a different id (no backing file yet)."""
        return self.model_validate({**self.model_dump(), "id": entity_id})

    def mark_saved(self) -> None:
        self._saved = True
        self._persisted = True

    def tombstone(self) -> None:
        self._state = RecordState.TOMBSTONED
