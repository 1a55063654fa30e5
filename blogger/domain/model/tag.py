"""Tag entity for categorizing posts."""

from pydantic import Field

from blogger.domain.model.common import Entity, EntityPatch

DEFAULT_COLOUR = "#cccccc"


class TagPatch(EntityPatch):
    """Partial update for a tag."""

    description: str | None = None
    colour: str | None = Field(default=None, min_length=1)


class Tag(Entity):
    """Tag entity for categorizing posts."""

    kind = "tags"
    patch_type = TagPatch

    description: str = ""
    colour: str = Field(default=DEFAULT_COLOUR, min_length=1)
