"""Author entity."""

from blogger.domain.model.common import Entity, EntityPatch


class AuthorPatch(EntityPatch):
    """Partial update for an author."""

    bio: str | None = None


class Author(Entity):
    kind = "authors"
    patch_type = AuthorPatch

    bio: str = ""
