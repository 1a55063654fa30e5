"""Post entity, the primary content type of a blog."""

from datetime import datetime

from pydantic import Field

from blogger.domain.model.common import Entity, EntityPatch


class PostPatch(EntityPatch):
    """Partial update for a post."""

    author: str | None = None
    date: datetime | None = None
    tags: list[str] | None = None
    description: str | None = None
    body: str | None = None
    published: bool | None = None


class Post(Entity):
    """Blog post.

    The author is either an author id or free text. Tags hold tag ids in the
    order they were given.
    """

    kind = "posts"
    patch_type = PostPatch

    author: str = ""
    date: datetime = Field(default_factory=datetime.now)
    tags: list[str] = Field(default_factory=list)
    description: str = ""
    body: str = ""
    published: bool = False
