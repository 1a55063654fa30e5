"""Domain model entities for Blogger."""

from blogger.domain.model.author import Author, AuthorPatch
from blogger.domain.model.common import DomainModel, Entity, EntityPatch
from blogger.domain.model.post import Post, PostPatch
from blogger.domain.model.tag import Tag, TagPatch

__all__ = [
    "DomainModel",
    "Entity",
    "EntityPatch",
    "Post",
    "PostPatch",
    "Tag",
    "TagPatch",
    "Author",
    "AuthorPatch",
]
