"""Unit tests for entity models."""

from datetime import datetime

import pytest
from pydantic import ValidationError

from blogger.domain.model import Author, Post, PostPatch, Tag, TagPatch
from blogger.domain.model.tag import DEFAULT_COLOUR
from blogger.domain.value import RecordState


class TestEntityCreation:
    """Tests for creating entities."""

    def test_new_post_gets_id_slug_and_dirty_state(self):
        """A constructed post has a generated id, derived slug and is dirty."""
        post = Post(name="Hello World")

        assert post.id.isdigit()
        assert post.slug == "hello-world"
        assert post.dirty is True
        assert post.saved is False
        assert post.persisted is False
        assert post.state is RecordState.ACTIVE
        assert post.edited is None

    def test_post_defaults(self):
        """Optional post fields default to empty values."""
        post = Post(name="Draft")

        assert post.author == ""
        assert isinstance(post.date, datetime)
        assert post.tags == []
        assert post.description == ""
        assert post.body == ""
        assert post.published is False

    def test_tag_has_default_colour(self):
        """Tags get a non-empty default colour."""
        assert Tag(name="python").colour == DEFAULT_COLOUR

    def test_tag_rejects_empty_colour(self):
        """Colour must not be empty."""
        with pytest.raises(ValidationError):
            Tag(name="python", colour="")

    def test_id_must_be_usable_as_file_name(self):
        """Ids with path separators are rejected."""
        with pytest.raises(ValidationError):
            Author(id="../escape", name="Mallory")

    def test_entities_are_immutable(self):
        """Fields cannot be assigned after creation."""
        author = Author(name="Ada")

        with pytest.raises(ValidationError):
            author.name = "Grace"

    def test_slug_and_state_are_not_dumped(self):
        """Derived and bookkeeping state never appear in model output."""
        dumped = Author(id="7", name="Ada", bio="Analyst").model_dump()

        assert dumped == {"id": "7", "name": "Ada", "edited": None, "bio": "Analyst"}


class TestEntityRevision:
    """Tests for revise, with_id and state transitions."""

    def test_revise_recomputes_slug_and_keeps_id(self):
        """Revising the name changes the slug but not the id."""
        post = Post(id="1", name="Old Title", body="text")

        revised = post.revise({"name": "New Title"})

        assert revised.id == "1"
        assert revised.slug == "new-title"
        assert revised.body == "text"
        assert post.name == "Old Title"

    def test_revise_is_dirty_and_keeps_backing_file(self):
        """A revised copy is dirty but still backed by the same file."""
        post = Post(id="1", name="Saved")
        post.mark_saved()

        revised = post.revise({"body": "changed"})

        assert revised.dirty is True
        assert revised.persisted is True

    def test_revise_validates_changes(self):
        """Invalid values are rejected."""
        post = Post(name="Dated")

        with pytest.raises(ValidationError):
            post.revise({"date": "not a date"})

    def test_detached_resets_lifecycle(self):
        """A detached copy is active, dirty and has no backing file."""
        tag = Tag(id="1", name="python")
        tag.mark_saved()
        tag.tombstone()

        copy = tag.detached()

        assert copy.model_dump() == tag.model_dump()
        assert copy.state is RecordState.ACTIVE
        assert copy.dirty is True
        assert copy.persisted is False

    def test_with_id_drops_backing_file(self):
        """A re-identified copy is dirty and has no file yet."""
        tag = Tag(id="1", name="python")
        tag.mark_saved()

        moved = tag.with_id("2")

        assert moved.id == "2"
        assert moved.dirty is True
        assert moved.persisted is False

    def test_tombstone_is_final(self):
        """Tombstoning switches the state to TOMBSTONED."""
        author = Author(name="Ada")

        author.tombstone()

        assert author.tombstoned is True
        assert author.state is RecordState.TOMBSTONED


class TestPatches:
    """Tests for entity patches."""

    def test_changes_only_include_set_fields(self):
        """Unset fields are not part of the changes."""
        assert PostPatch(body="new").changes() == {"body": "new"}

    def test_immutable_keys_are_ignored(self):
        """id, slug and saved are not patchable."""
        patch = PostPatch.model_validate(
            {"id": "99", "slug": "forced", "saved": True, "name": "Renamed"}
        )

        assert patch.changes() == {"name": "Renamed"}

    def test_explicit_none_is_not_a_change(self):
        """Setting a field to None leaves it untouched."""
        assert TagPatch(description=None).changes() == {}
