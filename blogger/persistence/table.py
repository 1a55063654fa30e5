"""File-backed table of entities.

Each record lives in its own JSON file named after its id, inside the
table's directory. All mutations happen in memory; `save` reconciles the
directory with memory and `load` refreshes memory from the directory without
discarding records that have not been saved yet.
"""

import os
from collections.abc import Iterator, Mapping
from datetime import datetime
from pathlib import Path
from typing import Any, Generic, TypeVar

import logfire

from blogger.domain.error import DuplicateSlugError, EmptyNameError
from blogger.domain.model import Entity, EntityPatch
from blogger.domain.value import EntityId, new_id
from blogger.persistence.error import CorruptRecordError, StorageError
from blogger.persistence.mappers import entity_to_json, json_to_entity

E = TypeVar("E", bound=Entity)


class Table(Generic[E]):
    """Ordered, file-backed collection of one entity type.

    Invariants:
    - ids are unique among all records held, tombstoned ones included
    - slugs are unique among live records at the time of an add or edit
    - a record that is not dirty matches its file on disk

    Lookups on unknown or removed ids are silent no-ops returning None.
    """

    def __init__(
        self,
        entity_type: type[E],
        directory: Path,
        *,
        atomic_writes: bool = True,
        indent: int | None = 2,
        encoding: str = "utf-8",
    ) -> None:
        """Initialize an empty table.

        Args:
            entity_type: Concrete entity class held by the table
            directory: Directory holding one file per record
            atomic_writes: Write each record to a temp file and rename it
            indent: JSON indentation for record files
            encoding: Text encoding for record files
        """
        self.entity_type = entity_type
        self.directory = Path(directory)
        self.atomic_writes = atomic_writes
        self.indent = indent
        self.encoding = encoding
        self._records: list[E] = []

    @property
    def kind(self) -> str:
        return self.entity_type.kind

    def __repr__(self) -> str:
        return f"Table({self.entity_type.__name__}, {str(self.directory)!r})"

    # Reads

    def content(self) -> list[E]:
        """Return live records in insertion order."""
        return [r for r in self._records if not r.tombstoned]

    def __len__(self) -> int:
        return len(self.content())

    def __iter__(self) -> Iterator[E]:
        return iter(self.content())

    def __contains__(self, entity_id: object) -> bool:
        return self._find_live(entity_id) is not None

    def get(self, entity_id: str) -> E | None:
        """Get a live record by id."""
        record = self._find_live(entity_id)
        if record is None:
            logfire.warn("Record not found", kind=self.kind, id=entity_id)
        return record

    def get_by_slug(self, slug: str) -> E | None:
        """Get a live record by slug."""
        record = next((r for r in self.content() if r.slug == slug), None)
        if record is None:
            logfire.warn("Record not found", kind=self.kind, slug=slug)
        return record

    def find(self, **fields: Any) -> list[E]:
        """Find live records whose fields equal all the given values.

        Args:
            **fields: Field names (or 'slug') mapped to expected values

        Returns:
            Matching records in insertion order

        Raises:
            ValueError: If a field name is not a field of the entity type
        """
        known = set(self.entity_type.model_fields) | {"slug"}
        unknown = set(fields) - known
        if unknown:
            raise ValueError(
                f"Unknown {self.kind} fields: {', '.join(sorted(unknown))}"
            )
        return [
            r
            for r in self.content()
            if all(getattr(r, name) == value for name, value in fields.items())
        ]

    def references(self) -> list[tuple[EntityId, str]]:
        """Return (id, slug) pairs of live records, for building link lists."""
        return [(r.id, r.slug) for r in self.content()]

    def pending(self) -> list[E]:
        """Return records whose state is not on disk yet, removals included."""
        return [r for r in self._records if r.dirty or r.tombstoned]

    # Mutations

    def add(self, candidate: E) -> E:
        """Add a new record.

        If the candidate's id is already held, the record is stored under a
        fresh id instead. The caller's instance is never shared with the
        table.

        Args:
            candidate: Record to add

        Returns:
            The stored record, a copy of the candidate that is active, dirty
            and has no backing file yet

        Raises:
            EmptyNameError: If the name is blank
            DuplicateSlugError: If a live record already has the same slug
        """
        if not isinstance(candidate, self.entity_type):
            raise TypeError(
                f"Expected {self.entity_type.__name__}, got {type(candidate).__name__}"
            )
        with logfire.span("table.add", kind=self.kind, id=candidate.id):
            if not candidate.name.strip():
                raise EmptyNameError(self.kind)

            holder = self._slug_holder(candidate.slug)
            if holder is not None:
                raise DuplicateSlugError(self.kind, candidate.slug, holder.id)

            record = self._insert(candidate.detached())
            logfire.info(
                "Record added", kind=self.kind, id=record.id, slug=record.slug
            )
            return record

    def edit(
        self, entity_id: str, patch: EntityPatch | Mapping[str, Any]
    ) -> E | None:
        """Apply a partial update to a live record.

        Only fields set on the patch are changed. The slug follows the name
        and `edited` is set to now.

        Args:
            entity_id: Id of the record to edit
            patch: Patch model for the entity type, or a mapping of fields

        Returns:
            The updated record, or None if no live record has this id

        Raises:
            EmptyNameError: If the patch sets a blank name
            DuplicateSlugError: If the new slug belongs to another live record
        """
        patch = self._coerce_patch(patch)
        with logfire.span("table.edit", kind=self.kind, id=entity_id):
            index = self._index_of_live(entity_id)
            if index is None:
                logfire.warn(
                    "Edit skipped, record not found", kind=self.kind, id=entity_id
                )
                return None

            changes = patch.changes()
            if "name" in changes and not changes["name"].strip():
                raise EmptyNameError(self.kind)

            current = self._records[index]
            revised = current.revise({**changes, "edited": datetime.now()})

            holder = self._slug_holder(revised.slug, exclude=current.id)
            if holder is not None:
                raise DuplicateSlugError(self.kind, revised.slug, holder.id)

            self._records[index] = revised
            logfire.info(
                "Record edited",
                kind=self.kind,
                id=revised.id,
                fields=sorted(changes),
            )
            return revised

    def remove(self, entity_id: str) -> E | None:
        """Mark a live record for removal on the next save.

        The backing file is untouched until `save`.

        Returns:
            The tombstoned record, or None if no live record has this id
        """
        record = self._find_live(entity_id)
        if record is None:
            logfire.warn(
                "Remove skipped, record not found", kind=self.kind, id=entity_id
            )
            return None
        record.tombstone()
        logfire.info("Record tombstoned", kind=self.kind, id=record.id)
        return record

    # Storage

    def bootstrap(self) -> None:
        """Create the table directory if it does not exist."""
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError("Cannot create table directory", self.directory) from e

    def load(self) -> None:
        """Refresh records from the table directory.

        Records not yet saved are kept. A kept record that already has a
        backing file supersedes the file's content. Loaded records go through
        the same id collision repair as `add`, but are not validated for
        name or slug uniqueness.

        Memory is left unchanged if any file cannot be read.

        Raises:
            StorageError: If the directory or a file cannot be read
            CorruptRecordError: If a file does not hold a valid record
        """
        with logfire.span("table.load", kind=self.kind, directory=str(self.directory)):
            loaded = self._read_all()

            pending = [r for r in self._records if r.dirty]
            superseding = {r.id for r in pending if r.persisted}
            self._records = pending
            for record in loaded:
                if record.id in superseding:
                    continue
                self._insert(record)

            logfire.info(
                "Table loaded",
                kind=self.kind,
                loaded=len(loaded),
                pending=len(pending),
                total=len(self._records),
            )

    def save(self) -> None:
        """Write live records to disk and delete tombstoned ones.

        Each record is its own unit of work. On the first failure the pass
        stops and the error propagates; records already processed stay
        committed and later ones keep their pending state.

        Raises:
            StorageError: If a file cannot be written or deleted
        """
        with logfire.span("table.save", kind=self.kind, records=len(self._records)):
            written = deleted = 0
            for record in list(self._records):
                if record.tombstoned:
                    self._delete_file(record.id)
                    self._records = [r for r in self._records if r is not record]
                    deleted += 1
                else:
                    self._write_file(record)
                    record.mark_saved()
                    written += 1

            logfire.info(
                "Table saved", kind=self.kind, written=written, deleted=deleted
            )

    # Internals

    def _find_live(self, entity_id: object) -> E | None:
        index = self._index_of_live(entity_id)
        return None if index is None else self._records[index]

    def _index_of_live(self, entity_id: object) -> int | None:
        for index, record in enumerate(self._records):
            if record.id == entity_id and not record.tombstoned:
                return index
        return None

    def _slug_holder(self, slug: str, exclude: str | None = None) -> E | None:
        for record in self._records:
            if record.tombstoned or record.id == exclude:
                continue
            if record.slug == slug:
                return record
        return None

    def _id_taken(self, entity_id: str) -> bool:
        return any(r.id == entity_id for r in self._records)

    def _insert(self, record: E) -> E:
        if self._id_taken(record.id):
            fresh = new_id()
            while self._id_taken(fresh):
                fresh = new_id()
            logfire.warn(
                "Id collision repaired", kind=self.kind, old_id=record.id, new_id=fresh
            )
            record = record.with_id(fresh)
        self._records.append(record)
        return record

    def _coerce_patch(self, patch: EntityPatch | Mapping[str, Any]) -> EntityPatch:
        patch_type = self.entity_type.patch_type
        if isinstance(patch, Mapping):
            return patch_type.model_validate(dict(patch))
        if isinstance(patch, patch_type) or type(patch) is EntityPatch:
            return patch
        raise TypeError(
            f"Expected {patch_type.__name__}, got {type(patch).__name__}"
        )

    def _path_for(self, entity_id: str) -> Path:
        return self.directory / entity_id

    def _read_all(self) -> list[E]:
        if not self.directory.exists():
            logfire.warn("Table directory missing", directory=str(self.directory))
            return []

        try:
            paths = sorted(
                p
                for p in self.directory.iterdir()
                if p.is_file() and not p.name.startswith(".")
            )
        except OSError as e:
            raise StorageError("Cannot list table directory", self.directory) from e

        return [self._read_file(path) for path in paths]

    def _read_file(self, path: Path) -> E:
        try:
            payload = path.read_text(encoding=self.encoding)
        except UnicodeDecodeError as e:
            raise CorruptRecordError("Cannot decode record file", path) from e
        except OSError as e:
            raise StorageError("Cannot read record file", path) from e
        return json_to_entity(self.entity_type, payload, path)

    def _write_file(self, record: E) -> None:
        path = self._path_for(record.id)
        payload = entity_to_json(record, indent=self.indent)
        if not self.atomic_writes:
            try:
                path.write_text(payload, encoding=self.encoding)
            except OSError as e:
                raise StorageError("Cannot write record file", path) from e
            return

        temp = self.directory / f".{record.id}.tmp"
        try:
            temp.write_text(payload, encoding=self.encoding)
            os.replace(temp, path)
        except OSError as e:
            temp.unlink(missing_ok=True)
            raise StorageError("Cannot write record file", path) from e

    def _delete_file(self, entity_id: str) -> None:
        path = self._path_for(entity_id)
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            raise StorageError("Cannot delete record file", path) from e
