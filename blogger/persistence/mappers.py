"""Mappers for converting between record files and domain models.

A record file holds a single JSON object named after the record id. The
slug and bookkeeping state are never written; the slug is derived again from
the name when the record is read back.
"""

from pathlib import Path
from typing import TypeVar

from pydantic import ValidationError

from blogger.domain.model import Entity
from blogger.domain.value import EntityId
from blogger.persistence.error import CorruptRecordError

E = TypeVar("E", bound=Entity)


def entity_to_json(entity: Entity, indent: int | None = 2) -> str:
    """Serialize an entity to its record file content.

    Args:
        entity: Entity to serialize
        indent: JSON indentation, None for compact output

    Returns:
        JSON object text; `edited` is omitted when absent
    """
    return entity.model_dump_json(exclude_none=True, indent=indent)


def json_to_entity(entity_type: type[E], payload: str, path: Path) -> E:
    """Deserialize a record file into a saved entity.

    Args:
        entity_type: Concrete entity class stored in the file's table
        payload: File content
        path: File the payload was read from; its name is the record id

    Returns:
        Entity marked as saved and backed by `path`

    Raises:
        CorruptRecordError: If the payload is not a valid record or its id
            disagrees with the file name
    """
    try:
        entity = entity_type.model_validate_json(payload)
        if "id" not in entity.model_fields_set:
            entity = entity.with_id(EntityId(path.name))
    except ValidationError as e:
        raise CorruptRecordError(f"Invalid {entity_type.kind} record", path) from e

    if entity.id != path.name:
        raise CorruptRecordError(
            f"Record id '{entity.id}' does not match file name", path
        )

    entity.mark_saved()
    return entity
