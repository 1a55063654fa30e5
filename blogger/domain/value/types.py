"""Value types for Blogger."""

import string
from enum import Enum

SLUG_CHARACTERS = frozenset(string.ascii_lowercase + string.digits + "-_")


class RecordState(str, Enum):
    """Lifecycle state of a record held by a table.

    A record is ACTIVE until removed, then TOMBSTONED until the next save
    drops it from memory. There is no way back to ACTIVE.
    """

    ACTIVE = "active"
    TOMBSTONED = "tombstoned"


def slugify(name: str) -> str:
    """Derive a URL-safe slug from a display name.

    ASCII letters, digits, '-' and '_' pass through lower-cased. Every other
    character becomes its own '-' (runs are not collapsed), except at the
    first and last position of the input where it is dropped.

    Examples:
        'Hello World' -> 'hello-world'
        'Hi, there!' -> 'hi--there'

    Args:
        name: Display name

    Returns:
        Slug, empty for empty input
    """
    last = len(name) - 1
    chars = []
    for index, char in enumerate(name):
        lowered = char.lower() if char.isascii() else char
        if lowered in SLUG_CHARACTERS:
            chars.append(lowered)
        elif 0 < index < last:
            chars.append("-")
    return "".join(chars)
