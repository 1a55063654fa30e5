"""Identifiers for Blogger entities.

Ids are decimal strings derived from the wall clock plus random jitter.
They are unique with high probability only; tables repair collisions on
insertion.
"""

import secrets
import time
from typing import NewType

EntityId = NewType("EntityId", str)

# 2020-01-01T00:00:00Z in milliseconds
FIXED_EPOCH = 1_577_836_800_000

JITTER_RANGE = 1000


def new_id() -> EntityId:
    """Generate a new entity id.

    Returns:
        Milliseconds since FIXED_EPOCH plus a jitter in [0, 1000), as text
    """
    now_ms = time.time_ns() // 1_000_000
    return EntityId(str(now_ms - FIXED_EPOCH + secrets.randbelow(JITTER_RANGE)))
