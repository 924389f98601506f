"""Entity primitives & ID generation.

The engine models each *thing* as an ``EntityID`` (an integer) plus zero or
more component dataclasses stored in persistent maps on :class:`State`. The
registry value is an :class:`Entity` carrying the entity's variant tag.

Examples
--------
>>> from shadow_blocks.entity import new_entity_id
>>> eid = new_entity_id()

IDs are *not* recycled; a simple incrementing counter is sufficient because
entities spawned mid-level (blood, explosions) must never collide with ids
still referenced by undo history or covering links.
"""

from dataclasses import dataclass
from typing import Iterator

from shadow_blocks.types import EntityID, EntityKind


@dataclass(frozen=True)
class Entity:
    """Registry entry.

    Attributes:
        kind: Variant tag used for occupancy, push and update dispatch.
    """

    kind: EntityKind


def entity_id_generator() -> Iterator[EntityID]:
    """Yield an infinite sequence of monotonically increasing entity IDs."""
    eid = 0
    while True:
        yield eid
        eid += 1


_entity_id_gen = entity_id_generator()


def new_entity_id() -> EntityID:
    """Return a newly allocated unique entity ID."""
    return next(_entity_id_gen)

