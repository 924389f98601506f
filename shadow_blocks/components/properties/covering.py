"""Covering component.

Links a block to the switch or target sharing its tile. The link is an
entity id lookup, never an object reference; a switch/target is *covered*
exactly when some ``Covering`` points at it. Only block movement and undo
write this store.
"""

from dataclasses import dataclass

from shadow_blocks.types import EntityID


@dataclass(frozen=True)
class Covering:
    """Attributes:
    target: Id of the covered switch or target entity.
    """

    target: EntityID
