"""Core immutable ECS `State` dataclass.

This module defines the frozen :class:`State` object that represents one
level of the puzzle at a single tick. All systems are pure functions that
take a previous ``State`` plus inputs (elapsed time, driver actions) and
return a *new* ``State``; no mutation happens in-place. This makes the engine
deterministic, easy to test, and makes undo snapshots cheap to hold.

Design notes:

* Component stores are **persistent maps** (``pyrsistent.PMap``) keyed by
    ``EntityID``. Absence of a key means the entity does not currently possess
    that component.
* ``order`` is the level-declaration order of entities. Every pass over the
    world (updates, occupancy lookups, drawing) follows it so ties resolve
    reproducibly. Entities spawned mid-level are appended (explosions) or
    inserted ahead of the first unit (blood).
* ``covering`` links blocks to the switch/target under them by id. Coverage
    of a switch/target is derived from this store alone.
* ``door_open`` is the per-level door state, written by the switch pass and
    read by the occupancy rules.
* ``history`` holds the per-entity undo stacks.

See :mod:`shadow_blocks.step` for how the reducer orchestrates systems.
"""

from dataclasses import dataclass
from pyrsistent import pmap, pvector
from pyrsistent.typing import PMap, PVector

from shadow_blocks.entity import Entity
from shadow_blocks.components.properties import (
    Armed,
    Chase,
    Covering,
    Exploding,
    Heading,
    Position,
    Rest,
    Sliding,
    Snapshot,
    Timer,
)
from shadow_blocks.types import EntityID


@dataclass(frozen=True)
class State:
    """Immutable ECS level state.

    Instances are *value objects*; every transition creates a new ``State``.

    Attributes:
        width (int): Map width in tiles.
        height (int): Map height in tiles.
        entity (PMap[EntityID, Entity]): Registry of entities and their variant tag.
        order (PVector[EntityID]): Declaration / draw order of live entities.
        position (PMap[EntityID, Position]): Current grid position.
        heading (PMap[EntityID, Heading]): Unit facing / next step direction.
        armed (PMap[EntityID, Armed]): Player-gated units allowed one move.
        chase (PMap[EntityID, Chase]): Mage offsets to the player's target tile.
        timer (PMap[EntityID, Timer]): Accumulated milliseconds for timed entities.
        sliding (PMap[EntityID, Sliding]): Ice blocks armed to keep sliding.
        rest (PMap[EntityID, Rest]): Ice rest position and covering.
        covering (PMap[EntityID, Covering]): Block -> covered switch/target id.
        exploding (PMap[EntityID, Exploding]): Entities flagged for detonation.
        history (PMap[EntityID, PVector[Snapshot]]): Per-entity undo stacks.
        door_open (bool): Whether doors are currently passable.
        move_count (int): Player turns taken (decremented by undo).
        player_dead (bool): True once the player has been caught.
        win (bool): True once every target is covered.
    """

    # Level
    width: int
    height: int

    # Entity
    entity: PMap[EntityID, Entity] = pmap()
    order: PVector[EntityID] = pvector()

    # Components
    position: PMap[EntityID, Position] = pmap()
    heading: PMap[EntityID, Heading] = pmap()
    armed: PMap[EntityID, Armed] = pmap()
    chase: PMap[EntityID, Chase] = pmap()
    timer: PMap[EntityID, Timer] = pmap()
    sliding: PMap[EntityID, Sliding] = pmap()
    rest: PMap[EntityID, Rest] = pmap()
    covering: PMap[EntityID, Covering] = pmap()
    exploding: PMap[EntityID, Exploding] = pmap()

    # Undo
    history: PMap[EntityID, PVector[Snapshot]] = pmap()

    # Status
    door_open: bool = False
    move_count: int = 0
    player_dead: bool = False
    win: bool = False

