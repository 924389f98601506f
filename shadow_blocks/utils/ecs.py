"""ECS convenience queries and the occupancy rules.

Helper functions for querying entity/component relationships without
introducing iteration logic into systems. All functions are pure and operate
on the immutable :class:`shadow_blocks.state.State` snapshot.

Performance: ``entities_at`` uses a cached reverse index built from the
immutable ``State.order`` / ``State.position`` pair, giving O(1) lookups per
state snapshot while preserving declaration order inside each tile.
"""

from functools import lru_cache
from typing import Dict, List, Mapping, Optional, Tuple

from pyrsistent.typing import PMap, PVector

from shadow_blocks.components import Position
from shadow_blocks.state import State
from shadow_blocks.types import (
    BLOCK_KINDS,
    COVERABLE_KINDS,
    EntityID,
    EntityKind,
)


@lru_cache(maxsize=4096)
def _position_index(
    order: PVector[EntityID],
    position_store: PMap[EntityID, Position],
) -> Mapping[Position, Tuple[EntityID, ...]]:
    """Build a reverse index from position to entity IDs in declaration order.

    Both arguments are persistent structures, hashable and thus safe to use
    with ``lru_cache``. Any new ``State`` that changes either produces a
    distinct key.
    """
    index: Dict[Position, List[EntityID]] = {}
    for eid in order:
        pos = position_store.get(eid)
        if pos is not None:
            index.setdefault(pos, []).append(eid)
    return {pos: tuple(eids) for pos, eids in index.items()}


def entities_at(state: State, pos: Position) -> Tuple[EntityID, ...]:
    """Return entity IDs whose position equals ``pos``, in declaration order."""
    idx = _position_index(state.order, state.position)
    return idx.get(pos, ())


def entities_of_kind(state: State, *kinds: EntityKind) -> List[EntityID]:
    """Return IDs of the given kinds in declaration order."""
    return [eid for eid in state.order if state.entity[eid].kind in kinds]


def kind_of(state: State, eid: EntityID) -> EntityKind:
    return state.entity[eid].kind


def stops_movement(state: State, eid: EntityID) -> bool:
    """Return True if the entity blocks every kind of movement into its tile."""
    match state.entity[eid].kind:
        case EntityKind.WALL | EntityKind.CRACKED_WALL:
            return True
        case EntityKind.DOOR:
            return not state.door_open
        case _:
            return False


def is_block(state: State, eid: EntityID) -> bool:
    return state.entity[eid].kind in BLOCK_KINDS


def is_coverable(state: State, eid: EntityID) -> bool:
    return state.entity[eid].kind in COVERABLE_KINDS


def is_passable(state: State, eid: EntityID) -> bool:
    """True if a unit may step onto (or a block slide onto) this occupant."""
    return not (stops_movement(state, eid) or is_block(state, eid))


def significant_entity(state: State, pos: Position) -> EntityID:
    """Return the occupant of ``pos`` that decides movement outcomes there.

    Priority:
        1. The first entity that stops movement or is a block.
        2. Otherwise a switch/target on the tile.
        3. Otherwise any other occupant (floor, units, transients).

    Raises:
        ValueError: If nothing occupies ``pos``. Levels must place at least a
            floor on every reachable tile.
    """
    goal: Optional[EntityID] = None
    default: Optional[EntityID] = None
    for eid in entities_at(state, pos):
        if not is_passable(state, eid):
            return eid
        if is_coverable(state, eid):
            goal = eid
        else:
            default = eid
    if goal is not None:
        return goal
    if default is not None:
        return default
    raise ValueError(f"No entity occupies {pos}")


def covering_of(state: State, eid: EntityID) -> Optional[EntityID]:
    """Return the switch/target id covered by block ``eid``, if any."""
    covering = state.covering.get(eid)
    return covering.target if covering is not None else None


def is_covered(state: State, eid: EntityID) -> bool:
    """True iff some block's covering references ``eid``."""
    return any(covering.target == eid for covering in state.covering.values())
