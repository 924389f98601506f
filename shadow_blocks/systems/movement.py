"""Unit movement system.

Provides the two primitive unit moves and the player's per-tick update:

* :func:`make_push_move` steps one tile, pushing a block out of the way when
  one occupies the destination. Used by the player and rogues.
* :func:`make_move` steps onto a destination only if it is free of blocks and
  movement-stopping terrain. Used by skeletons and mages.

Both return ``(state, moved)``; a refused move leaves the state unchanged.
"""

from dataclasses import replace
from typing import Optional, Tuple

from shadow_blocks.components import Heading, Position
from shadow_blocks.state import State
from shadow_blocks.systems.push import push_system
from shadow_blocks.types import Direction, EntityID
from shadow_blocks.utils.ecs import (
    is_block,
    is_passable,
    significant_entity,
    stops_movement,
)
from shadow_blocks.utils.grid import next_position


def _relocate(state: State, eid: EntityID, destination: Position) -> State:
    return replace(state, position=state.position.set(eid, destination))


def make_move(
    state: State, eid: EntityID, destination: Position
) -> Tuple[State, bool]:
    """Move ``eid`` to ``destination`` without pushing."""
    occupant = significant_entity(state, destination)
    if not is_passable(state, occupant):
        return state, False
    return _relocate(state, eid, destination), True


def make_push_move(
    state: State, eid: EntityID, direction: Direction
) -> Tuple[State, bool]:
    """Move ``eid`` one tile in ``direction``, pushing a block if present."""
    destination = next_position(state, state.position[eid], direction)
    occupant = significant_entity(state, destination)
    if stops_movement(state, occupant):
        return state, False
    if is_block(state, occupant):
        state, pushed = push_system(state, occupant, direction)
        if not pushed:
            return state, False
    return _relocate(state, eid, destination), True


def player_system(
    state: State, eid: EntityID, direction: Optional[Direction]
) -> Tuple[State, bool]:
    """Run the player's update for this tick.

    A requested ``direction`` becomes the player's heading and is reported as
    a declared move; the caller snapshots the level and arms the units. A
    move declared on an earlier tick (the player is armed) is carried out
    now, in the current heading, and consumes any request made this tick.

    Args:
        state (State): Current state.
        eid (EntityID): Player id.
        direction (Direction | None): Movement requested by the driver.

    Returns:
        Tuple[State, bool]: Updated state and whether a move was declared.
    """
    declared = direction is not None
    if direction is not None:
        state = replace(state, heading=state.heading.set(eid, Heading(direction)))

    heading = state.heading.get(eid)
    if eid in state.armed:
        if heading is not None:
            state, _ = make_push_move(state, eid, heading.direction)
        state = replace(state, armed=state.armed.discard(eid))
        declared = False
    return state, declared
