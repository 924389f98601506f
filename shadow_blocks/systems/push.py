"""Push interaction system.

Resolves an attempt to displace a block one tile in a direction. The base
rule (stone, and TNT away from cracked walls) moves the block when the tile
beyond it holds nothing that stops movement and no other block. Ice and TNT
override it:

* Ice does not move on the push itself; it arms a slide that the sliding
  system advances one tile per interval until obstructed.
* TNT pushed into a cracked wall flags both for detonation and moves onto the
  wall's tile.

A failed push never raises; callers receive ``(state, False)``.
"""

from dataclasses import replace
from typing import Tuple

from shadow_blocks.components import (
    Covering,
    Exploding,
    Position,
    Rest,
    Sliding,
    Timer,
)
from shadow_blocks.config import ICE_STEP_MS
from shadow_blocks.state import State
from shadow_blocks.types import Direction, EntityID, EntityKind
from shadow_blocks.utils.ecs import (
    covering_of,
    is_coverable,
    is_passable,
    kind_of,
    significant_entity,
)
from shadow_blocks.utils.grid import next_position


def displace_block(
    state: State, block_id: EntityID, destination: Position, occupant: EntityID
) -> State:
    """Move a block and update its covering link in a single transition.

    The previous covering (if any) is released; if ``occupant`` (the
    significant entity at ``destination``) is a switch or target the block
    starts covering it.
    """
    covering = state.covering.discard(block_id)
    if is_coverable(state, occupant):
        covering = covering.set(block_id, Covering(target=occupant))
    return replace(
        state,
        position=state.position.set(block_id, destination),
        covering=covering,
    )


def slide_block(
    state: State, block_id: EntityID, direction: Direction
) -> Tuple[State, bool]:
    """Apply the base push rule.

    Returns:
        Tuple[State, bool]: Updated state and whether the block moved.
    """
    destination = next_position(state, state.position[block_id], direction)
    occupant = significant_entity(state, destination)
    if not is_passable(state, occupant):
        return state, False
    return displace_block(state, block_id, destination, occupant), True


def _push_ice(
    state: State, block_id: EntityID, direction: Direction
) -> Tuple[State, bool]:
    pos = state.position[block_id]
    occupant = significant_entity(state, next_position(state, pos, direction))
    if not is_passable(state, occupant):
        # Blocked before moving: this tile is where the block now rests.
        return (
            replace(
                state,
                sliding=state.sliding.discard(block_id),
                rest=state.rest.set(block_id, Rest(pos, covering_of(state, block_id))),
            ),
            False,
        )
    # Timer primed so the first slide step happens on the block's next update.
    return (
        replace(
            state,
            sliding=state.sliding.set(block_id, Sliding(direction)),
            timer=state.timer.set(block_id, Timer(ICE_STEP_MS)),
        ),
        True,
    )


def _push_tnt(
    state: State, block_id: EntityID, direction: Direction
) -> Tuple[State, bool]:
    destination = next_position(state, state.position[block_id], direction)
    occupant = significant_entity(state, destination)
    if kind_of(state, occupant) != EntityKind.CRACKED_WALL:
        return slide_block(state, block_id, direction)
    exploding = state.exploding.set(block_id, Exploding()).set(occupant, Exploding())
    return (
        replace(
            state,
            exploding=exploding,
            position=state.position.set(block_id, destination),
            covering=state.covering.discard(block_id),
        ),
        True,
    )


def push_system(
    state: State, block_id: EntityID, direction: Direction
) -> Tuple[State, bool]:
    """Attempt to push ``block_id`` one tile in ``direction``.

    Args:
        state (State): Current immutable state.
        block_id (EntityID): Block being pushed.
        direction (Direction): Direction of the push.

    Returns:
        Tuple[State, bool]: Updated state and whether the push succeeded.

    Raises:
        ValueError: If ``block_id`` is not a block.
    """
    match kind_of(state, block_id):
        case EntityKind.STONE:
            return slide_block(state, block_id, direction)
        case EntityKind.ICE:
            return _push_ice(state, block_id, direction)
        case EntityKind.TNT:
            return _push_tnt(state, block_id, direction)
        case kind:
            raise ValueError(f"Entity {block_id} of kind {kind} cannot be pushed")
