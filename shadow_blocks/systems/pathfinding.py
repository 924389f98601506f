"""Mage pursuit system.

When the player declares a move, each mage records its offset to the tile the
player is heading for (:func:`aim`). On its next armed update the mage takes
one step toward that tile: along the x axis first when the horizontal
distance is strictly greater, falling back to the y axis when the x step is
skipped or blocked. Mages never push.
"""

from dataclasses import replace

from shadow_blocks.components import Armed, Chase, Position
from shadow_blocks.state import State
from shadow_blocks.systems.movement import make_move
from shadow_blocks.types import EntityID
from shadow_blocks.utils.grid import clamp_position, offset, sign


def aim(state: State, eid: EntityID, target: Position) -> State:
    """Arm mage ``eid`` to chase ``target`` on its next update."""
    dx, dy = offset(state.position[eid], target)
    return replace(
        state,
        chase=state.chase.set(eid, Chase(dx, dy)),
        armed=state.armed.set(eid, Armed()),
    )


def pathfinding_system(state: State, eid: EntityID) -> State:
    if eid not in state.armed:
        return state
    chase = state.chase.get(eid, Chase())
    pos = state.position[eid]

    moved = False
    if abs(chase.dx) > abs(chase.dy):
        destination = clamp_position(
            pos, pos.x + sign(chase.dx), pos.y, state.width, state.height
        )
        state, moved = make_move(state, eid, destination)
    if not moved:
        destination = clamp_position(
            pos, pos.x, pos.y + sign(chase.dy), state.width, state.height
        )
        state, _ = make_move(state, eid, destination)

    return replace(state, armed=state.armed.discard(eid))
