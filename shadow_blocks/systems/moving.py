"""Autonomous patrol system.

Skeletons and rogues walk back and forth along a fixed axis, reversing their
heading and retrying once in the opposite direction whenever a step is
obstructed.

* Skeletons patrol vertically on a ``SKELETON_STEP_MS`` timer and never push.
* Rogues patrol horizontally, one step per player turn, pushing blocks.
"""

from dataclasses import replace
from typing import Tuple

from shadow_blocks.components import Heading, Timer
from shadow_blocks.config import SKELETON_STEP_MS
from shadow_blocks.state import State
from shadow_blocks.systems.movement import make_move, make_push_move
from shadow_blocks.types import Direction, EntityID
from shadow_blocks.utils.grid import next_position


def _step(
    state: State, eid: EntityID, direction: Direction, push: bool
) -> Tuple[State, bool]:
    if push:
        return make_push_move(state, eid, direction)
    destination = next_position(state, state.position[eid], direction)
    return make_move(state, eid, destination)


def patrol(state: State, eid: EntityID, push: bool) -> State:
    """Step along the current heading, turning around once if blocked."""
    direction = state.heading[eid].direction
    state, moved = _step(state, eid, direction, push)
    if moved:
        return state
    reverse = direction.opposite
    state = replace(state, heading=state.heading.set(eid, Heading(reverse)))
    state, _ = _step(state, eid, reverse, push)
    return state


def skeleton_system(state: State, eid: EntityID, delta: int) -> State:
    """Advance a skeleton's timer, patrolling once the threshold is reached.

    The threshold is checked before the delta is added, so a step happens on
    the first update after the timer has reached ``SKELETON_STEP_MS``.
    """
    elapsed = state.timer.get(eid, Timer()).elapsed
    if elapsed >= SKELETON_STEP_MS:
        state = patrol(state, eid, push=False)
        return replace(state, timer=state.timer.set(eid, Timer(0)))
    return replace(state, timer=state.timer.set(eid, Timer(elapsed + delta)))


def rogue_system(state: State, eid: EntityID) -> State:
    """Take one pushing patrol step if the player's turn armed this rogue."""
    if eid not in state.armed:
        return state
    state = patrol(state, eid, push=True)
    return replace(state, armed=state.armed.discard(eid))
