"""Ice sliding system.

Advances armed ice blocks. Each update adds the elapsed time to the block's
timer; once an armed block's timer reaches ``ICE_STEP_MS`` it attempts one
base-rule step in its sliding direction and the timer restarts. An
obstructed step disarms the block and records where it stopped (and what it
covers there) as its rest state for undo.
"""

from dataclasses import replace

from shadow_blocks.components import Rest, Timer
from shadow_blocks.config import ICE_STEP_MS
from shadow_blocks.state import State
from shadow_blocks.systems.push import slide_block
from shadow_blocks.types import EntityID
from shadow_blocks.utils.ecs import covering_of


def sliding_system(state: State, eid: EntityID, delta: int) -> State:
    """Run one update of ice block ``eid``.

    Args:
        state (State): Current state.
        eid (EntityID): Ice block id.
        delta (int): Milliseconds elapsed since the previous tick.

    Returns:
        State: Updated state.
    """
    elapsed = state.timer.get(eid, Timer()).elapsed + delta
    sliding = state.sliding.get(eid)
    if sliding is None or elapsed < ICE_STEP_MS:
        return replace(state, timer=state.timer.set(eid, Timer(elapsed)))

    state, moved = slide_block(state, eid, sliding.direction)
    if not moved:
        state = replace(
            state,
            sliding=state.sliding.discard(eid),
            rest=state.rest.set(
                eid, Rest(state.position[eid], covering_of(state, eid))
            ),
        )
    return replace(state, timer=state.timer.set(eid, Timer(0)))
