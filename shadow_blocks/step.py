"""State reducer and tick orchestration.

This module wires together all systems in the correct order to implement a
single *tick* transition given the elapsed time and the driver's actions. The
exported :func:`step` is the only public mutation entry point for gameplay
progression within a level and is pure: it returns a *new*
:class:`shadow_blocks.state.State`.

Ordering:

1. ``UNDO`` rewinds one turn and ends the tick.
2. Every entity is updated in declaration order. The player's update may
   declare a move; the turn is then opened (undo snapshot, move count,
   arming of player-gated units) before the pass continues.
3. Detonations and expired explosions are committed after the pass.
4. Terminal checks: death, then win.

Level-level commands (restart, skip) belong to :class:`shadow_blocks.game.Game`.
"""

from dataclasses import replace
from typing import Iterable, Optional

from shadow_blocks.actions import Action, requested_direction
from shadow_blocks.components import Armed
from shadow_blocks.state import State
from shadow_blocks.systems.explosion import explosion_system, lifetime_system
from shadow_blocks.systems.movement import player_system
from shadow_blocks.systems.moving import rogue_system, skeleton_system
from shadow_blocks.systems.pathfinding import aim, pathfinding_system
from shadow_blocks.systems.sliding import sliding_system
from shadow_blocks.systems.switch import switch_system
from shadow_blocks.systems.terminal import lose_system, win_system
from shadow_blocks.systems.undo import save_system, undo_system
from shadow_blocks.types import PLAYER_GATED_KINDS, Direction, EntityID, EntityKind
from shadow_blocks.utils.ecs import entities_of_kind, kind_of
from shadow_blocks.utils.grid import next_position


def step(state: State, delta: int, actions: Iterable[Action] = ()) -> State:
    """Advance the level by one tick.

    Args:
        state (State): Previous immutable level state.
        delta (int): Milliseconds elapsed since the previous tick.
        actions (Iterable[Action]): Commands pressed this tick. Movement
            commands and ``UNDO`` are ignored once the player is dead; timed
            entities keep running.

    Returns:
        State: Next state snapshot.
    """
    pressed = frozenset(actions)
    direction: Optional[Direction] = None
    if not state.player_dead:
        if Action.UNDO in pressed:
            return undo_system(state)
        direction = requested_direction(pressed)

    for eid in state.order:
        state = _update_entity(state, eid, delta, direction)

    state = explosion_system(state)
    state = lose_system(state)
    return win_system(state)


def _update_entity(
    state: State, eid: EntityID, delta: int, direction: Optional[Direction]
) -> State:
    """Dispatch one entity's update on its kind."""
    match kind_of(state, eid):
        case EntityKind.PLAYER:
            state, declared = player_system(state, eid, direction)
            if declared:
                state = open_turn(state, eid)
            return state
        case EntityKind.SKELETON:
            return skeleton_system(state, eid, delta)
        case EntityKind.ROGUE:
            return rogue_system(state, eid)
        case EntityKind.MAGE:
            return pathfinding_system(state, eid)
        case EntityKind.ICE:
            return sliding_system(state, eid, delta)
        case EntityKind.SWITCH:
            return switch_system(state, eid)
        case EntityKind.EXPLOSION:
            return lifetime_system(state, eid, delta)
        case _:
            return state


def open_turn(state: State, player_id: EntityID) -> State:
    """Start a player turn after the player declared a move.

    Saves the undo snapshot before anything moves, counts the move, arms every
    player-gated unit and points mages at the tile the player is heading for.
    """
    state = save_system(state)

    armed = state.armed
    for eid in entities_of_kind(state, *PLAYER_GATED_KINDS):
        armed = armed.set(eid, Armed())
    state = replace(state, armed=armed, move_count=state.move_count + 1)

    heading = state.heading[player_id].direction
    target = next_position(state, state.position[player_id], heading)
    for mage_id in entities_of_kind(state, EntityKind.MAGE):
        state = aim(state, mage_id, target)
    return state
