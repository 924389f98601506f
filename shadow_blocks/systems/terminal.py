"""Terminal condition systems.

Sets ``state.player_dead`` or ``state.win`` once per level. Death is checked
first: a player sharing its tile with any other unit is removed and a blood
marker takes its place. Only a living player can win.
"""

import logging
from dataclasses import replace
from typing import Optional

from shadow_blocks.levels.convert import spawn_entity
from shadow_blocks.levels.factories import create_blood
from shadow_blocks.objectives import all_targets_covered
from shadow_blocks.state import State
from shadow_blocks.types import UNIT_KINDS, EntityID, EntityKind
from shadow_blocks.utils.ecs import entities_of_kind, kind_of
from shadow_blocks.utils.gc import remove_entities

logger = logging.getLogger(__name__)


def caught_player(state: State) -> Optional[EntityID]:
    """Return the first player sharing a tile with another unit, if any."""
    units = entities_of_kind(state, *UNIT_KINDS)
    for player_id in units:
        if kind_of(state, player_id) != EntityKind.PLAYER:
            continue
        pos = state.position[player_id]
        if any(
            other != player_id and state.position[other] == pos for other in units
        ):
            return player_id
    return None


def kill_player(state: State, player_id: EntityID) -> State:
    """Replace the player with blood and flag the level as lost.

    The blood is inserted just before the first remaining unit in ``order`` so
    units are drawn on top of it.
    """
    pos = state.position[player_id]
    state = remove_entities(state, [player_id])
    index = next(
        (i for i, eid in enumerate(state.order) if kind_of(state, eid) in UNIT_KINDS),
        None,
    )
    state, _ = spawn_entity(state, create_blood(), pos, index=index)
    logger.info("Player caught at (%d, %d)", pos.x, pos.y)
    return replace(state, player_dead=True)


def lose_system(state: State) -> State:
    if state.player_dead:
        return state
    player_id = caught_player(state)
    if player_id is None:
        return state
    return kill_player(state, player_id)


def win_system(state: State) -> State:
    """Set ``win`` when every target is covered (idempotent)."""
    if state.win or state.player_dead:
        return state
    if all_targets_covered(state):
        return replace(state, win=True)
    return state
