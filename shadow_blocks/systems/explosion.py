"""Explosion systems.

TNT pushed into a cracked wall flags both with ``Exploding`` during the
update pass. :func:`explosion_system` runs once the pass is complete: it
removes every flagged entity, spawns one explosion on the tile of each
destroyed cracked wall, and clears explosions whose lifetime has run out.
Removals and spawns are committed together so the pass never sees a changing
entity list.
"""

import logging
from dataclasses import replace
from typing import List

from shadow_blocks.components import Position, Timer
from shadow_blocks.config import EXPLOSION_LIFETIME_MS
from shadow_blocks.levels.convert import spawn_entity
from shadow_blocks.levels.factories import create_explosion
from shadow_blocks.state import State
from shadow_blocks.types import EntityID, EntityKind
from shadow_blocks.utils.ecs import kind_of
from shadow_blocks.utils.gc import remove_entities

logger = logging.getLogger(__name__)


def lifetime_system(state: State, eid: EntityID, delta: int) -> State:
    """Accumulate ``delta`` on an explosion's timer."""
    elapsed = state.timer.get(eid, Timer()).elapsed + delta
    return replace(state, timer=state.timer.set(eid, Timer(elapsed)))


def explosion_system(state: State) -> State:
    """Commit detonations and expired explosions collected after the pass."""
    doomed: List[EntityID] = []
    blasts: List[Position] = []
    for eid in state.order:
        kind = kind_of(state, eid)
        if eid in state.exploding:
            doomed.append(eid)
            if kind == EntityKind.CRACKED_WALL:
                blasts.append(state.position[eid])
        elif (
            kind == EntityKind.EXPLOSION
            and state.timer.get(eid, Timer()).elapsed >= EXPLOSION_LIFETIME_MS
        ):
            doomed.append(eid)

    if not doomed:
        return state

    state = remove_entities(state, doomed)
    for pos in blasts:
        logger.debug("Cracked wall destroyed at (%d, %d)", pos.x, pos.y)
        state, _ = spawn_entity(state, create_explosion(), pos)
    return state
