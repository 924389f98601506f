"""Render frame.

The engine never draws. :func:`frame` flattens a :class:`State` into what a
renderer needs: every entity in draw order with its kind, tile and visibility,
plus the overlay scalars (move counter, failure banner).
"""

from dataclasses import dataclass
from typing import Tuple

from shadow_blocks.components import Position
from shadow_blocks.state import State
from shadow_blocks.types import EntityID, EntityKind


@dataclass(frozen=True)
class FrameEntity:
    entity_id: EntityID
    kind: EntityKind
    position: Position
    visible: bool = True


@dataclass(frozen=True)
class Frame:
    """Drawable snapshot of one tick.

    Attributes:
        entities: Entities in draw order (later entries are drawn on top).
        move_count: Player turns taken on this level.
        player_dead: Whether to show the failure message.
    """

    entities: Tuple[FrameEntity, ...]
    move_count: int
    player_dead: bool


def is_visible(state: State, eid: EntityID) -> bool:
    """Open doors are not drawn; everything else is."""
    if state.entity[eid].kind == EntityKind.DOOR:
        return not state.door_open
    return True


def frame(state: State) -> Frame:
    entities = tuple(
        FrameEntity(
            entity_id=eid,
            kind=state.entity[eid].kind,
            position=state.position[eid],
            visible=is_visible(state, eid),
        )
        for eid in state.order
    )
    return Frame(
        entities=entities,
        move_count=state.move_count,
        player_dead=state.player_dead,
    )
