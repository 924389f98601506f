"""Conversion between authoring-time ``Level`` data and the ECS ``State``."""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict, List, Optional, Tuple

from pyrsistent import pmap, pvector

from shadow_blocks.entity import Entity, new_entity_id
from shadow_blocks.state import State
from shadow_blocks.types import EntityID
from shadow_blocks.components.properties import Covering, Position, Rest
from shadow_blocks.utils.ecs import entities_at, is_block, is_coverable
from shadow_blocks.utils.grid import clamp_position
from shadow_blocks.levels.level import Level
from shadow_blocks.levels.entity_spec import EntitySpec, COMPONENT_TO_FIELD


def _init_store_maps() -> Dict[str, Dict[EntityID, Any]]:
    """
    Initialize mutable component-store maps mirroring State; converted to pmaps later.
    """
    stores: Dict[str, Dict[EntityID, Any]] = {
        store: {} for store in COMPONENT_TO_FIELD.values()
    }
    stores["position"] = {}
    stores["rest"] = {}
    return stores


def _alloc_from_spec(
    obj: EntitySpec,
    pos: Position,
    entity: Dict[EntityID, Entity],
    stores: Dict[str, Dict[EntityID, Any]],
) -> EntityID:
    """
    Allocate a new EntityID, register the Entity, copy present components and set Position.
    """
    eid = new_entity_id()
    entity[eid] = Entity(kind=obj.kind)

    for store_name, comp in obj.iter_components():
        stores[store_name][eid] = comp

    stores["position"][eid] = pos
    if obj.resting:
        stores["rest"][eid] = Rest(pos)
    return eid


def _initial_coverings(state: State) -> State:
    """
    Link every block placed on a switch or target to it (the last one on the tile).
    """
    covering = state.covering
    for eid in state.order:
        if not is_block(state, eid):
            continue
        under = [
            other
            for other in entities_at(state, state.position[eid])
            if is_coverable(state, other)
        ]
        if under:
            covering = covering.set(eid, Covering(target=under[-1]))
            if eid in state.rest:
                state = replace(
                    state, rest=state.rest.set(eid, Rest(state.position[eid], under[-1]))
                )
    return replace(state, covering=covering)


def to_state(level: Level) -> State:
    """
    Convert a Level into an immutable State.

    Placements become entities in declaration order. Coordinates are clamped
    into the map starting from (0, 0), so an out-of-range axis lands on 0.
    """
    entity: Dict[EntityID, Entity] = {}
    stores = _init_store_maps()
    order: List[EntityID] = []

    origin = Position(0, 0)
    for (x, y), obj in level.placements:
        pos = clamp_position(origin, x, y, level.width, level.height)
        order.append(_alloc_from_spec(obj, pos, entity, stores))

    state = State(
        width=level.width,
        height=level.height,
        entity=pmap(entity),
        order=pvector(order),
        **{name: pmap(store) for name, store in stores.items()},
    )
    return _initial_coverings(state)


def spawn_entity(
    state: State, obj: EntitySpec, pos: Position, index: Optional[int] = None
) -> Tuple[State, EntityID]:
    """
    Add a new entity to an existing State.

    The entity is appended to `order`, or inserted before `index` when given.
    """
    entity: Dict[EntityID, Entity] = {}
    stores = _init_store_maps()
    eid = _alloc_from_spec(obj, pos, entity, stores)

    if index is None:
        order = state.order.append(eid)
    else:
        order = pvector([*state.order[:index], eid, *state.order[index:]])

    updates: Dict[str, Any] = {
        "entity": state.entity.update(entity),
        "order": order,
    }
    for name, store in stores.items():
        if store:
            updates[name] = getattr(state, name).update(store)
    return replace(state, **updates), eid
