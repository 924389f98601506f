"""Garbage collection utilities.

Removes entities and every component entry that belongs to them. *Alive*
entities are exactly the keys of the master ``entity`` registry; any
component map entry (including undo history) for an id outside that set is
pruned so removed entities cannot linger in later snapshots.
"""

from dataclasses import replace
from typing import Any, Dict, Iterable, Set, cast

from pyrsistent import pmap, pvector
from pyrsistent.typing import PMap

from shadow_blocks.state import State
from shadow_blocks.types import EntityID


def compute_alive_entities(state: State) -> Set[EntityID]:
    """Return the IDs still present in the entity registry."""
    return set(state.entity.keys())


def run_garbage_collector(state: State) -> State:
    """Prune component maps and ``order`` to only contain alive entity IDs."""
    alive = compute_alive_entities(state)
    new_fields: Dict[str, Any] = {}
    for field in state.__dataclass_fields__:
        if field == "entity":
            continue
        value = getattr(state, field)
        if isinstance(value, type(pmap())):
            value_map = cast(PMap[EntityID, Any], value)
            new_fields[field] = pmap(
                {k: v for k, v in value_map.items() if k in alive}
            )
    new_fields["order"] = pvector(eid for eid in state.order if eid in alive)
    return replace(state, **new_fields)


def remove_entities(state: State, eids: Iterable[EntityID]) -> State:
    """Drop ``eids`` from the registry and collect their components."""
    entity = state.entity
    removed = False
    for eid in eids:
        if eid in entity:
            entity = entity.remove(eid)
            removed = True
    if not removed:
        return state
    return run_garbage_collector(replace(state, entity=entity))
