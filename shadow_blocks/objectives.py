"""Objective predicates.

A level is complete when every target is covered by a block. The reducer
checks this after each tick to decide whether to set ``state.win``.
"""

from shadow_blocks.state import State
from shadow_blocks.types import EntityKind
from shadow_blocks.utils.ecs import entities_of_kind, is_covered


def all_targets_covered(state: State) -> bool:
    """Every target is covered (vacuously true when the level has none)."""
    return all(
        is_covered(state, eid) for eid in entities_of_kind(state, EntityKind.TARGET)
    )
