"""Undo log.

Before every player turn :func:`save_system` pushes one snapshot per undoable
entity (the player and every block) onto its stack in ``State.history``.
:func:`undo_system` pops one snapshot per entity and restores it, rewinding a
whole turn. Ice is snapshotted at its rest state so a block that is still
sliding rewinds to where its slide began.

Entities removed during play (exploded TNT) lose their history with them and
are not brought back.
"""

from dataclasses import replace

from pyrsistent import pmap, pvector

from shadow_blocks.components import (
    BlockSnapshot,
    Covering,
    PlayerSnapshot,
    Rest,
    Snapshot,
)
from shadow_blocks.state import State
from shadow_blocks.types import UNDOABLE_KINDS, EntityID, EntityKind
from shadow_blocks.utils.ecs import covering_of, entities_of_kind, kind_of


def snapshot_of(state: State, eid: EntityID) -> Snapshot:
    """Capture the restorable state of an undoable entity."""
    match kind_of(state, eid):
        case EntityKind.PLAYER:
            return PlayerSnapshot(position=state.position[eid])
        case EntityKind.ICE:
            rest = state.rest.get(eid) or Rest(
                state.position[eid], covering_of(state, eid)
            )
            return BlockSnapshot(position=rest.position, covering=rest.covering)
        case EntityKind.STONE | EntityKind.TNT:
            return BlockSnapshot(
                position=state.position[eid], covering=covering_of(state, eid)
            )
        case kind:
            raise ValueError(f"Entity {eid} of kind {kind} is not undoable")


def save_system(state: State) -> State:
    history = state.history
    for eid in entities_of_kind(state, *UNDOABLE_KINDS):
        stack = history.get(eid, pvector())
        history = history.set(eid, stack.append(snapshot_of(state, eid)))
    return replace(state, history=history)


def _restore(state: State, eid: EntityID, snapshot: Snapshot) -> State:
    match snapshot:
        case PlayerSnapshot(position=position):
            return replace(state, position=state.position.set(eid, position))
        case BlockSnapshot(position=position, covering=target):
            covering = state.covering.discard(eid)
            if target is not None and target in state.entity:
                covering = covering.set(eid, Covering(target=target))
            state = replace(
                state,
                position=state.position.set(eid, position),
                covering=covering,
            )
            if kind_of(state, eid) == EntityKind.ICE:
                state = replace(
                    state,
                    sliding=state.sliding.discard(eid),
                    rest=state.rest.set(eid, Rest(position, target)),
                )
            return state
        case _:
            raise ValueError(f"Unknown snapshot record {snapshot!r}")


def undo_system(state: State) -> State:
    """Rewind one player turn.

    Does nothing when no turn has been taken. Any move declared but not yet
    carried out is cancelled along with the turn.
    """
    if state.move_count <= 0:
        return state

    history = state.history
    for eid in entities_of_kind(state, *UNDOABLE_KINDS):
        stack = history.get(eid)
        if not stack:
            continue
        history = history.set(eid, stack[:-1])
        state = _restore(state, eid, stack[-1])

    return replace(
        state,
        history=history,
        move_count=state.move_count - 1,
        win=False,
        armed=pmap(),
        chase=pmap(),
    )
