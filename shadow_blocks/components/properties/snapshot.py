"""Undo snapshot records.

Plain data captured once per player turn for every undoable entity and kept
in a per-entity ``PVector`` stack (``State.history``). Restoring pops the most
recent record; a popped record is discarded.
"""

from dataclasses import dataclass
from typing import Optional, Union

from shadow_blocks.components.properties.position import Position
from shadow_blocks.types import EntityID


@dataclass(frozen=True)
class PlayerSnapshot:
    position: Position


@dataclass(frozen=True)
class BlockSnapshot:
    """Block state at save time.

    For ice blocks ``position`` and ``covering`` hold the *rest* values, so an
    undo issued mid-slide returns the block to where it was pushed from.
    """

    position: Position
    covering: Optional[EntityID] = None


Snapshot = Union[PlayerSnapshot, BlockSnapshot]
