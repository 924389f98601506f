"""Sliding component.

Present while an ice block is armed to keep stepping in ``direction``.
Removed when a step is obstructed or the move is undone.
"""

from dataclasses import dataclass

from shadow_blocks.types import Direction


@dataclass(frozen=True)
class Sliding:
    direction: Direction
