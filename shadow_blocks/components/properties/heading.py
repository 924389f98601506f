"""Heading component.

Current facing of a unit. The player overwrites it on every declared move;
skeletons and rogues flip it when their path is obstructed.
"""

from dataclasses import dataclass

from shadow_blocks.types import Direction


@dataclass(frozen=True)
class Heading:
    """Attributes:
    direction: Direction of the next attempted step.
    """

    direction: Direction
