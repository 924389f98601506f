"""Rest component.

Canonical resting place of an ice block: where it last came to a halt, and
the switch/target it covered there. Undo snapshots of ice use these values
rather than the in-flight position.
"""

from dataclasses import dataclass
from typing import Optional

from shadow_blocks.components.properties.position import Position
from shadow_blocks.types import EntityID


@dataclass(frozen=True)
class Rest:
    """Attributes:
    position: Tile the block rested on.
    covering: Switch/target id covered at that tile, if any.
    """

    position: Position
    covering: Optional[EntityID] = None
