"""shadow_blocks.components
=================================

Aggregate import surface for all ECS component dataclasses used by the engine.

The symbols re-exported here are curated so downstream code can import
components from a single place, e.g.::

    from shadow_blocks.components import Position, Covering, Timer

All component classes are simple ``@dataclass`` value objects; they carry no
behavior beyond their fields and are manipulated by systems during the tick
pipeline. See the ``systems`` package for transformation logic.
"""

from .properties import Armed
from .properties import BlockSnapshot, PlayerSnapshot, Snapshot
from .properties import Chase
from .properties import Covering
from .properties import Exploding
from .properties import Heading
from .properties import Position
from .properties import Rest
from .properties import Sliding
from .properties import Timer

__all__ = [
    "Armed",
    "BlockSnapshot",
    "Chase",
    "Covering",
    "Exploding",
    "Heading",
    "PlayerSnapshot",
    "Position",
    "Rest",
    "Sliding",
    "Snapshot",
    "Timer",
]
