"""Property component aggregates.

This module re-exports the *property* components: small immutable
dataclasses describing one aspect of an entity (where it is, which way it
faces, what it covers, how long it has been waiting). Systems read these to
resolve movement, pushes, triggers and undo.

State changes are expressed by storing a new instance (or removing one) in the
matching ``State`` store between ticks.
"""

from .armed import Armed
from .chase import Chase
from .covering import Covering
from .exploding import Exploding
from .heading import Heading
from .position import Position
from .rest import Rest
from .sliding import Sliding
from .snapshot import BlockSnapshot, PlayerSnapshot, Snapshot
from .timer import Timer

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
