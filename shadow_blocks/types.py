"""Common type aliases and enumerations.

``EntityKind`` is the closed set of entity variants a level can contain. The
occupancy and push rules dispatch on it with ``match`` statements; the
``*_KINDS`` frozensets group the variants by capability.
"""

from enum import StrEnum, auto
from typing import FrozenSet, Tuple


EntityID = int


class EntityKind(StrEnum):
    """Entity variants (values double as level-file names where applicable)."""

    # Terrain
    FLOOR = auto()
    WALL = auto()
    CRACKED_WALL = auto()
    DOOR = auto()
    SWITCH = auto()
    TARGET = auto()
    # Blocks
    STONE = auto()
    ICE = auto()
    TNT = auto()
    # Units
    PLAYER = auto()
    SKELETON = auto()
    ROGUE = auto()
    MAGE = auto()
    # Transients
    BLOOD = auto()
    EXPLOSION = auto()


BLOCK_KINDS: FrozenSet[EntityKind] = frozenset(
    {EntityKind.STONE, EntityKind.ICE, EntityKind.TNT}
)
UNIT_KINDS: FrozenSet[EntityKind] = frozenset(
    {EntityKind.PLAYER, EntityKind.SKELETON, EntityKind.ROGUE, EntityKind.MAGE}
)
COVERABLE_KINDS: FrozenSet[EntityKind] = frozenset(
    {EntityKind.SWITCH, EntityKind.TARGET}
)
# Units that wait for the player's turn before moving.
PLAYER_GATED_KINDS: FrozenSet[EntityKind] = frozenset(
    {EntityKind.PLAYER, EntityKind.ROGUE, EntityKind.MAGE}
)
UNDOABLE_KINDS: FrozenSet[EntityKind] = BLOCK_KINDS | {EntityKind.PLAYER}


class Direction(StrEnum):
    """Cardinal tile directions (y grows downward)."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()

    @property
    def delta(self) -> Tuple[int, int]:
        return _DELTAS[self]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]


_DELTAS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}
