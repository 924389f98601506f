"""Action enumerations.

Defines the human readable :class:`Action` (string enum) consumed by the
reducer and the session, and a stable integer :class:`GymAction` mapping for
Gymnasium compatibility.

``MOVE_ACTIONS`` is the canonical ordered list of movement actions. When more
than one is pressed in the same tick the last one in this order wins.
"""

from enum import IntEnum, StrEnum, auto
from typing import Dict, Iterable, Optional

from shadow_blocks.types import Direction


class Action(StrEnum):
    """String enum of driver commands.

    Members:
        UP, DOWN, LEFT, RIGHT: Player movement.
        UNDO: Rewind one player turn.
        RESTART: Reload the current level.
        SKIP_LEVEL: Debug shortcut finishing the current level.
        WAIT: Advance time without input.
    """

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    UNDO = auto()
    RESTART = auto()
    SKIP_LEVEL = auto()
    WAIT = auto()


MOVE_ACTIONS = [Action.UP, Action.DOWN, Action.LEFT, Action.RIGHT]

ACTION_DIRECTIONS: Dict[Action, Direction] = {
    Action.UP: Direction.UP,
    Action.DOWN: Direction.DOWN,
    Action.LEFT: Direction.LEFT,
    Action.RIGHT: Direction.RIGHT,
}


def requested_direction(actions: Iterable[Action]) -> Optional[Direction]:
    """Return the movement direction requested this tick, if any."""
    pressed = set(actions)
    direction: Optional[Direction] = None
    for action in MOVE_ACTIONS:
        if action in pressed:
            direction = ACTION_DIRECTIONS[action]
    return direction


class GymAction(IntEnum):
    """Stable integer mapping for integration with Gymnasium ``Discrete`` spaces."""

    UP = 0  # start at 0 for explicitness
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    UNDO = auto()
    RESTART = auto()
    WAIT = auto()
