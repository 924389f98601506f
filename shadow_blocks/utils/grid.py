"""Grid math helpers.

Utility functions used by movement, push and pathfinding systems. Functions
here are pure and intentionally lightweight to keep inner loops fast.
"""

from typing import Tuple

from shadow_blocks.components import Position
from shadow_blocks.state import State
from shadow_blocks.types import Direction


def clamp_position(
    current: Position, x: int, y: int, width: int, height: int
) -> Position:
    """Write ``(x, y)`` over ``current`` axis by axis.

    An out-of-range coordinate is ignored and that axis keeps its value from
    ``current``; the result always lies inside ``width`` x ``height`` when
    ``current`` does.
    """
    new_x = x if 0 <= x < width else current.x
    new_y = y if 0 <= y < height else current.y
    return Position(new_x, new_y)


def next_position(state: State, pos: Position, direction: Direction) -> Position:
    """Return the tile one step from ``pos`` in ``direction``, clamped to the map."""
    dx, dy = direction.delta
    return clamp_position(pos, pos.x + dx, pos.y + dy, state.width, state.height)


def offset(src: Position, dst: Position) -> Tuple[int, int]:
    """Vector from ``src`` to ``dst`` in tiles."""
    return dst.x - src.x, dst.y - src.y


def sign(value: int) -> int:
    """Sign of ``value`` where zero counts as positive."""
    return -1 if value < 0 else 1
