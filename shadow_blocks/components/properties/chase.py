"""Chase component (mage targeting)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Chase:
    """Offset from the chaser to the player's target tile.

    Recorded when the player declares a move and consumed on the chaser's next
    armed update.

    Attributes:
        dx: Horizontal distance (positive means the player is to the right).
        dy: Vertical distance (positive means the player is below).
    """

    dx: int = 0
    dy: int = 0
