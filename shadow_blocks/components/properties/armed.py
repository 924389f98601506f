"""Armed marker component.

Set on player-gated units when the player declares a move; the unit performs
one move on its next update and the marker is removed.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Armed:
    """Marker (no data)."""

    pass
