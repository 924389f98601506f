"""Exploding marker (pending removal)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Exploding:
    """Marker set on TNT and cracked walls when they detonate.

    The explosion system removes flagged entities at the end of the tick.
    """

    pass
