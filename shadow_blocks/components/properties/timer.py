"""Timer component.

Accumulated elapsed milliseconds for time-driven entities (skeleton steps,
ice slide steps, explosion lifetime). Systems compare ``elapsed`` with a fixed
threshold from :mod:`shadow_blocks.config` and reset it to zero on trigger.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Timer:
    elapsed: int = 0
