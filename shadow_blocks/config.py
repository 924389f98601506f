"""Configuration: timing thresholds and session settings.

Timing constants are accumulated-millisecond thresholds compared against
``Timer.elapsed``. :class:`GameConfig` carries everything the session needs
to locate and sequence level files.
"""

from dataclasses import dataclass, field
from pathlib import Path

ICE_STEP_MS = 250
"""Delay between consecutive steps of a sliding ice block."""

SKELETON_STEP_MS = 1000
"""Delay between skeleton patrol steps."""

EXPLOSION_LIFETIME_MS = 400
"""Time an explosion stays on the map before it is removed."""

DEFAULT_LEVEL_DIR = Path(__file__).parent / "examples" / "levels"


@dataclass(frozen=True)
class GameConfig:
    """Session configuration.

    Attributes:
        level_dir: Directory holding ``<n><level_suffix>`` files.
        level_suffix: Level file extension.
        first_level: Level number the session starts on.
        level_max: Number of the final level; completing it ends the game.
        max_width: Largest map width the gym observation can hold.
        max_height: Largest map height the gym observation can hold.
    """

    level_dir: Path = field(default=DEFAULT_LEVEL_DIR)
    level_suffix: str = ".lvl"
    first_level: int = 0
    level_max: int = 5
    max_width: int = 25
    max_height: int = 19

    def level_path(self, level_num: int) -> Path:
        return Path(self.level_dir) / f"{level_num}{self.level_suffix}"
