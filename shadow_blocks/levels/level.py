from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from .entity_spec import EntitySpec

# Grid coordinate alias (x, y)
Position = Tuple[int, int]


@dataclass
class Level:
    """
    Authoring-time level representation.
    - `placements` lists `(pos, EntitySpec)` pairs in declaration order. That
      order becomes the update and draw order of the converted state.
    - Coordinates are stored as authored; the converter clamps them into the
      map when building the immutable ECS State (levels.convert.to_state).
    """

    width: int
    height: int
    placements: List[Tuple[Position, EntitySpec]] = field(default_factory=list)

    # -------- Editing API (purely authoring-time) --------

    def add(self, pos: Position, obj: EntitySpec) -> None:
        """
        Append an EntitySpec placed at pos (x, y).
        """
        self.placements.append((pos, obj))

    def __len__(self) -> int:
        return len(self.placements)
