"""Level file loader.

Level files are plain text. The first non-blank line is the header
``width,height``; every following non-blank line is one record
``variant_name,tile_x,tile_y``. Records are kept in file order, which becomes
the declaration order of the level.

Malformed records are skipped and unknown variant names fall back to a
player, each with a warning. A missing file or a malformed header raises
:class:`LevelLoadError`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from .factories import FACTORIES, create_player
from .level import Level

logger = logging.getLogger(__name__)


class LevelLoadError(RuntimeError):
    """Raised when a level file cannot be read or its header is invalid."""


def _parse_header(line: str) -> tuple[int, int]:
    parts = [part.strip() for part in line.split(",")]
    try:
        width, height = (int(part) for part in parts)
    except ValueError as exc:
        raise LevelLoadError(f"Invalid level header: {line!r}") from exc
    if width <= 0 or height <= 0:
        raise LevelLoadError(f"Level dimensions must be positive: {line!r}")
    return width, height


def parse_level(text: str) -> Level:
    """Parse level file contents into a :class:`Level`.

    Raises:
        LevelLoadError: If the header is missing or invalid.
    """
    lines = [(num, line.strip()) for num, line in enumerate(text.splitlines(), 1)]
    lines = [(num, line) for num, line in lines if line]
    if not lines:
        raise LevelLoadError("Level file is empty")

    width, height = _parse_header(lines[0][1])
    level = Level(width, height)

    for num, line in lines[1:]:
        parts = [part.strip() for part in line.split(",")]
        if len(parts) != 3:
            logger.warning("Skipping malformed record on line %d: %r", num, line)
            continue
        name, raw_x, raw_y = parts
        try:
            x, y = int(raw_x), int(raw_y)
        except ValueError:
            logger.warning("Skipping record with bad coordinates on line %d: %r", num, line)
            continue
        factory = FACTORIES.get(name.lower())
        if factory is None:
            logger.warning(
                "Unknown variant %r on line %d; placing a player instead", name, num
            )
            factory = create_player
        level.add((x, y), factory())

    return level


def load_level(path: Union[str, Path]) -> Level:
    """Read and parse the level file at ``path``.

    Raises:
        LevelLoadError: If the file cannot be read or its header is invalid.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise LevelLoadError(f"Cannot read level file {path}: {exc}") from exc
    level = parse_level(text)
    logger.info("Loaded %s: %dx%d, %d entities", path, level.width, level.height, len(level))
    return level
