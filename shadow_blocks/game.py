"""Level session.

:class:`Game` owns the sequence of levels: it loads the current level, feeds
ticks to :func:`shadow_blocks.step.step`, and handles the session commands
that replace the level state wholesale (restart, skip, advancing on a win).
"""

import logging
from typing import Iterable, Optional

from shadow_blocks.actions import Action
from shadow_blocks.config import GameConfig
from shadow_blocks.frame import Frame, frame
from shadow_blocks.levels.convert import to_state
from shadow_blocks.levels.loader import LevelLoadError, load_level
from shadow_blocks.state import State
from shadow_blocks.step import step
from shadow_blocks.systems.undo import save_system

logger = logging.getLogger(__name__)


class Game:
    """Plays levels ``first_level`` through ``level_max`` in order.

    Attributes:
        config (GameConfig): Level location and numbering.
        level_num (int): Number of the level being played.
        state (State): Current level state.
        finished (bool): True once the final level has been completed.
    """

    def __init__(
        self, config: Optional[GameConfig] = None, level_num: Optional[int] = None
    ) -> None:
        """Create a session and load its first level.

        Raises:
            LevelLoadError: If the first level cannot be loaded.
        """
        self.config = config or GameConfig()
        self.level_num = self.config.first_level if level_num is None else level_num
        self.finished = False
        self.state = self.start_level()

    def start_level(self) -> State:
        """(Re)load the current level with a fresh move count and undo history.

        Raises:
            LevelLoadError: If the level file cannot be loaded.
        """
        path = self.config.level_path(self.level_num)
        try:
            level = load_level(path)
        except LevelLoadError:
            logger.error("Cannot start level %d from %s", self.level_num, path)
            raise
        self.state = save_system(to_state(level))
        logger.info("Started level %d", self.level_num)
        return self.state

    def restart(self) -> State:
        return self.start_level()

    def finish_level(self) -> State:
        """Advance to the next level, or end the game after the final one."""
        if self.level_num < self.config.level_max:
            logger.info("Level %d complete", self.level_num)
            self.level_num += 1
            return self.start_level()
        if not self.finished:
            logger.info("Final level %d complete", self.level_num)
        self.finished = True
        return self.state

    def update(self, delta: int, actions: Iterable[Action] = ()) -> State:
        """Advance the session by one tick.

        ``RESTART`` takes precedence, then ``UNDO`` (handled by ``step``), then
        ``SKIP_LEVEL``; a session command ends the tick. ``SKIP_LEVEL`` is
        ignored while the player is dead.

        Args:
            delta (int): Milliseconds elapsed since the previous tick.
            actions (Iterable[Action]): Commands pressed this tick.

        Returns:
            State: State of the level being played after the tick.
        """
        pressed = frozenset(actions)
        if Action.RESTART in pressed:
            return self.restart()
        if (
            Action.SKIP_LEVEL in pressed
            and Action.UNDO not in pressed
            and not self.state.player_dead
        ):
            return self.finish_level()

        self.state = step(self.state, delta, pressed)
        if self.state.win and not self.finished:
            return self.finish_level()
        return self.state

    def frame(self) -> Frame:
        return frame(self.state)
