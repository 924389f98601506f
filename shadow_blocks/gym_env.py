"""Gymnasium environment wrapper for Shadow Blocks.

Each environment step feeds one action to the session for a single tick and
then lets the level run for ``settle_ticks`` idle ticks, so a declared move is
carried out (and its consequences play out) before the observation is taken.

Observation schema:
``{"grid": np.ndarray(max_height, max_width), "move_count": int, "player_dead": int}``
where each grid cell holds the code of the topmost visible entity kind on
that tile (see :data:`KIND_CODES`) and ``-1`` outside the level.

Reward is ``1.0`` for every level completed during the step. ``terminated``
is ``True`` once the final level is complete, ``truncated`` while the player
is dead (restart to continue).
"""

from typing import Any, Dict, List, Optional, Tuple

import gymnasium as gym
import numpy as np

from shadow_blocks.actions import Action, GymAction
from shadow_blocks.config import ICE_STEP_MS, GameConfig
from shadow_blocks.frame import frame
from shadow_blocks.game import Game
from shadow_blocks.types import EntityKind

ObsType = Dict[str, Any]

KIND_CODES: Dict[EntityKind, int] = {kind: code for code, kind in enumerate(EntityKind)}

# Single-character glyphs for ``render("ansi")``.
KIND_GLYPHS: Dict[EntityKind, str] = {
    EntityKind.FLOOR: ".",
    EntityKind.WALL: "#",
    EntityKind.CRACKED_WALL: "%",
    EntityKind.DOOR: "+",
    EntityKind.SWITCH: "s",
    EntityKind.TARGET: "t",
    EntityKind.STONE: "O",
    EntityKind.ICE: "I",
    EntityKind.TNT: "X",
    EntityKind.PLAYER: "@",
    EntityKind.SKELETON: "K",
    EntityKind.ROGUE: "R",
    EntityKind.MAGE: "M",
    EntityKind.BLOOD: "~",
    EntityKind.EXPLOSION: "*",
}


class ShadowBlocksEnv(gym.Env[ObsType, np.integer]):
    """Gymnasium ``Env`` implementation over a :class:`Game` session.

    The action space is ``Discrete(len(GymAction))``; see
    :mod:`shadow_blocks.actions`.
    """

    metadata = {"render_modes": ["ansi"]}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        tick_ms: int = ICE_STEP_MS,
        settle_ticks: int = 1,
        render_mode: str = "ansi",
    ):
        """Create a new environment instance.

        Arguments:
            config: Session configuration (level directory, numbering, map maxima).
            tick_ms: Milliseconds fed to the session per tick.
            settle_ticks: Idle ticks run after the action tick.
            render_mode: Only ``"ansi"`` is supported.
        """
        from gymnasium import spaces

        self.config = config or GameConfig()
        self.tick_ms = tick_ms
        self.settle_ticks = settle_ticks
        self._render_mode = render_mode
        self.game: Optional[Game] = None

        def int_box(low: int, high: int) -> spaces.Box:
            return spaces.Box(
                low=np.array(low, dtype=np.int64),
                high=np.array(high, dtype=np.int64),
                shape=(),
                dtype=np.int64,
            )

        self.observation_space = spaces.Dict(
            {
                "grid": spaces.Box(
                    low=-1,
                    high=len(EntityKind) - 1,
                    shape=(self.config.max_height, self.config.max_width),
                    dtype=np.int64,
                ),
                "move_count": int_box(0, 1_000_000_000),
                "player_dead": int_box(0, 1),
            }
        )
        self.action_space = spaces.Discrete(len(GymAction))

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, object]] = None
    ) -> Tuple[ObsType, Dict[str, object]]:
        """Start a new episode from the configured first level.

        Arguments:
            seed: Forwarded to ``gym.Env.reset`` (levels are deterministic).
            options: Gymnasium options (unused).

        Returns:
            Observation dict and info dict per Gymnasium API.
        """
        super().reset(seed=seed)
        self.game = Game(self.config)
        return self._get_obs(), self._get_info()

    def step(
        self, action: np.integer
    ) -> Tuple[ObsType, float, bool, bool, Dict[str, object]]:
        """Apply one environment step.

        Arguments:
            action: Integer index into the ``GymAction`` enum.

        Returns:
            (observation, reward, terminated, truncated, info)
        """
        assert self.game is not None

        if not 0 <= int(action) < len(GymAction):
            raise ValueError(f"Invalid action: {action}")
        step_action = Action[GymAction(int(action)).name]

        levels_before = self.game.level_num
        was_finished = self.game.finished

        self.game.update(self.tick_ms, [step_action])
        for _ in range(self.settle_ticks):
            self.game.update(self.tick_ms)

        completed = self.game.level_num - levels_before
        if self.game.finished and not was_finished:
            completed += 1
        reward = float(max(completed, 0))

        obs = self._get_obs()
        terminated = self.game.finished
        truncated = self.game.state.player_dead
        return obs, reward, terminated, truncated, self._get_info()

    def render(self, mode: Optional[str] = None) -> Optional[str]:  # type: ignore
        """Render the current level as text, one glyph per tile."""
        render_mode = mode or self._render_mode
        if render_mode != "ansi":
            raise NotImplementedError(f"Render mode '{render_mode}' not supported.")
        assert self.game is not None
        state = self.game.state
        rows: List[List[str]] = [[" "] * state.width for _ in range(state.height)]
        for item in frame(state).entities:
            if item.visible:
                rows[item.position.y][item.position.x] = KIND_GLYPHS[item.kind]
        return "\n".join("".join(row) for row in rows)

    def _get_obs(self) -> ObsType:
        """Internal helper constructing the full observation."""
        assert self.game is not None
        state = self.game.state
        if state.width > self.config.max_width or state.height > self.config.max_height:
            raise ValueError(
                f"Level {self.game.level_num} ({state.width}x{state.height}) exceeds "
                f"observation size {self.config.max_width}x{self.config.max_height}"
            )
        grid = np.full((self.config.max_height, self.config.max_width), -1, dtype=np.int64)
        # Empty in-map tiles stay -1 until an entity is drawn there.
        for item in frame(state).entities:
            if item.visible:
                grid[item.position.y, item.position.x] = KIND_CODES[item.kind]
        return {
            "grid": grid,
            "move_count": np.int64(state.move_count),
            "player_dead": np.int64(int(state.player_dead)),
        }

    def _get_info(self) -> Dict[str, object]:
        assert self.game is not None
        return {
            "level_num": self.game.level_num,
            "finished": self.game.finished,
            "win": self.game.state.win,
        }

    def close(self) -> None:
        """Release resources (no-op placeholder)."""
        pass
