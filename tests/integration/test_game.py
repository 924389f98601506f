import logging
from pathlib import Path
from typing import Sequence

import pytest

from shadow_blocks.actions import Action
from shadow_blocks.config import GameConfig
from shadow_blocks.game import Game
from shadow_blocks.levels.convert import to_state
from shadow_blocks.levels.loader import LevelLoadError, load_level
from shadow_blocks.types import EntityKind
from tests.test_utils import find, level_text, xy

DEATH_LEVEL = ["#@K.t#"]
PUSH_LEVEL = ["#####", "#@Ot#", "#####"]
OPEN_LEVEL = ["#####", "#@..#", "#.Ot#", "#####"]


def write_level(directory: Path, num: int, rows: Sequence[str]) -> None:
    (directory / f"{num}.lvl").write_text(level_text(rows))


def play(game: Game, action: Action) -> None:
    game.update(0, [action])
    game.update(0)
    game.update(0)


@pytest.fixture
def game(tmp_path: Path) -> Game:
    write_level(tmp_path, 0, PUSH_LEVEL)
    write_level(tmp_path, 1, OPEN_LEVEL)
    return Game(GameConfig(level_dir=tmp_path, level_max=1))


def test_level_start_takes_initial_snapshot(game: Game) -> None:
    player = find(game.state, EntityKind.PLAYER)
    assert game.level_num == 0
    assert game.state.move_count == 0
    assert len(game.state.history[player]) == 1


def test_win_advances_to_next_level(game: Game) -> None:
    play(game, Action.RIGHT)
    assert game.level_num == 1
    assert not game.finished
    assert game.state.move_count == 0
    assert not game.state.win


def test_final_level_completion_finishes_game(game: Game) -> None:
    play(game, Action.RIGHT)
    play(game, Action.DOWN)
    play(game, Action.RIGHT)
    assert game.level_num == 1
    assert game.finished


def test_restart_reloads_level(tmp_path: Path) -> None:
    write_level(tmp_path, 0, OPEN_LEVEL)
    game = Game(GameConfig(level_dir=tmp_path, level_max=0))
    play(game, Action.RIGHT)
    assert game.state.move_count == 1

    game.update(0, [Action.RESTART])
    player = find(game.state, EntityKind.PLAYER)
    assert game.state.move_count == 0
    assert xy(game.state, player) == (1, 1)
    assert len(game.state.history[player]) == 1


def test_restart_after_death(tmp_path: Path) -> None:
    write_level(tmp_path, 0, DEATH_LEVEL)
    game = Game(GameConfig(level_dir=tmp_path, level_max=0))
    play(game, Action.RIGHT)
    assert game.state.player_dead
    assert not game.finished

    game.update(0, [Action.RESTART])
    assert not game.state.player_dead
    assert game.state.move_count == 0


def test_undo_through_session(game: Game) -> None:
    game.update(0, [Action.UNDO])
    assert game.state.move_count == 0
    player = find(game.state, EntityKind.PLAYER)
    assert xy(game.state, player) == (1, 1)


def test_skip_level(game: Game) -> None:
    game.update(0, [Action.SKIP_LEVEL])
    assert game.level_num == 1


def test_undo_takes_precedence_over_skip(game: Game) -> None:
    game.update(0, [Action.SKIP_LEVEL, Action.UNDO])
    assert game.level_num == 0


def test_restart_takes_precedence_over_skip(game: Game) -> None:
    game.update(0, [Action.SKIP_LEVEL, Action.RESTART])
    assert game.level_num == 0


def test_skip_ignored_while_dead(tmp_path: Path) -> None:
    write_level(tmp_path, 0, DEATH_LEVEL)
    write_level(tmp_path, 1, OPEN_LEVEL)
    game = Game(GameConfig(level_dir=tmp_path, level_max=1))
    play(game, Action.RIGHT)
    assert game.level_num == 0
    assert game.state.player_dead

    game.update(0, [Action.SKIP_LEVEL])
    assert game.level_num == 0


def test_frame_reports_overlay(game: Game) -> None:
    game.update(0, [Action.LEFT])
    frame = game.frame()
    assert frame.move_count == 1
    assert not frame.player_dead
    assert [e.entity_id for e in frame.entities] == list(game.state.order)


def test_missing_level_raises_and_logs(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.ERROR):
        with pytest.raises(LevelLoadError):
            Game(GameConfig(level_dir=tmp_path))
    assert "Cannot start level 0" in caplog.text


@pytest.mark.parametrize("num", range(GameConfig().level_max + 1))
def test_bundled_levels_load(num: int) -> None:
    state = to_state(load_level(GameConfig().level_path(num)))
    find(state, EntityKind.PLAYER)
    assert state.width > 0 and state.height > 0


def test_first_bundled_level_is_solvable() -> None:
    game = Game()
    play(game, Action.RIGHT)
    play(game, Action.RIGHT)
    assert game.level_num == 1
