from shadow_blocks.actions import Action
from shadow_blocks.config import EXPLOSION_LIFETIME_MS, ICE_STEP_MS, SKELETON_STEP_MS
from shadow_blocks.step import step
from shadow_blocks.types import EntityKind
from shadow_blocks.utils.ecs import is_covered
from tests.test_utils import find, find_all, idle, make_state, play_move, xy


def test_declared_move_resolves_on_next_tick() -> None:
    state = make_state(["@.."])
    player = find(state, EntityKind.PLAYER)
    state = step(state, 0, [Action.RIGHT])
    assert xy(state, player) == (0, 0)
    assert state.move_count == 1
    assert player in state.armed

    state = step(state, 0)
    assert xy(state, player) == (1, 0)
    assert player not in state.armed


def test_last_pressed_direction_wins() -> None:
    state = make_state(["...", ".@.", "..."])
    player = find(state, EntityKind.PLAYER)
    state = step(state, 0, [Action.RIGHT, Action.UP])
    state = idle(state)
    assert xy(state, player) == (2, 1)


def test_wait_advances_time_only() -> None:
    state = make_state(["@.."])
    state2 = step(state, 16, [Action.WAIT])
    assert state2.move_count == 0
    assert len(state2.history) == 0


def test_blocked_move_still_counts_as_turn() -> None:
    state = make_state(["@#"])
    player = find(state, EntityKind.PLAYER)
    state = play_move(state, Action.RIGHT)
    assert xy(state, player) == (0, 0)
    assert state.move_count == 1


def test_pushing_stone_onto_target_wins() -> None:
    state = make_state(["@Ot"])
    state = play_move(state, Action.RIGHT)
    assert state.win
    assert is_covered(state, find(state, EntityKind.TARGET))


def test_undo_rewinds_each_move_then_stops() -> None:
    state = make_state(["@.O..."])
    player = find(state, EntityKind.PLAYER)
    stone = find(state, EntityKind.STONE)
    state = play_move(state, Action.RIGHT)
    state = play_move(state, Action.RIGHT)
    assert (xy(state, player), xy(state, stone)) == ((2, 0), (3, 0))

    state = step(state, 0, [Action.UNDO])
    assert (xy(state, player), xy(state, stone)) == ((1, 0), (2, 0))
    state = step(state, 0, [Action.UNDO])
    assert (xy(state, player), xy(state, stone)) == ((0, 0), (2, 0))
    assert state.move_count == 0

    assert step(state, 0, [Action.UNDO]) is state


def test_undo_uncovers_target_and_clears_win() -> None:
    state = make_state(["@Ot"])
    state = play_move(state, Action.RIGHT)
    state = step(state, 0, [Action.UNDO])
    assert not state.win
    assert not is_covered(state, find(state, EntityKind.TARGET))


def test_switch_opens_door_for_player() -> None:
    state = make_state(["@Os#", "...+."])
    player = find(state, EntityKind.PLAYER)
    state = play_move(state, Action.RIGHT)
    assert state.door_open

    for action in (Action.DOWN, Action.RIGHT, Action.RIGHT, Action.RIGHT):
        state = play_move(state, action)
    assert xy(state, player) == (4, 1)


def test_closed_door_blocks_player() -> None:
    state = make_state(["@+."])
    player = find(state, EntityKind.PLAYER)
    state = play_move(state, Action.RIGHT)
    assert xy(state, player) == (0, 0)


def test_ice_slides_until_obstructed() -> None:
    state = make_state(["@I..#"])
    player = find(state, EntityKind.PLAYER)
    ice = find(state, EntityKind.ICE)
    state = play_move(state, Action.RIGHT)
    assert xy(state, player) == (1, 0)
    assert xy(state, ice) == (2, 0)

    state = step(state, ICE_STEP_MS)
    assert xy(state, ice) == (3, 0)
    state = step(state, ICE_STEP_MS)
    assert xy(state, ice) == (3, 0)
    assert ice not in state.sliding


def test_tnt_destroys_cracked_wall() -> None:
    state = make_state(["@X%."])
    player = find(state, EntityKind.PLAYER)
    state = play_move(state, Action.RIGHT)
    assert xy(state, player) == (1, 0)
    assert find_all(state, EntityKind.TNT) == []
    assert find_all(state, EntityKind.CRACKED_WALL) == []
    explosion = find(state, EntityKind.EXPLOSION)
    assert xy(state, explosion) == (2, 0)

    state = step(state, EXPLOSION_LIFETIME_MS - 1)
    assert explosion in state.entity
    state = step(state, 1)
    assert find_all(state, EntityKind.EXPLOSION) == []

    state = play_move(state, Action.RIGHT)
    assert xy(state, player) == (2, 0)


def test_walking_into_skeleton_kills_player() -> None:
    state = make_state(["@K"])
    state = play_move(state, Action.RIGHT)
    assert state.player_dead
    assert find_all(state, EntityKind.PLAYER) == []
    assert xy(state, find(state, EntityKind.BLOOD)) == (1, 0)


def test_dead_player_ignores_moves_and_undo() -> None:
    state = make_state(["@K."])
    state = play_move(state, Action.RIGHT)
    move_count = state.move_count

    state = step(state, 0, [Action.UNDO])
    state = step(state, 0, [Action.LEFT])
    assert state.player_dead
    assert state.move_count == move_count


def test_dead_level_keeps_ticking() -> None:
    state = make_state([".", "@", "K"])
    skeleton = find(state, EntityKind.SKELETON)
    state = play_move(state, Action.DOWN)
    assert state.player_dead
    state = step(state, SKELETON_STEP_MS)
    state = step(state, 0)
    assert xy(state, skeleton) == (0, 1)


def test_rogue_moves_with_player_turn() -> None:
    state = make_state(["@...R"])
    rogue = find(state, EntityKind.ROGUE)
    state = step(state, 0, [Action.RIGHT])
    assert xy(state, rogue) == (3, 0)
    state = play_move(idle(state), Action.DOWN)
    assert xy(state, rogue) == (2, 0)


def test_rogue_walking_into_player_kills_it() -> None:
    state = make_state(["@..R"])
    state = play_move(state, Action.RIGHT)
    assert not state.player_dead
    state = step(state, 0, [Action.RIGHT])
    assert state.player_dead


def test_mage_chases_player_target_tile() -> None:
    state = make_state(["@...", "...M"])
    player = find(state, EntityKind.PLAYER)
    mage = find(state, EntityKind.MAGE)
    state = play_move(state, Action.RIGHT)
    assert xy(state, player) == (1, 0)
    assert xy(state, mage) == (2, 1)


def test_skeleton_patrols_on_timer() -> None:
    state = make_state(["@.", "..", ".K"])
    skeleton = find(state, EntityKind.SKELETON)
    state = step(state, SKELETON_STEP_MS)
    assert xy(state, skeleton) == (1, 2)
    state = step(state, 0)
    assert xy(state, skeleton) == (1, 1)
