from shadow_blocks.components import Timer
from shadow_blocks.config import EXPLOSION_LIFETIME_MS
from shadow_blocks.systems.explosion import explosion_system, lifetime_system
from shadow_blocks.systems.push import push_system
from shadow_blocks.types import Direction, EntityKind
from tests.test_utils import find, find_all, make_state, xy


def test_nothing_to_commit_returns_same_state() -> None:
    state = make_state(["@X%."])
    assert explosion_system(state) is state


def test_detonation_removes_both_and_spawns_explosion() -> None:
    state = make_state(["@X%."])
    tnt = find(state, EntityKind.TNT)
    wall = find(state, EntityKind.CRACKED_WALL)
    state, _ = push_system(state, tnt, Direction.RIGHT)

    state = explosion_system(state)
    assert tnt not in state.entity and wall not in state.entity
    assert len(state.exploding) == 0
    explosion = find(state, EntityKind.EXPLOSION)
    assert xy(state, explosion) == (2, 0)
    assert state.order[-1] == explosion
    assert state.timer[explosion] == Timer(0)


def test_explosion_expires_after_lifetime() -> None:
    state = make_state(["@X%."])
    tnt = find(state, EntityKind.TNT)
    state, _ = push_system(state, tnt, Direction.RIGHT)
    state = explosion_system(state)
    explosion = find(state, EntityKind.EXPLOSION)

    state = lifetime_system(state, explosion, EXPLOSION_LIFETIME_MS - 1)
    state = explosion_system(state)
    assert explosion in state.entity

    state = lifetime_system(state, explosion, 1)
    state = explosion_system(state)
    assert find_all(state, EntityKind.EXPLOSION) == []
    assert explosion not in state.timer
