from shadow_blocks.components import Position, Rest, Timer
from shadow_blocks.config import ICE_STEP_MS
from shadow_blocks.state import State
from shadow_blocks.systems.push import push_system
from shadow_blocks.systems.sliding import sliding_system
from shadow_blocks.types import Direction, EntityID, EntityKind
from shadow_blocks.utils.ecs import covering_of
from tests.test_utils import find, make_state, xy


def slide_until_rest(state: State, ice: EntityID, limit: int = 20) -> State:
    for _ in range(limit):
        if ice not in state.sliding:
            break
        state = sliding_system(state, ice, ICE_STEP_MS)
    return state


def test_first_step_happens_on_next_update() -> None:
    state = make_state(["I...#"])
    ice = find(state, EntityKind.ICE)
    state, _ = push_system(state, ice, Direction.RIGHT)
    state = sliding_system(state, ice, 0)
    assert xy(state, ice) == (1, 0)
    assert state.timer[ice] == Timer(0)


def test_slides_on_interval() -> None:
    state = make_state(["I...#"])
    ice = find(state, EntityKind.ICE)
    state, _ = push_system(state, ice, Direction.RIGHT)
    state = sliding_system(state, ice, 0)

    state = sliding_system(state, ice, 100)
    assert xy(state, ice) == (1, 0)
    assert state.timer[ice] == Timer(100)

    state = sliding_system(state, ice, ICE_STEP_MS - 100)
    assert xy(state, ice) == (2, 0)


def test_rests_where_obstructed() -> None:
    state = make_state(["I...#"])
    ice = find(state, EntityKind.ICE)
    state, _ = push_system(state, ice, Direction.RIGHT)
    state = slide_until_rest(state, ice)
    assert xy(state, ice) == (3, 0)
    assert ice not in state.sliding
    assert state.rest[ice] == Rest(Position(3, 0), None)


def test_stops_before_block() -> None:
    state = make_state(["I..O."])
    ice = find(state, EntityKind.ICE)
    stone = find(state, EntityKind.STONE)
    state, _ = push_system(state, ice, Direction.RIGHT)
    state = slide_until_rest(state, ice)
    assert xy(state, ice) == (2, 0)
    assert xy(state, stone) == (3, 0)


def test_rest_records_covered_target() -> None:
    state = make_state(["I.t#"])
    ice = find(state, EntityKind.ICE)
    target = find(state, EntityKind.TARGET)
    state, _ = push_system(state, ice, Direction.RIGHT)
    state = slide_until_rest(state, ice)
    assert covering_of(state, ice) == target
    assert state.rest[ice] == Rest(Position(2, 0), target)


def test_slides_across_target_without_keeping_it() -> None:
    state = make_state(["It..#"])
    ice = find(state, EntityKind.ICE)
    state, _ = push_system(state, ice, Direction.RIGHT)
    state = slide_until_rest(state, ice)
    assert xy(state, ice) == (3, 0)
    assert covering_of(state, ice) is None


def test_resting_ice_only_accumulates_time() -> None:
    state = make_state(["I.."])
    ice = find(state, EntityKind.ICE)
    state = sliding_system(state, ice, ICE_STEP_MS * 3)
    assert xy(state, ice) == (0, 0)
    assert state.timer[ice] == Timer(ICE_STEP_MS * 3)
