"""Switch / door system.

Each switch reached in the update pass writes its coverage to
``State.door_open``. Doors read that flag through the occupancy rules, so a
door opens on the tick a block lands on the switch and closes again when the
block leaves. With several switches in a level the last one in declaration
order decides.
"""

from dataclasses import replace

from shadow_blocks.state import State
from shadow_blocks.types import EntityID
from shadow_blocks.utils.ecs import is_covered


def switch_system(state: State, switch_id: EntityID) -> State:
    door_open = is_covered(state, switch_id)
    if door_open == state.door_open:
        return state
    return replace(state, door_open=door_open)
