"""Convenience factory functions for authoring ``EntitySpec`` objects.

One helper per entity kind, preconfigured with the components that kind
starts a level with (patrol headings, timers, rest flags). ``FACTORIES`` maps
the variant names used in level files to these helpers.
"""

from __future__ import annotations

from typing import Callable, Dict

from shadow_blocks.components.properties import Heading, Timer
from shadow_blocks.types import Direction, EntityKind
from .entity_spec import EntitySpec


def create_floor() -> EntitySpec:
    return EntitySpec(kind=EntityKind.FLOOR)


def create_wall() -> EntitySpec:
    return EntitySpec(kind=EntityKind.WALL)


def create_cracked_wall() -> EntitySpec:
    """Wall that is destroyed when TNT is pushed into it."""
    return EntitySpec(kind=EntityKind.CRACKED_WALL)


def create_door() -> EntitySpec:
    """Door; passable only while the level's switch is covered."""
    return EntitySpec(kind=EntityKind.DOOR)


def create_switch() -> EntitySpec:
    return EntitySpec(kind=EntityKind.SWITCH)


def create_target() -> EntitySpec:
    return EntitySpec(kind=EntityKind.TARGET)


def create_stone() -> EntitySpec:
    return EntitySpec(kind=EntityKind.STONE)


def create_ice() -> EntitySpec:
    """Ice block: slides until obstructed, rests where it was placed."""
    return EntitySpec(kind=EntityKind.ICE, timer=Timer(), resting=True)


def create_tnt() -> EntitySpec:
    return EntitySpec(kind=EntityKind.TNT)


def create_player() -> EntitySpec:
    return EntitySpec(kind=EntityKind.PLAYER)


def create_skeleton() -> EntitySpec:
    """Skeleton patrolling vertically, starting upward."""
    return EntitySpec(kind=EntityKind.SKELETON, heading=Heading(Direction.UP), timer=Timer())


def create_rogue() -> EntitySpec:
    """Rogue patrolling horizontally, starting leftward."""
    return EntitySpec(kind=EntityKind.ROGUE, heading=Heading(Direction.LEFT))


def create_mage() -> EntitySpec:
    return EntitySpec(kind=EntityKind.MAGE)


def create_blood() -> EntitySpec:
    return EntitySpec(kind=EntityKind.BLOOD)


def create_explosion() -> EntitySpec:
    """Explosion; removed once its timer reaches the lifetime threshold."""
    return EntitySpec(kind=EntityKind.EXPLOSION, timer=Timer())


# Variant names accepted in level files.
FACTORIES: Dict[str, Callable[[], EntitySpec]] = {
    "player": create_player,
    "skeleton": create_skeleton,
    "mage": create_mage,
    "rogue": create_rogue,
    "stone": create_stone,
    "ice": create_ice,
    "tnt": create_tnt,
    "wall": create_wall,
    "cracked": create_cracked_wall,
    "floor": create_floor,
    "target": create_target,
    "door": create_door,
    "switch": create_switch,
}
