"""Prefabricated entities."""

from __future__ import annotations

from zorbworld.coords import Point
from zorbworld.game.components import DebugFlags
from zorbworld.game.ecs import Ecs, EntitySpawner

RED = (255, 0, 0, 255)
ZORB_START = Point(400.0, 400.0)


def spawn_zorb(ecs: Ecs, debug: bool = True) -> int:
    """Spawn the zorb and return its entity id."""
    spawner = EntitySpawner().with_pos(ZORB_START)
    if debug:
        spawner = spawner.with_debug(DebugFlags(box_color=RED))
    return spawner.spawn(ecs)