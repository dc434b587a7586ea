"""The game's entry points: set up, run a frame, tear down."""

from __future__ import annotations

from pathlib import Path

import pygame

from zorbworld.coords import Point, Vector
from zorbworld.game.components import ComponentKind, Follow
from zorbworld.game.ecs import Ecs, EntitySpawner
from zorbworld.game.spawnables import spawn_zorb
from zorbworld.game.state import Ctx, ResourceIds, State
from zorbworld.game.systems import default_systems
from zorbworld.hooks import DropParams, InitParams, UpdateAndRenderParams

RESOURCE_ROOT = Path("resources/obj")
MIN_ZOOM = 0.5
MAX_ZOOM = 3.0
START_ZOOM = 0.5
PAN_SPEED_S = 300.0
"""Camera panning speed in world units per second."""
ZOOM_SPEED_S = 1.0
"""Zoom change per second."""
DEBUG = __debug__
"""Whether debug systems and debug components are enabled."""

_PAN_KEYS = (
    (pygame.K_w, Vector(0.0, -1.0)),
    (pygame.K_s, Vector(0.0, 1.0)),
    (pygame.K_a, Vector(-1.0, 0.0)),
    (pygame.K_d, Vector(1.0, 0.0)),
)


def init(params: InitParams) -> State:
    """Create the game state, load resources and spawn the initial world."""
    params.resources.root = RESOURCE_ROOT

    params.camera.init(MIN_ZOOM, MAX_ZOOM, Point.origin())
    params.camera.set_zoom(START_ZOOM)

    state = State()
    state.resource_ids = ResourceIds(zorb_sprite=params.resources.load_sprite_map("zorb"))
    state.ecs = Ecs()
    state.zorb = spawn_zorb(state.ecs, DEBUG)
    return state


def drop(params: DropParams) -> None:
    """Release the world and resource references held by the state."""
    state: State = params.state
    state.ecs = Ecs()
    state.resource_ids = ResourceIds()


def update_and_render(params: UpdateAndRenderParams) -> bool:
    """Handle input, run the systems for one frame; False means the game should exit."""
    new_state: State = params.state
    prev_state = new_state.clone()
    events = params.events
    camera = params.camera

    if events.quit() or events.key(pygame.K_ESCAPE).down:
        return False

    left_mouse = events.mouse_btn(pygame.BUTTON_LEFT)
    if left_mouse.down:
        follow_pos = camera.screen_to_world_point(left_mouse.pos)
        follow_entity = EntitySpawner().with_pos(follow_pos).spawn(new_state.ecs)
        new_state.ecs.overwrite(
            ComponentKind.FOLLOW,
            prev_state.zorb,
            Follow(stop_after_arriving=True, target_entity=follow_entity),
        )

    delta_s = params.delta_ms / 1000.0
    for key, direction in _PAN_KEYS:
        if events.key(key).down:
            camera.pos = camera.pos + direction * (PAN_SPEED_S * delta_s)
    if events.key(pygame.K_z).down:
        camera.change_zoom_around(ZOOM_SPEED_S * delta_s, events.mouse_pos)
    if events.key(pygame.K_x).down:
        camera.change_zoom_around(-ZOOM_SPEED_S * delta_s, events.mouse_pos)

    ctx = Ctx(
        canvas=params.canvas,
        camera=camera,
        resources=params.resources,
        resource_ids=new_state.resource_ids,
        now_ms=params.now_ms,
        delta_ms=params.delta_ms,
        screen_w=params.screen_w,
        screen_h=params.screen_h,
        delta_s=delta_s,
    )
    new_state.ecs.update_and_render(ctx, prev_state.ecs, default_systems(DEBUG))
    return True