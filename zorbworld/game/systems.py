"""The systems that update and draw the world each frame."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from zorbworld.coords import FRect, Rect, Size, screen_rect_to_sdl
from zorbworld.game.components import ComponentKind
from zorbworld.game.ecs import Ecs, SystemFn

if TYPE_CHECKING:
    from zorbworld.game.state import Ctx

SPEED_S = 500.0
"""Distance a following entity travels per second."""

DEBUG_BOX_SIZE = 25.0
"""Side of the debug square drawn around entities, in world units."""


class Canvas(Protocol):
    """The drawing operations systems need."""

    def set_draw_color(self, color: Any) -> None: ...

    def draw_rect(self, rect: FRect) -> None: ...


def follow_update_and_render(ctx: Ctx, prev: Ecs, nxt: Ecs) -> None:
    """Move every following entity towards its target."""
    for follower_id, follow in prev.iter(ComponentKind.FOLLOW):
        follower_pos = prev.get_unchecked(ComponentKind.POS, follower_id)
        target_pos = prev.get_unchecked(ComponentKind.POS, follow.target_entity)

        diff = target_pos - follower_pos
        distance = diff.length()
        speed_per_frame = SPEED_S * ctx.delta_s

        # Closer than a frame's travel would overshoot next time, so snap.
        if distance < speed_per_frame * 1.5:
            if follow.stop_after_arriving:
                nxt.unset(ComponentKind.FOLLOW, follower_id)
            new_pos = target_pos
        else:
            new_pos = follower_pos + diff.normalize() * speed_per_frame

        nxt.set(ComponentKind.POS, follower_id, new_pos)


def debug_draw_update_and_render(ctx: Ctx, prev: Ecs, nxt: Ecs) -> None:
    """Draw a debug square around entities that ask for one."""
    for entity_id, pos in prev.iter(ComponentKind.POS):
        flags = prev.get(ComponentKind.DEBUG, entity_id)
        if flags is None or flags.box_color is None:
            continue
        world_rect = Rect(pos, Size(DEBUG_BOX_SIZE, DEBUG_BOX_SIZE))
        ctx.canvas.set_draw_color(flags.box_color)
        ctx.canvas.draw_rect(screen_rect_to_sdl(ctx.camera.world_to_screen_rect(world_rect)))


def default_systems(debug: bool = True) -> tuple[SystemFn, ...]:
    """The registered systems, in the order they run."""
    systems: tuple[SystemFn, ...] = (follow_update_and_render,)
    if debug:
        systems += (debug_draw_update_and_render,)
    return systems