"""A camera placed in the world, converting between world and screen space."""

from __future__ import annotations

from dataclasses import dataclass, field

from zorbworld.coords import Box, Point, Rect, Size
from zorbworld.mathutil import clamp


@dataclass
class Camera:
    """Position and zoom of the view onto the world."""

    pos: Point = field(default_factory=Point.origin)
    zoom: float = 1.0
    min_zoom: float = 1.0
    max_zoom: float = 1.0

    def init(self, min_zoom: float, max_zoom: float, pos: Point) -> None:
        """Reset position, zoom limits and zoom."""
        self.pos = pos
        self.zoom = 1.0
        self.min_zoom = min_zoom
        self.max_zoom = max_zoom

    def set_zoom(self, new_zoom: float) -> None:
        """Set the zoom, clamped to the allowed range."""
        self.zoom = clamp(new_zoom, self.min_zoom, self.max_zoom)

    def change_zoom(self, delta: float) -> None:
        """Change the zoom by ``delta``, clamped to the allowed range."""
        self.set_zoom(self.zoom + delta)

    def change_zoom_around(self, delta: float, point: Point) -> None:
        """Change the zoom while keeping the world point under ``point`` fixed."""
        before = self.screen_to_world_point(point)
        self.change_zoom(delta)
        after = self.screen_to_world_point(point)
        self.pos = self.pos + (before - after)

    def world_to_screen_point(self, world: Point) -> Point:
        return Point((world.x - self.pos.x) * self.zoom, (world.y - self.pos.y) * self.zoom)

    def screen_to_world_point(self, screen: Point) -> Point:
        return Point(screen.x / self.zoom + self.pos.x, screen.y / self.zoom + self.pos.y)

    def world_to_screen_size(self, world: Size) -> Size:
        return Size(world.width * self.zoom, world.height * self.zoom)

    def screen_to_world_size(self, screen: Size) -> Size:
        return Size(screen.width / self.zoom, screen.height / self.zoom)

    def world_to_screen_box(self, world: Box) -> Box:
        return Box(self.world_to_screen_point(world.min), self.world_to_screen_point(world.max))

    def screen_to_world_box(self, screen: Box) -> Box:
        return Box(self.screen_to_world_point(screen.min), self.screen_to_world_point(screen.max))

    def world_to_screen_rect(self, world: Rect) -> Rect:
        return Rect(self.world_to_screen_point(world.origin), self.world_to_screen_size(world.size))

    def screen_to_world_rect(self, screen: Rect) -> Rect:
        return Rect(
            self.screen_to_world_point(screen.origin), self.screen_to_world_size(screen.size)
        )