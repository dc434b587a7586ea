"""Game state kept between frames, and the per-frame context."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from zorbworld.camera import Camera
from zorbworld.game.ecs import Ecs
from zorbworld.ids import Id

PIXEL_TO_WORLD = 10.0
"""Conversion factor of pixels to world meters."""


@dataclass(frozen=True)
class ResourceIds:
    """Identifiers of the resources the game knows about."""

    zorb_sprite: Id = field(default_factory=Id)


@dataclass
class State:
    """State persisted between calls of ``update_and_render``."""

    resource_ids: ResourceIds = field(default_factory=ResourceIds)
    ecs: Ecs = field(default_factory=Ecs)
    zorb: int = 0

    def clone(self) -> State:
        """A copy whose world can be changed without touching this one."""
        return State(resource_ids=self.resource_ids, ecs=self.ecs.clone(), zorb=self.zorb)


@dataclass
class Ctx:
    """Everything a system may use while running one frame."""

    canvas: Any
    camera: Camera
    resources: Any
    resource_ids: ResourceIds
    now_ms: int
    delta_ms: int
    screen_w: int
    screen_h: int
    delta_s: Optional[float] = None

    def __post_init__(self) -> None:
        if self.delta_s is None:
            self.delta_s = self.delta_ms / 1000.0