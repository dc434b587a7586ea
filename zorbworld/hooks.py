"""Parameters passed between the engine and the game logic."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from zorbworld.camera import Camera
from zorbworld.events import Events
from zorbworld.resources.store import Resources

_MAX_SCREEN = 0xFFFF


@dataclass
class InitParams:
    """What the game receives when it is initialised."""

    camera: Camera
    resources: Resources


@dataclass
class DropParams:
    """What the game receives when it is torn down."""

    state: Any


@dataclass
class UpdateAndRenderParams:
    """What the game receives every frame."""

    events: Events
    canvas: Any
    camera: Camera
    resources: Resources
    now_ms: int
    delta_ms: int
    screen_w: int
    screen_h: int
    state: Any

    def __post_init__(self) -> None:
        if self.now_ms < 0 or self.delta_ms < 0:
            raise ValueError("Timestamps must not be negative")
        for name, value in (("screen_w", self.screen_w), ("screen_h", self.screen_h)):
            if not 0 <= value <= _MAX_SCREEN:
                raise ValueError(f"{name} out of range: {value}")