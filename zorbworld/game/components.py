"""Components that can be attached to entities, and their storage."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional

from zorbworld.coords import Point

SENTINEL = 0
"""Component index meaning "not attached", and the id of the null entity."""

MAX_ENTITIES = 8192
"""The most entities, or components of one kind, the world can hold."""

Pos = Point
Color = tuple[int, int, int, int]


@dataclass(frozen=True)
class Follow:
    """Makes an entity move towards another one."""

    stop_after_arriving: bool = False
    target_entity: int = SENTINEL


@dataclass(frozen=True)
class DebugFlags:
    """Debug drawing options for an entity."""

    box_color: Optional[Color] = None


class ComponentKind(Enum):
    """Every kind of component, valued by its attribute name."""

    POS = "pos"
    FOLLOW = "follow"
    DEBUG = "debug"

    def default_value(self) -> Any:
        """The default component of this kind."""
        return _DEFAULTS[self]()


_DEFAULTS: dict[ComponentKind, Callable[[], Any]] = {
    ComponentKind.POS: Point.origin,
    ComponentKind.FOLLOW: Follow,
    ComponentKind.DEBUG: DebugFlags,
}


@dataclass
class Entity:
    """Indexes of an entity's components; :data:`SENTINEL` means absent."""

    pos: int = SENTINEL
    follow: int = SENTINEL
    debug: int = SENTINEL

    def index_of(self, kind: ComponentKind) -> int:
        """Index of this entity's component of ``kind`` in its store."""
        return getattr(self, kind.value)

    def __getitem__(self, kind: ComponentKind) -> int:
        return self.index_of(kind)

    def __setitem__(self, kind: ComponentKind, index: int) -> None:
        setattr(self, kind.value, index)


def _sentinel_store(kind: ComponentKind) -> Callable[[], list[tuple[int, Any]]]:
    return lambda: [(SENTINEL, kind.default_value())]


@dataclass
class Components:
    """Per-kind lists of ``(entity_id, component)``; entry 0 is a placeholder."""

    pos: list[tuple[int, Point]] = field(default_factory=_sentinel_store(ComponentKind.POS))
    follow: list[tuple[int, Follow]] = field(
        default_factory=_sentinel_store(ComponentKind.FOLLOW)
    )
    debug: list[tuple[int, DebugFlags]] = field(
        default_factory=_sentinel_store(ComponentKind.DEBUG)
    )

    def store(self, kind: ComponentKind) -> list[tuple[int, Any]]:
        """The list holding components of ``kind``."""
        return getattr(self, kind.value)