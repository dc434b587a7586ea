"""Entities, their components, and the systems that run over them."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING, Any, Callable, Iterable, Iterator, Optional

from zorbworld.coords import Point
from zorbworld.game.components import (
    MAX_ENTITIES,
    SENTINEL,
    ComponentKind,
    Components,
    DebugFlags,
    Entity,
    Follow,
)

if TYPE_CHECKING:
    from zorbworld.game.state import Ctx

SystemFn = Callable[["Ctx", "Ecs", "Ecs"], None]
"""A system: called with the context, the previous world and the next world."""


class Ecs:
    """Holds all entities and their components.

    Entry 0 of every component store is a placeholder owned by no entity.
    """

    def __init__(self) -> None:
        self.components = Components()
        self.entities: list[Entity] = []

    def _entity(self, entity_id: int) -> Entity:
        if not 0 <= entity_id < len(self.entities):
            raise IndexError(f"No entity with id {entity_id}")
        return self.entities[entity_id]

    def _push(self, kind: ComponentKind, entity_id: int, value: Any) -> None:
        store = self.components.store(kind)
        if len(store) >= MAX_ENTITIES:
            raise OverflowError("Too many components")
        self._entity(entity_id)[kind] = len(store)
        store.append((entity_id, value))

    def _attached_index(self, kind: ComponentKind, entity_id: int, action: str) -> int:
        index = self._entity(entity_id).index_of(kind)
        if index == SENTINEL:
            raise LookupError(
                f"Tried to {action} '{kind.value}' of entity {entity_id} that does not contain it."
            )
        return index

    def get(self, kind: ComponentKind, entity_id: int) -> Optional[Any]:
        """The entity's component of ``kind``, or None if it has none."""
        index = self._entity(entity_id).index_of(kind)
        if index == SENTINEL:
            return None
        return self.components.store(kind)[index][1]

    def get_unchecked(self, kind: ComponentKind, entity_id: int) -> Any:
        """The entity's component of ``kind``; it must have one."""
        index = self._attached_index(kind, entity_id, "get")
        return self.components.store(kind)[index][1]

    def set(self, kind: ComponentKind, entity_id: int, value: Any) -> None:
        """Replace the entity's existing component of ``kind``."""
        index = self._attached_index(kind, entity_id, "set")
        self.components.store(kind)[index] = (entity_id, value)

    def unset(self, kind: ComponentKind, entity_id: int) -> Any:
        """Detach and return the entity's component of ``kind``."""
        index = self._attached_index(kind, entity_id, "unset")
        self.entities[entity_id][kind] = SENTINEL

        store = self.components.store(kind)
        last = store.pop()
        if index < len(store):
            removed = store[index]
            store[index] = last
            self.entities[last[0]][kind] = index
        else:
            removed = last
        return removed[1]

    def overwrite(self, kind: ComponentKind, entity_id: int, value: Any) -> None:
        """Attach a component of ``kind``, replacing any existing one."""
        index = self._entity(entity_id).index_of(kind)
        if index == SENTINEL:
            self._push(kind, entity_id, value)
        else:
            self.components.store(kind)[index] = (entity_id, value)

    def iter(self, kind: ComponentKind) -> Iterator[tuple[int, Any]]:
        """Iterate ``(entity_id, component)`` pairs of ``kind``."""
        return iter(self.components.store(kind)[1:])

    def clone(self) -> Ecs:
        """A copy that can be changed independently of this one."""
        copy = Ecs()
        copy.components = Components(
            **{kind.value: list(self.components.store(kind)) for kind in ComponentKind}
        )
        copy.entities = [replace(entity) for entity in self.entities]
        return copy

    def update_and_render(self, ctx: Ctx, prev: Ecs, systems: Iterable[SystemFn]) -> None:
        """Run every system in order, reading ``prev`` and writing this world."""
        for system in systems:
            system(ctx, prev, self)

    def __repr__(self) -> str:
        return f"Ecs(entities={self.entities!r}, components={self.components!r})"


class EntitySpawner:
    """Builds an entity by collecting the components to attach."""

    def __init__(self) -> None:
        self._values: dict[ComponentKind, Any] = {}

    def with_component(self, kind: ComponentKind, value: Any) -> EntitySpawner:
        """Attach ``value`` as the component of ``kind``."""
        self._values[kind] = value
        return self

    def with_default(self, kind: ComponentKind) -> EntitySpawner:
        """Attach the default component of ``kind``."""
        return self.with_component(kind, kind.default_value())

    def with_pos(self, value: Point) -> EntitySpawner:
        return self.with_component(ComponentKind.POS, value)

    def with_follow(self, value: Follow) -> EntitySpawner:
        return self.with_component(ComponentKind.FOLLOW, value)

    def with_debug(self, value: DebugFlags) -> EntitySpawner:
        return self.with_component(ComponentKind.DEBUG, value)

    def spawn(self, ecs: Ecs) -> int:
        """Add the entity to ``ecs`` and return its id."""
        if len(ecs.entities) >= MAX_ENTITIES:
            raise OverflowError("Too many entities")
        entity_id = len(ecs.entities)
        ecs.entities.append(Entity())
        for kind in ComponentKind:
            if kind in self._values:
                ecs._push(kind, entity_id, self._values[kind])
        return entity_id