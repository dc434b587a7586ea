"""Caching of loaded resources behind typed identifiers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Generic, TypeVar

from zorbworld.ids import Id

R = TypeVar("R")


class ResourceError(Exception):
    """A resource could not be loaded."""

    def __init__(self, message: str = "Resource could not be loaded") -> None:
        super().__init__(message)


class ResourceLoader(ABC, Generic[R]):
    """Loads resources of one kind from a path."""

    @abstractmethod
    def load(self, key: Path) -> R:
        """Load the resource at ``key``; raise :class:`ResourceError` on failure."""


class ResourceManager(Generic[R]):
    """Loads resources through a loader and keeps them by identifier."""

    def __init__(self, loader: ResourceLoader[R]) -> None:
        self.loader = loader
        self._next_id: Id[R] = Id(0)
        self._cache: dict[Id[R], R] = {}

    def load(self, key: Path) -> Id[R]:
        """Load a resource into the cache and return its identifier."""
        loaded = self.loader.load(key)
        resource_id = self._next_id
        self._next_id = resource_id.next()
        self._cache[resource_id] = loaded
        return resource_id

    def get(self, id: Id[R]) -> R:
        """Return a previously loaded resource."""
        try:
            return self._cache[id]
        except KeyError:
            raise LookupError(f"Resource ID '{id!r}' was not loaded") from None