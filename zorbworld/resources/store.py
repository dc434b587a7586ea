"""The collection of resource managers available to the game."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from zorbworld.ids import Id
from zorbworld.resources.manager import ResourceManager
from zorbworld.resources.sprite_map import SpriteMap, SpriteMapLoader


def _default_sprites() -> ResourceManager[SpriteMap]:
    return ResourceManager(SpriteMapLoader())


@dataclass
class Resources:
    """Holds every resource manager, resolving names against ``root``."""

    root: Path = field(default_factory=lambda: Path("."))
    sprites: ResourceManager[SpriteMap] = field(default_factory=_default_sprites)

    def load_sprite_map(self, name: str) -> Id[SpriteMap]:
        """Load the sprite map ``name`` below ``root`` and return its identifier."""
        return self.sprites.load(Path(self.root) / name)