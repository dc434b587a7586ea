"""Sprite maps exported by Aseprite: a packed texture plus layered animations."""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Optional, Union

import pygame

from zorbworld.animation import Animation, AnimationCursor, Keyframe
from zorbworld.coords import FRect
from zorbworld.resources.manager import ResourceError, ResourceLoader

TAG_NO_EXPORT = "no-export"
"""Cels carrying this tag are left out of animations."""

_FRAME_INDEX = re.compile(r"\+?[0-9]+")


class AnimDirection(Enum):
    """Playback direction of an Aseprite frame tag."""

    PINGPONG = "pingpong"
    FORWARD = "forward"
    BACKWARD = "backward"


def split_cel_name(name: str) -> tuple[str, int, str]:
    """Split a cel name of the form ``anim#frame_i#layer_name``."""
    parts = name.split("#", 2)
    if len(parts) != 3:
        raise ValueError("Frame ID should be in the format 'anim#frame_i#layer_name'")
    anim, frame, layer = parts
    if not _FRAME_INDEX.fullmatch(frame) or int(frame) > 0xFF:
        raise ValueError(f"Frame index should be number: {frame!r}")
    return anim, int(frame), layer


def _get(obj: Any, key: str) -> Any:
    if not isinstance(obj, Mapping):
        raise ResourceError(f"Expected an object holding '{key}'")
    try:
        return obj[key]
    except KeyError:
        raise ResourceError(f"Missing field '{key}'") from None


def _uint(obj: Any, key: str, bits: int) -> int:
    value = _get(obj, key)
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < 1 << bits:
        raise ResourceError(f"Field '{key}' is not a {bits}-bit unsigned integer")
    return value


def _str(obj: Any, key: str) -> str:
    value = _get(obj, key)
    if not isinstance(value, str):
        raise ResourceError(f"Field '{key}' is not a string")
    return value


def _list(obj: Any, key: str, optional: bool = False) -> list:
    if optional and isinstance(obj, Mapping) and key not in obj:
        return []
    value = _get(obj, key)
    if not isinstance(value, list):
        raise ResourceError(f"Field '{key}' is not a list")
    return value


@dataclass(frozen=True)
class _AsepriteRect:
    x: int
    y: int
    w: int
    h: int

    @classmethod
    def parse(cls, obj: Any) -> _AsepriteRect:
        return cls(*(_uint(obj, key, 16) for key in ("x", "y", "w", "h")))

    def to_sdl(self) -> FRect:
        return FRect(float(self.x), float(self.y), float(self.w), float(self.h))


@dataclass
class _AsepriteCel:
    name: str
    duration: int
    sprite_tex_rect: _AsepriteRect
    source_rect: _AsepriteRect
    tags: set[str] = field(default_factory=set)


@dataclass(frozen=True)
class _AsepriteAnim:
    name: str
    direction: AnimDirection


@dataclass(frozen=True)
class _AsepriteLayerTagCel:
    frame: int
    data: str


@dataclass(frozen=True)
class _AsepriteLayerTag:
    name: str
    cels: tuple[_AsepriteLayerTagCel, ...]


@dataclass
class _AsepriteExport:
    cels: list[_AsepriteCel]
    animations: list[_AsepriteAnim]
    layers: list[_AsepriteLayerTag]


def _parse_direction(obj: Any) -> AnimDirection:
    raw = _str(obj, "direction")
    try:
        return AnimDirection(raw)
    except ValueError:
        raise ResourceError(f"Unknown animation direction '{raw}'") from None


def _attach_tags(cels: list[_AsepriteCel], layers: list[_AsepriteLayerTag]) -> None:
    """Copy per-layer cel tags onto the cels they describe."""
    index_by_layer: dict[str, int] = {}
    for cel in cels:
        _, _, layer_name = split_cel_name(cel.name)
        index_in_layer = index_by_layer.get(layer_name, -1) + 1
        index_by_layer[layer_name] = index_in_layer

        layer_tag = next((layer for layer in layers if layer.name == layer_name), None)
        if layer_tag is None:
            continue
        for cel_tag in layer_tag.cels:
            if cel_tag.frame == index_in_layer:
                cel.tags = set(cel_tag.data.split(" "))


def parse_aseprite_export(data: Union[str, bytes, bytearray, Mapping]) -> _AsepriteExport:
    """Parse Aseprite JSON metadata (text or an already decoded object)."""
    if isinstance(data, (str, bytes, bytearray)):
        try:
            data = json.loads(data)
        except ValueError as exc:
            raise ResourceError(f"Invalid sprite map metadata: {exc}") from exc

    meta = _get(data, "meta")
    animations = [
        _AsepriteAnim(_str(tag, "name"), _parse_direction(tag))
        for tag in _list(meta, "frameTags")
    ]
    layers = [
        _AsepriteLayerTag(
            _str(layer, "name"),
            tuple(
                _AsepriteLayerTagCel(_uint(cel, "frame", 8), _str(cel, "data"))
                for cel in _list(layer, "cels", optional=True)
            ),
        )
        for layer in _list(meta, "layers")
    ]
    cels = [
        _AsepriteCel(
            name=_str(cel, "filename"),
            duration=_uint(cel, "duration", 16),
            sprite_tex_rect=_AsepriteRect.parse(_get(cel, "frame")),
            source_rect=_AsepriteRect.parse(_get(cel, "spriteSourceSize")),
        )
        for cel in _list(data, "frames")
    ]
    _attach_tags(cels, layers)
    return _AsepriteExport(cels=cels, animations=animations, layers=layers)


@dataclass
class SpriteMapAnimation:
    """An animation over cels of a sprite map.

    ``layers`` maps layer names to layer indexes; each keyframe value holds,
    per layer, the index of the cel in the sprite map.
    """

    layers: dict[str, int]
    keyframes: Animation[tuple[int, ...]]

    def update_cursor(self, cursor: AnimationCursor, now_ms: int) -> Optional[tuple[int, ...]]:
        """Advance ``cursor`` and return the cel indexes of the current frame."""
        return cursor.update(now_ms, self.keyframes)

    def update_cursor_loop(self, cursor: AnimationCursor, now_ms: int) -> tuple[int, ...]:
        """Advance ``cursor``, restarting it once the animation has ended."""
        current = self.update_cursor(cursor, now_ms)
        if current is None:
            return cursor.start(now_ms, self.keyframes)
        return current

    @classmethod
    def from_aseprite(
        cls, tag: _AsepriteAnim, all_cels: list[_AsepriteCel]
    ) -> SpriteMapAnimation:
        """Build the animation named by ``tag`` from the exported cels."""
        layers: dict[str, int] = {}
        frames: dict[int, tuple[int, list[int]]] = {}
        for index, cel in enumerate(all_cels):
            anim_name, frame_i, layer_name = split_cel_name(cel.name)
            if anim_name != tag.name or TAG_NO_EXPORT in cel.tags:
                continue
            layers.setdefault(layer_name, len(layers))
            _, frame_cels = frames.get(frame_i, (0, []))
            frame_cels.append(index)
            frames[frame_i] = (cel.duration, frame_cels)

        keyframes = [
            Keyframe(duration, tuple(frame_cels))
            for _, (duration, frame_cels) in sorted(frames.items())
        ]

        if tag.direction is AnimDirection.BACKWARD:
            keyframes.reverse()
        elif tag.direction is AnimDirection.PINGPONG:
            if len(keyframes) < 2:
                raise ValueError("A ping-pong animation needs at least two frames")
            middle = keyframes[1:-1]
            keyframes.reverse()
            keyframes.extend(middle)

        return cls(layers=layers, keyframes=Animation(keyframes))


@dataclass(frozen=True)
class SpriteMapCel:
    """Where a cel lies in the packed texture and in its source image."""

    tex_rect: FRect
    src_rect: FRect


@dataclass
class SpriteMap:
    """Many sprites packed into one texture, indexed by cel."""

    tex: Any
    cels: list[SpriteMapCel]
    animations: dict[str, SpriteMapAnimation]

    def get_animation(self, name: str) -> SpriteMapAnimation:
        """Return the animation called ``name``."""
        try:
            return self.animations[name]
        except KeyError:
            raise KeyError(f"Invalid animation '{name}'") from None


def _load_pygame_texture(path: Path) -> pygame.Surface:
    return pygame.image.load(str(path))


class SpriteMapLoader(ResourceLoader[SpriteMap]):
    """Loads a :class:`SpriteMap` from a PNG and a JSON file sharing a stem."""

    def __init__(self, load_texture: Optional[Callable[[Path], Any]] = None) -> None:
        self._load_texture = load_texture or _load_pygame_texture

    def load(self, full_path: Path) -> SpriteMap:
        full_path = Path(full_path)
        tex_path = full_path.with_suffix(".png")
        meta_path = full_path.with_suffix(".json")

        if not tex_path.is_file():
            raise FileNotFoundError(f"No PNG found for sprite map ({tex_path}).")
        if not meta_path.is_file():
            raise FileNotFoundError(f"No metadata found for sprite map ({meta_path}).")

        try:
            meta_text = meta_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ResourceError(f"Could not read {meta_path}: {exc}") from exc
        export = parse_aseprite_export(meta_text)

        try:
            tex = self._load_texture(tex_path)
        except (pygame.error, OSError) as exc:
            raise ResourceError(f"Could not load texture {tex_path}: {exc}") from exc

        return SpriteMap(
            tex=tex,
            cels=[
                SpriteMapCel(cel.sprite_tex_rect.to_sdl(), cel.source_rect.to_sdl())
                for cel in export.cels
            ],
            animations={
                tag.name: SpriteMapAnimation.from_aseprite(tag, export.cels)
                for tag in export.animations
            },
        )