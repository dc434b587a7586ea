import json
from pathlib import Path

import pytest

from zorbworld.ids import Id
from zorbworld.resources.manager import ResourceError, ResourceLoader, ResourceManager
from zorbworld.resources.sprite_map import SpriteMapLoader
from zorbworld.resources.store import Resources


class RecordingLoader(ResourceLoader):
    def __init__(self, fail_on=()):
        self.keys = []
        self.fail_on = set(fail_on)

    def load(self, key):
        self.keys.append(key)
        if key.name in self.fail_on:
            raise ResourceError()
        return f"sprite:{key.name}"


def test_default_root_is_current_directory():
    assert Resources().root == Path(".")


def test_load_sprite_map_joins_root(tmp_path):
    loader = RecordingLoader()
    resources = Resources(root=tmp_path, sprites=ResourceManager(loader))
    first = resources.load_sprite_map("zorb")
    assert loader.keys == [tmp_path / "zorb"]
    assert resources.sprites.get(first) == "sprite:zorb"
    second = resources.load_sprite_map("other")
    assert second == first.next()
    assert resources.sprites.get(second) == "sprite:other"


def test_failed_load_does_not_consume_an_id(tmp_path):
    loader = RecordingLoader(fail_on={"broken"})
    resources = Resources(root=tmp_path, sprites=ResourceManager(loader))
    with pytest.raises(ResourceError):
        resources.load_sprite_map("broken")
    assert resources.load_sprite_map("zorb") == Id(0)


def test_load_real_sprite_map(tmp_path):
    root = tmp_path / "obj"
    root.mkdir()
    data = {
        "frames": [
            {
                "filename": "idle#0#body",
                "duration": 80,
                "frame": {"x": 0, "y": 0, "w": 8, "h": 8},
                "spriteSourceSize": {"x": 0, "y": 0, "w": 8, "h": 8},
            }
        ],
        "meta": {"frameTags": [{"name": "idle", "direction": "forward"}], "layers": []},
    }
    (root / "zorb.json").write_text(json.dumps(data), encoding="utf-8")
    (root / "zorb.png").write_bytes(b"png")

    resources = Resources(
        root=root, sprites=ResourceManager(SpriteMapLoader(load_texture=lambda p: p.name))
    )
    sprite_id = resources.load_sprite_map("zorb")
    sprite_map = resources.sprites.get(sprite_id)
    assert sprite_map.tex == "zorb.png"
    assert sprite_map.get_animation("idle").keyframes.keyframes[0].value == (0,)


def test_load_missing_sprite_map(tmp_path):
    resources = Resources(
        root=tmp_path, sprites=ResourceManager(SpriteMapLoader(load_texture=lambda p: None))
    )
    with pytest.raises(FileNotFoundError):
        resources.load_sprite_map("nothing")