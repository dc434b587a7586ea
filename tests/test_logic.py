import json
from pathlib import Path

import pygame
import pytest

from zorbworld.camera import Camera
from zorbworld.coords import Point
from zorbworld.events import Events
from zorbworld.game import logic
from zorbworld.game.components import ComponentKind, Follow
from zorbworld.game.spawnables import RED, ZORB_START
from zorbworld.hooks import DropParams, InitParams, UpdateAndRenderParams
from zorbworld.resources.manager import ResourceManager
from zorbworld.resources.sprite_map import SpriteMap, SpriteMapLoader
from zorbworld.resources.store import Resources

EMPTY_META = {"meta": {"frameTags": [], "layers": []}, "frames": []}


class RecordingCanvas:
    def __init__(self):
        self.colors = []
        self.rects = []

    def set_draw_color(self, color):
        self.colors.append(color)

    def draw_rect(self, rect):
        self.rects.append(rect)


@pytest.fixture
def world(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    obj = tmp_path / "resources" / "obj"
    obj.mkdir(parents=True)
    (obj / "zorb.png").write_bytes(b"png")
    (obj / "zorb.json").write_text(json.dumps(EMPTY_META))
    camera = Camera()
    resources = Resources(sprites=ResourceManager(SpriteMapLoader(lambda path: "tex")))
    state = logic.init(InitParams(camera=camera, resources=resources))
    return camera, resources, state


def frame(world, pending, mouse=(0, 0), delta_ms=1000, canvas=None):
    camera, resources, state = world
    events = Events(poll=lambda: list(pending), mouse_position=lambda: mouse, ticks=lambda: 0)
    events.scan()
    params = UpdateAndRenderParams(
        events=events,
        canvas=canvas or RecordingCanvas(),
        camera=camera,
        resources=resources,
        now_ms=delta_ms,
        delta_ms=delta_ms,
        screen_w=1920,
        screen_h=1080,
        state=state,
    )
    return logic.update_and_render(params), events


def key_down(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key, mod=0)


def test_init_sets_up_camera_and_root(world):
    camera, resources, _ = world
    assert resources.root == Path("resources/obj")
    assert camera.min_zoom == 0.5
    assert camera.max_zoom == 3.0
    assert camera.zoom == 0.5
    assert camera.pos == Point.origin()


def test_init_spawns_zorb_and_loads_sprite(world):
    _, resources, state = world
    assert state.ecs.get(ComponentKind.POS, state.zorb) == ZORB_START
    sprite = resources.sprites.get(state.resource_ids.zorb_sprite)
    assert isinstance(sprite, SpriteMap)
    assert sprite.tex == "tex"


def test_init_without_sprite_files_fails(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    resources = Resources(sprites=ResourceManager(SpriteMapLoader(lambda path: "tex")))
    with pytest.raises(FileNotFoundError):
        logic.init(InitParams(camera=Camera(), resources=resources))


def test_quit_event_stops(world):
    result, _ = frame(world, [pygame.event.Event(pygame.QUIT)])
    assert result is False


def test_escape_stops(world):
    result, _ = frame(world, [key_down(pygame.K_ESCAPE)])
    assert result is False


def test_idle_frame_keeps_zorb_in_place_and_draws_debug(world):
    _, _, state = world
    canvas = RecordingCanvas()
    result, _ = frame(world, [], canvas=canvas)
    assert result is True
    assert state.ecs.get(ComponentKind.POS, state.zorb) == ZORB_START
    assert (RED in canvas.colors) == logic.DEBUG


def test_pan_up_and_right(world):
    camera, _, _ = world
    frame(world, [key_down(pygame.K_w), key_down(pygame.K_d)])
    assert camera.pos == Point(300.0, -300.0)


def test_pan_opposite_keys_cancel(world):
    camera, _, _ = world
    frame(world, [key_down(k) for k in (pygame.K_w, pygame.K_s, pygame.K_a, pygame.K_d)])
    assert camera.pos == Point.origin()


def test_zoom_in_keeps_point_under_mouse(world):
    camera, _, _ = world
    mouse = Point(300.0, 200.0)
    before = camera.screen_to_world_point(mouse)
    old_zoom = camera.zoom
    frame(world, [key_down(pygame.K_z)], mouse=(300, 200))
    assert camera.zoom > old_zoom
    after = camera.screen_to_world_point(mouse)
    assert after.x == pytest.approx(before.x)
    assert after.y == pytest.approx(before.y)


def test_zoom_out_clamps_to_minimum(world):
    camera, _, _ = world
    frame(world, [key_down(pygame.K_x)], mouse=(10, 10))
    assert camera.zoom == camera.min_zoom


def test_click_makes_zorb_follow_then_arrive(world):
    camera, _, state = world
    entity_count = len(state.ecs.entities)
    target = camera.screen_to_world_point(Point(100.0, 50.0))
    down = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(100, 50))
    frame(world, [down])

    new_id = entity_count
    assert len(state.ecs.entities) == entity_count + 1
    assert state.ecs.get(ComponentKind.POS, new_id) == target
    assert state.ecs.get(ComponentKind.FOLLOW, state.zorb) == Follow(True, new_id)
    assert state.ecs.get(ComponentKind.POS, state.zorb) == ZORB_START

    up = pygame.event.Event(pygame.MOUSEBUTTONUP, button=1, pos=(100, 50))
    frame(world, [up])
    assert state.ecs.get(ComponentKind.POS, state.zorb) == target
    assert state.ecs.get(ComponentKind.FOLLOW, state.zorb) is None
    assert len(state.ecs.entities) == entity_count + 1


def test_drop_clears_world(world):
    _, _, state = world
    logic.drop(DropParams(state=state))
    assert state.ecs.entities == []