# zorbworld

A small top-down world simulation. A single creature, the zorb, sits in
a world that you look at through a movable, zoomable camera. Click
anywhere and the zorb walks there.

The package provides:

- `zorbworld.camera.Camera`: converts points, sizes, boxes and rects
  between world and screen coordinates, with a zoom clamped between
  `min_zoom` and `max_zoom` that can be changed around a screen point
  (`change_zoom_around`) so the world under that point stays put;
- `zorbworld.coords`: `Point`, `Vector`, `Size`, `Box`, `Rect` and the
  single-precision `FRect`, with `screen_rect_to_sdl` and
  `screen_box_to_sdl` to turn screen rects and boxes into `FRect`s;
- `zorbworld.animation`: `Keyframe`, `Animation` (a non-empty keyframe
  sequence of at most 65535 ms in total) and `AnimationCursor` for
  playback;
- `zorbworld.resources.sprite_map`: sprite maps read from an Aseprite
  JSON export and its PNG sheet, with layer tags, `no-export` cels and
  `forward`, `backward` and `pingpong` animation directions
  (`parse_aseprite_export`, `SpriteMapLoader`, `SpriteMap`,
  `SpriteMapAnimation`);
- `zorbworld.resources.manager.ResourceManager`: loads resources through
  a `ResourceLoader`, caches them and hands out `zorbworld.ids.Id`s;
  `zorbworld.resources.store.Resources` holds the sprite-map manager and
  resolves names against a root directory;
- `zorbworld.events.Events`: keyboard, mouse-button and quit state read
  from the pygame event queue once per frame with `scan()`;
- `zorbworld.game`: a compact entity-component system (`Ecs`,
  `EntitySpawner`, `ComponentKind`) with position, follow and debug
  components, and systems for following and debug drawing.

## Installation

```
pip install .
```

Running the tests needs the `test` extra:

```
pip install ".[test]"
pytest
```

## Running

```
zorbworld
```

This opens a 1920×1080 window titled "dev: game" and runs at roughly 60
frames a second until you quit. `--frames N` stops after `N` frames:

```
zorbworld --frames 120
```

| Input             | Action                                             |
|-------------------|----------------------------------------------------|
| Left mouse button | while held, the zorb walks to the pointer's spot   |
| W / A / S / D     | pan the camera                                     |
| Z / X             | zoom in / out around the mouse cursor (0.5 to 3.0) |
| Escape            | quit                                               |

At start-up the game loads the sprite map `zorb` from `resources/obj`
relative to the working directory, so `resources/obj/zorb.png` and
`resources/obj/zorb.json` (an Aseprite export) must exist. If they are
missing or cannot be read, the command prints `error: ...` and exits
with status 1.

## Using the library

```python
from zorbworld.camera import Camera
from zorbworld.coords import Point

camera = Camera()
camera.init(0.5, 3.0, Point.origin())
camera.set_zoom(2.0)
screen = camera.world_to_screen_point(Point(10.0, 5.0))  # Point(x=20.0, y=10.0)
```

```python
from zorbworld.coords import Point
from zorbworld.game.components import ComponentKind, Follow
from zorbworld.game.ecs import Ecs, EntitySpawner

ecs = Ecs()
zorb = EntitySpawner().with_pos(Point(1.0, 2.0)).spawn(ecs)
target = EntitySpawner().with_pos(Point(50.0, 2.0)).spawn(ecs)
ecs.overwrite(ComponentKind.FOLLOW, zorb, Follow(stop_after_arriving=True, target_entity=target))
print(ecs.get(ComponentKind.POS, zorb))  # Point(x=1.0, y=2.0)
```

Systems are plain functions `system(ctx, prev, nxt)` that read the
previous world and write the next one; `Ecs.update_and_render(ctx, prev,
systems)` runs them in order, and `zorbworld.game.systems.default_systems()`
returns the built-in ones.

## What it does not do

- The zorb's sprite map is loaded but never drawn. The world is shown
  only as red debug outlines around entities that carry a debug colour,
  and only when Python runs without `-O`; with `-O` the window stays
  black.
- Clicking spawns a new target entity every frame the button is held,
  and targets are never removed. The world holds at most 8192 entities;
  spawning beyond that raises `OverflowError`.
- There is no saving or loading of the world, and no sound.