"""The windowed game loop."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Any, Optional, Sequence

import pygame

from zorbworld.camera import Camera
from zorbworld.coords import FRect
from zorbworld.events import Events
from zorbworld.game import logic
from zorbworld.hooks import DropParams, InitParams, UpdateAndRenderParams
from zorbworld.resources.manager import ResourceError
from zorbworld.resources.store import Resources

WINDOW_WIDTH = 1920
WINDOW_HEIGHT = 1080
WINDOW_TITLE = "dev: game"
FRAME_SLEEP_S = 1 / 60
BLACK = (0, 0, 0, 255)


class _SurfaceCanvas:
    """Draws onto a pygame surface with a current draw colour."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface
        self._color: Any = BLACK

    def set_draw_color(self, color: Any) -> None:
        self._color = color

    def clear(self) -> None:
        self.surface.fill(self._color)

    def draw_rect(self, rect: FRect) -> None:
        outline = pygame.Rect(int(rect.x), int(rect.y), int(rect.w), int(rect.h))
        pygame.draw.rect(self.surface, self._color, outline, 1)


def run(max_frames: Optional[int] = None) -> int:
    """Open the window and run the game; return the number of frames shown."""
    pygame.init()
    try:
        window = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)

        events = Events()
        camera = Camera()
        render_target = pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT))
        canvas = _SurfaceCanvas(render_target)
        resources = Resources()

        state = logic.init(InitParams(camera=camera, resources=resources))
        frames = 0
        prev_now_ms = 0
        try:
            while max_frames is None or frames < max_frames:
                events.scan()

                now_ms = pygame.time.get_ticks()
                delta_ms = max(now_ms - prev_now_ms, 0)
                prev_now_ms = now_ms

                canvas.set_draw_color(BLACK)
                canvas.clear()
                keep_running = logic.update_and_render(
                    UpdateAndRenderParams(
                        events=events,
                        canvas=canvas,
                        camera=camera,
                        resources=resources,
                        now_ms=now_ms,
                        delta_ms=delta_ms,
                        screen_w=WINDOW_WIDTH,
                        screen_h=WINDOW_HEIGHT,
                        state=state,
                    )
                )

                window.blit(render_target, (0, 0))
                pygame.display.flip()
                frames += 1

                if not keep_running:
                    break
                time.sleep(FRAME_SLEEP_S)
        finally:
            logic.drop(DropParams(state=state))
        return frames
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(prog="zorbworld", description="Run the game.")
    parser.add_argument(
        "--frames", type=int, default=None, help="stop after this many frames"
    )
    args = parser.parse_args(argv)
    if args.frames is not None and args.frames < 0:
        parser.error("--frames must not be negative")
    try:
        run(args.frames)
    except (ResourceError, FileNotFoundError, pygame.error) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())