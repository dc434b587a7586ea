"""Keyboard, mouse and quit state gathered from the event queue."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

import pygame

from zorbworld.coords import Point

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeyStatus:
    """State of a key and when it last changed."""

    down: bool = False
    since: int = 0
    mods: int = 0


@dataclass(frozen=True)
class MouseBtnStatus:
    """State of a mouse button, where and when it last changed."""

    down: bool = False
    pos: Point = Point()
    since: int = 0


class Events:
    """Tracks input state; call :meth:`scan` once per frame."""

    def __init__(
        self,
        poll: Optional[Callable[[], Iterable[pygame.event.Event]]] = None,
        mouse_position: Optional[Callable[[], tuple[int, int]]] = None,
        ticks: Optional[Callable[[], int]] = None,
    ) -> None:
        self._poll = poll or pygame.event.get
        self._mouse_position = mouse_position or pygame.mouse.get_pos
        self._ticks = ticks or pygame.time.get_ticks
        self.mouse_pos = Point()
        self._quit = False
        self._mouse_btns: dict[int, MouseBtnStatus] = {}
        self._keys: dict[int, KeyStatus] = {}

    def scan(self) -> None:
        """Read pending events and update the tracked state."""
        now = self._ticks()
        x, y = self._mouse_position()
        self.mouse_pos = Point(float(x), float(y))

        for event in self._poll():
            if event.type == pygame.QUIT:
                self._quit = True
            elif event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
                bx, by = event.pos
                self._mouse_btns[event.button] = MouseBtnStatus(
                    down=event.type == pygame.MOUSEBUTTONDOWN,
                    pos=Point(float(bx), float(by)),
                    since=now,
                )
            elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
                key = getattr(event, "key", None)
                if key is None or key == pygame.K_UNKNOWN:
                    _log.warning("received unknown key")
                    continue
                self._keys[key] = KeyStatus(
                    down=event.type == pygame.KEYDOWN,
                    since=now,
                    mods=getattr(event, "mod", 0),
                )

    def mouse_btn(self, btn: int) -> MouseBtnStatus:
        """State of mouse button ``btn``."""
        return self._mouse_btns.get(btn, MouseBtnStatus())

    def key(self, key: int) -> KeyStatus:
        """State of the key with key code ``key``."""
        return self._keys.get(key, KeyStatus())

    def quit(self) -> bool:
        """Whether a quit request has been received."""
        return self._quit