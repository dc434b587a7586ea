"""Keyframe animations and playback cursors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterable, Optional, TypeVar

T = TypeVar("T")

_MAX_MS = 0xFFFF


@dataclass
class Keyframe(Generic[T]):
    """A value shown for ``duration_ms`` milliseconds."""

    duration_ms: int
    value: T
    cumulative_duration_ms: int = 0


class Animation(Generic[T]):
    """A non-empty sequence of keyframes with running total durations."""

    def __init__(self, keyframes: Iterable[Keyframe[T]]) -> None:
        frames = []
        total = 0
        for keyframe in keyframes:
            total += keyframe.duration_ms
            if total > _MAX_MS:
                raise OverflowError("Animation is longer than 65535 ms")
            frames.append(Keyframe(keyframe.duration_ms, keyframe.value, total))
        if not frames:
            raise ValueError("Empty keyframes")
        self.keyframes: tuple[Keyframe[T], ...] = tuple(frames)

    def __len__(self) -> int:
        return len(self.keyframes)

    def __repr__(self) -> str:
        return f"Animation({list(self.keyframes)!r})"


@dataclass
class AnimationCursor:
    """A playback position within an animation."""

    start_ms: int = 0
    current_frame: int = 0
    playing: bool = False

    def start(self, now_ms: int, animation: Animation[T]) -> T:
        """Restart playback at ``now_ms`` and return the first value."""
        self.start_ms = now_ms
        self.current_frame = 0
        self.playing = True
        return animation.keyframes[0].value

    def update(self, now_ms: int, animation: Animation[T]) -> Optional[T]:
        """Advance to ``now_ms``; return the current value, or None once finished."""
        if not self.playing:
            return None

        frames = animation.keyframes
        while (
            self.current_frame < len(frames)
            and frames[self.current_frame].cumulative_duration_ms + self.start_ms < now_ms
        ):
            self.current_frame += 1

        if self.current_frame < len(frames):
            return frames[self.current_frame].value
        self.playing = False
        return None