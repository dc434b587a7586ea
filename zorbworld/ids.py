"""Identifiers tagged with the kind of thing they index."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

_MAX_ID = 2**32 - 1


@dataclass(frozen=True, repr=False)
class Id(Generic[T]):
    """An unsigned 32-bit identifier; the type parameter names what it indexes."""

    value: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.value <= _MAX_ID:
            raise ValueError(f"Id value out of range: {self.value}")

    def next(self) -> Id[T]:
        """Return the identifier that follows this one."""
        if self.value == _MAX_ID:
            raise OverflowError("Id space exhausted")
        return Id(self.value + 1)

    def __repr__(self) -> str:
        return repr(self.value)