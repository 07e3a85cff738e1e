"""Tile data layouts for 4bpp and 8bpp character blocks."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import ClassVar, List, Tuple


@dataclass(frozen=True)
class _Tile:
    WORDS: ClassVar[int] = 0
    data: Tuple[int, ...] = field(default=())

    def __post_init__(self) -> None:
        data = tuple(self.data) or (0,) * self.WORDS
        if len(data) != self.WORDS or not all(0 <= w <= 0xFFFFFFFF for w in data):
            raise ValueError(f"{type(self).__name__} needs {self.WORDS} 32-bit words")
        object.__setattr__(self, "data", data)

    def to_bytes(self) -> bytes:
        """Little-endian byte image of the tile."""
        return struct.pack(f"<{self.WORDS}I", *self.data)

    @classmethod
    def from_bytes(cls, raw: bytes):
        """Build a tile from its little-endian byte image."""
        if len(raw) != cls.WORDS * 4:
            raise ValueError(f"{cls.__name__} needs {cls.WORDS * 4} bytes, got {len(raw)}")
        return cls(struct.unpack(f"<{cls.WORDS}I", raw))


@dataclass(frozen=True)
class Tile4(_Tile):
    """An 8x8 tile at 4 bits per pixel: 32 bytes as 8 words."""

    WORDS: ClassVar[int] = 8


@dataclass(frozen=True)
class Tile8(_Tile):
    """An 8x8 tile at 8 bits per pixel: 64 bytes as 16 words."""

    WORDS: ClassVar[int] = 16


CHAR_BLOCK4_TILES = 512
CHAR_BLOCK8_TILES = 256


def char_block4() -> List[Tile4]:
    """An empty 4bpp character block of 32x16 tiles."""
    return [Tile4() for _ in range(CHAR_BLOCK4_TILES)]


def char_block8() -> List[Tile8]:
    """An empty 8bpp character block of 16x16 tiles."""
    return [Tile8() for _ in range(CHAR_BLOCK8_TILES)]