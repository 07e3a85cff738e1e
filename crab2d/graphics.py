"""Bitmap drawing on an emulated video memory."""

from __future__ import annotations

from array import array
from dataclasses import dataclass, replace
from typing import ClassVar

from .vec2 import Vec2

VRAM_SIZE = 0x18000
VRAM_PAGE_SIZE = 0xA000

SCREEN_WIDTH = 240
SCREEN_HEIGHT = 160
M5_SCREEN_WIDTH = 160


@dataclass(frozen=True)
class Color:
    """A 15-bit colour: red in bits 0-4, green 5-9, blue 10-14."""

    value: int = 0

    BLACK: ClassVar["Color"]
    WHITE: ClassVar["Color"]
    RED: ClassVar["Color"]
    GREEN: ClassVar["Color"]
    BLUE: ClassVar["Color"]
    YELLOW: ClassVar["Color"]
    MAGENTA: ClassVar["Color"]
    CYAN: ClassVar["Color"]

    def __post_init__(self) -> None:
        if not 0 <= self.value <= 0xFFFF:
            raise ValueError(f"colour value out of range: {self.value!r}")

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "Color":
        """Build a colour from 5-bit channels."""
        if not all(0 <= c <= 31 for c in (r, g, b)):
            raise ValueError(f"colour channel out of range: {(r, g, b)!r}")
        return cls(b << 10 | g << 5 | r)

    @property
    def red(self) -> int:
        return self.value & 0x1F

    @property
    def green(self) -> int:
        return (self.value >> 5) & 0x1F

    @property
    def blue(self) -> int:
        return (self.value >> 10) & 0x1F


for _name, _rgb in {
    "BLACK": (0, 0, 0), "WHITE": (31, 31, 31), "RED": (31, 0, 0),
    "GREEN": (0, 31, 0), "BLUE": (0, 0, 31), "YELLOW": (31, 31, 0),
    "MAGENTA": (31, 0, 31), "CYAN": (0, 31, 31),
}.items():
    setattr(Color, _name, Color.from_rgb(*_rgb))


@dataclass(frozen=True)
class DisplayControl:
    """Display control settings."""

    video_mode: int = 0
    show_bg2: bool = False
    show_frame1: bool = False

    def __post_init__(self) -> None:
        if not 0 <= self.video_mode <= 5:
            raise ValueError(f"video mode out of range: {self.video_mode!r}")


class Display:
    """Emulated video memory with a current drawing page."""

    def __init__(self, control: DisplayControl | None = None) -> None:
        self.control = control or DisplayControl()
        self.vram = array("H", bytes(VRAM_SIZE))
        self._page = 0

    def set_display_mode(self, mode: DisplayControl) -> None:
        """Replace the whole display control setting."""
        self.control = mode

    def video_mode(self) -> int:
        """The current video mode."""
        return self.control.video_mode

    def flip_page(self) -> None:
        """Swap the drawing page and toggle which frame is shown."""
        self._page ^= VRAM_PAGE_SIZE // 2
        self.control = replace(self.control, show_frame1=not self.control.show_frame1)

    def clear(self, color: Color) -> None:
        """Fill the mode-3 bitmap at the start of video memory with ``color``."""
        count = SCREEN_WIDTH * SCREEN_HEIGHT
        self.vram[:count] = array("H", [color.value]) * count

    def _index(self, p: Vec2) -> int:
        x, y = int(p.x), int(p.y)
        if x < 0 or y < 0:
            raise ValueError(f"negative coordinates: ({x}, {y})")
        width = M5_SCREEN_WIDTH if self.video_mode() == 5 else SCREEN_WIDTH
        index = self._page + y * width + x
        if index >= len(self.vram):
            raise IndexError(f"point ({x}, {y}) lies outside video memory")
        return index

    def pixel(self, p: Vec2) -> Color:
        """Read the colour at ``p`` on the current page."""
        return Color(self.vram[self._index(p)])

    def point(self, p: Vec2, color: Color) -> None:
        """Draw a point at ``p`` on the current page."""
        self.vram[self._index(p)] = color.value

    def rect(self, p: Vec2, width: int, height: int, color: Color) -> None:
        """Fill a rectangle with top-left ``p``; both edges are inclusive."""
        for i in range(width + 1):
            for j in range(height + 1):
                self.point(p + Vec2(i, j), color)

    def frame(self, p: Vec2, width: int, height: int, color: Color) -> None:
        """Draw the outline of a rectangle with top-left ``p``."""
        top_right = p + Vec2(width, 0)
        bottom_left = p + Vec2(0, height)
        bottom_right = p + Vec2(width, height)
        self.line(p, top_right, color)
        self.line(bottom_left, bottom_right, color)
        self.line(p, bottom_left, color)
        self.line(top_right, bottom_right, color)

    def line(self, p1: Vec2, p2: Vec2, color: Color) -> None:
        """Draw a line from ``p1`` to ``p2`` inclusive."""
        x1, y1 = min(p1.x, p2.x), min(p1.y, p2.y)
        dx, dy = max(p1.x, p2.x) - x1, max(p1.y, p2.y) - y1

        if dy == 0:
            for i in range(dx + 1):
                self.point(Vec2(x1 + i, y1), color)
            return
        if dx == 0:
            for i in range(dy + 1):
                self.point(Vec2(x1, y1 + i), color)
            return

        x, y = int(p1.x), int(p1.y)
        end_x, end_y = int(p2.x), int(p2.y)
        dx, dy = abs(end_x - x), abs(end_y - y)
        sx = 1 if end_x > x else -1
        sy = 1 if end_y > y else -1
        err = dx - dy
        while True:
            self.point(Vec2(x, y), color)
            if x == end_x and y == end_y:
                break
            e2 = err * 2
            if e2 > -dy:
                err -= dy
                x += sx
            if e2 < dx:
                err += dx
                y += sy