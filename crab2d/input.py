"""Keypad state tracking between frames."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Key(IntEnum):
    """Keypad bits; a cleared bit means the key is pressed."""

    A = 0x0001
    B = 0x0002
    SELECT = 0x0004
    START = 0x0008
    RIGHT = 0x0010
    LEFT = 0x0020
    UP = 0x0040
    DOWN = 0x0080
    R = 0x0100
    L = 0x0200


@dataclass
class InputState:
    """Current and previous raw keypad readings (active low)."""

    current: int = 0
    previous: int = 0

    def poll(self, raw: int) -> None:
        """Shift the current reading into previous and store ``raw``."""
        self.previous = self.current
        self.current = raw & 0xFFFF

    def key_down(self, key: Key) -> bool:
        """True if ``key`` is pressed now."""
        return self.current & key == 0

    def key_held(self, key: Key) -> bool:
        """True if ``key`` is pressed now and was pressed last frame."""
        return self.key_down(key) and self.previous & key == 0

    def key_hit(self, key: Key) -> bool:
        """True if ``key`` is pressed now but was not last frame."""
        return self.current & key == 0 and self.previous & key != 0

    def key_released(self, key: Key) -> bool:
        """True if ``key`` is up now but was pressed last frame."""
        return self.current & key != 0 and self.previous & key == 0