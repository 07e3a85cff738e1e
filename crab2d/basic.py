"""A minimal demo: a frame that turns into a filled box when A is released."""

from __future__ import annotations

from .graphics import Color, Display, DisplayControl
from .input import InputState, Key
from .vec2 import Vec2

FRAMES_PER_CYCLE = 60
BOX_ORIGIN = Vec2(20, 20)
BOX_SIZE = 40


class BasicDemo:
    """Per-frame state of the demo."""

    def __init__(self, display: Display | None = None) -> None:
        self.display = display or Display()
        self.display.set_display_mode(DisplayControl(video_mode=3, show_bg2=True))
        self.keys = InputState()
        self.frame = 0

    def step(self, raw_keys: int) -> None:
        """Run one frame with the given raw keypad reading."""
        self.display.clear(Color.BLACK)
        self.keys.poll(raw_keys)

        if self.keys.key_released(Key.A):
            self.display.rect(BOX_ORIGIN, BOX_SIZE, BOX_SIZE, Color.YELLOW)
        else:
            self.display.frame(BOX_ORIGIN, BOX_SIZE, BOX_SIZE, Color.MAGENTA)

        self.frame += 1
        if self.frame == FRAMES_PER_CYCLE:
            self.frame = 0