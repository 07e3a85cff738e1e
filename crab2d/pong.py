"""A small pong game: a player paddle, a bot paddle and a ball."""

from __future__ import annotations

from dataclasses import dataclass, field

from .graphics import Color, Display, DisplayControl, SCREEN_HEIGHT, SCREEN_WIDTH
from .input import InputState, Key
from .vec2 import Vec2

PADDLE_WIDTH = 6
PADDLE_HEIGHT = 30
BALL_SIZE = 6
PADDLE_SPEED = 2

BACKGROUND = Color.from_rgb(6, 6, 10)


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


@dataclass
class Paddle:
    """A vertical paddle identified by its top-left corner."""

    pos: Vec2

    def draw(self, display: Display) -> None:
        """Draw the paddle in white."""
        display.rect(Vec2(self.pos.x, self.pos.y), PADDLE_WIDTH, PADDLE_HEIGHT, Color.WHITE)

    def follow_input(self, keys: InputState) -> None:
        """Move up or down while the matching key is pressed."""
        if keys.key_down(Key.UP):
            self._move(-PADDLE_SPEED)
        if keys.key_down(Key.DOWN):
            self._move(PADDLE_SPEED)

    def follow_ball(self, ball_y: int) -> None:
        """Move the paddle's centre toward ``ball_y`` at paddle speed."""
        center = self.pos.y + PADDLE_HEIGHT // 2
        self._move(_clamp(ball_y - center, -PADDLE_SPEED, PADDLE_SPEED))

    def _move(self, dy: int) -> None:
        y = _clamp(self.pos.y + dy, 0, SCREEN_HEIGHT - PADDLE_HEIGHT)
        self.pos = Vec2(self.pos.x, y)


def _ball_start() -> Vec2:
    return Vec2(SCREEN_WIDTH // 2 - BALL_SIZE // 2, SCREEN_HEIGHT // 2 - BALL_SIZE // 2)


@dataclass
class Ball:
    """A square ball with an integer position and a fractional speed."""

    pos: Vec2 = field(default_factory=_ball_start)
    speed: Vec2 = field(default_factory=lambda: Vec2(0.0, 0.0))

    def update(self) -> None:
        """Bounce off the vertical limits and advance by the truncated speed."""
        if self.pos.y <= 0 or self.pos.y + BALL_SIZE > SCREEN_WIDTH:
            self.speed = Vec2(self.speed.x, -self.speed.y)
        self.pos = self.pos + Vec2(int(self.speed.x), int(self.speed.y))

    def draw(self, display: Display) -> None:
        """Draw the ball in white."""
        display.rect(Vec2(self.pos.x, self.pos.y), BALL_SIZE, BALL_SIZE, Color.WHITE)


class Pong:
    """The game state and its per-frame update."""

    def __init__(self, display: Display | None = None) -> None:
        self.display = display or Display()
        self.display.set_display_mode(DisplayControl(video_mode=3, show_bg2=True))
        start_y = SCREEN_HEIGHT // 2 - PADDLE_HEIGHT // 2
        self.player = Paddle(Vec2(36, start_y))
        self.bot = Paddle(Vec2(SCREEN_WIDTH - 36 - PADDLE_WIDTH, start_y))
        self.ball = Ball()
        self.keys = InputState()

    def step(self, raw_keys: int) -> None:
        """Run one frame with the given raw keypad reading."""
        self.keys.poll(raw_keys)
        self.display.clear(BACKGROUND)

        self.ball.update()
        self.player.follow_input(self.keys)
        self.bot.follow_ball(30)

        self.player.draw(self.display)
        self.bot.draw(self.display)
        self.ball.draw(self.display)
        middle = SCREEN_WIDTH // 2
        self.display.line(Vec2(middle, 0), Vec2(middle, SCREEN_HEIGHT), Color.WHITE)