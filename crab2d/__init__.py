"""A small 2D toolkit: vectors, keypad input, an emulated bitmap framebuffer, tiles and demos."""

__version__ = "0.1.0"
__all__ = ["basic", "graphics", "input", "pong", "tilemap", "vec2"]