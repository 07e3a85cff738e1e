[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "crab2d"
version = "0.1.0"
description = "A small 2D toolkit: vectors, keypad input tracking, an emulated bitmap framebuffer, tile types and two demos"
requires-python = ">=3.10"
dependencies = []
keywords = ["2d", "graphics", "framebuffer", "bitmap", "input", "vector", "tiles", "pong"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Games/Entertainment",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["crab2d"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
