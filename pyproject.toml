[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "genesis-canvas"
version = "0.1.0"
description = "Chainable 2D canvas drawing primitives (rectangles, sprites, wrapped text boxes) that emit draw commands to a pluggable host."
requires-python = ">=3.10"
dependencies = []
keywords = ["canvas", "2d", "graphics", "sprites", "game", "drawing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["genesis_canvas"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
