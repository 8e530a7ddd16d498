[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixeldemos"
version = "0.1.0"
description = "Small pixel-display demos: a seven-segment clock, BDF text rendering and a snake game on an in-memory frame buffer"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "framebuffer",
    "seven-segment",
    "bdf",
    "font",
    "snake",
    "game",
    "rgb565",
]
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
    "Topic :: Software Development :: Embedded Systems",
    "Topic :: Games/Entertainment :: Arcade",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pixeldemos-clock = "pixeldemos.clock:main"
pixeldemos-snake = "pixeldemos.snake_app:main"

[tool.hatch.build.targets.wheel]
packages = ["pixeldemos"]

[tool.hatch.build.targets.sdist]
include = ["pixeldemos", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
