[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nightraid"
version = "0.1.0"
description = "Game logic for a top-down night-time shooter: tile maps, A* pathfinding, entities, gifts and session state"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "shooter", "pathfinding", "tilemap", "a-star"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nightraid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
