[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "rlgdungeon"
version = "1.8.0"
description = "A terminal roguelike: generated dungeons, monster and object descriptions, pathfinding monsters and a turn queue."
requires-python = ">=3.10"
dependencies = []
keywords = ["roguelike", "dungeon", "game", "curses", "terminal", "dijkstra", "fibonacci-heap"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rlgdungeon = "rlgdungeon.game:main"

[tool.setuptools]
packages = ["rlgdungeon"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
