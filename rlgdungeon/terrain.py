"""Terrain kinds, colours and the fixed dimensions of a dungeon level."""

from __future__ import annotations

import enum

DUNGEON_X = 80
DUNGEON_Y = 21
MIN_ROOMS = 6
MAX_ROOMS = 10
MIN_UP = 1
MIN_DOWN = 1
MAX_UP = 3
MAX_DOWN = 3
ROOM_MIN_X = 4
ROOM_MIN_Y = 3
ROOM_MAX_X = 20
ROOM_MAX_Y = 15
MAX_MONSTERS = 50
FILE_TYPE = "RLG327-S2019"


class DisplayCommand(enum.IntEnum):
    """What the display should draw."""

    ALL = 0
    MAP = 1
    MONSTERS = 2
    TELEPORT = 3


class Terrain(enum.IntEnum):
    """Kinds of cell a dungeon map can hold."""

    WALL = 0
    IMMUTABLE = 1
    FLOOR = 2
    CORRIDOR = 3
    STAIR_UP = 4
    STAIR_DOWN = 5
    UNKNOWN = 6


class Color(enum.IntEnum):
    """Terminal colours, numbered as the curses colour constants."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7


_GLYPHS = {
    Terrain.WALL: " ",
    Terrain.IMMUTABLE: " ",
    Terrain.UNKNOWN: " ",
    Terrain.FLOOR: ".",
    Terrain.CORRIDOR: "#",
    Terrain.STAIR_UP: ">",
    Terrain.STAIR_DOWN: "<",
}


def glyph(terrain: Terrain | int) -> str:
    """Return the character drawn for a terrain cell."""
    return _GLYPHS[Terrain(terrain)]


def parse_color(name: str) -> Color | None:
    """Return the colour called ``name`` (upper case), or None if unknown."""
    return Color.__members__.get(name)