"""Saving and loading dungeon levels in the binary dungeon file format."""

from __future__ import annotations

import os
import struct
from pathlib import Path
from typing import Any

from .descriptions import default_path
from .dungeon import Room, Stair
from .terrain import DUNGEON_X, DUNGEON_Y, FILE_TYPE, Terrain

HEADER_SIZE = 1708
_MAGIC_LEN = 12


def default_dungeon_path() -> Path:
    """Return where the dungeon is saved by default."""
    return default_path("dungeon")


class _Reader:
    def __init__(self, data: bytes) -> None:
        self._data = data
        self._offset = 0

    def unpack(self, fmt: str) -> tuple:
        try:
            values = struct.unpack_from(fmt, self._data, self._offset)
        except struct.error as exc:
            raise ValueError("dungeon file is truncated") from exc
        self._offset += struct.calcsize(fmt)
        return values


def _terrain_for_hardness(hardness: int) -> Terrain:
    if hardness == 255:
        return Terrain.IMMUTABLE
    if hardness == 0:
        return Terrain.CORRIDOR
    return Terrain.WALL


def _check_inside(x: int, y: int) -> None:
    if not (0 <= x < DUNGEON_X and 0 <= y < DUNGEON_Y):
        raise ValueError(f"cell ({x}, {y}) lies outside the dungeon")


def _decode(dungeon: Any, data: bytes) -> None:
    reader = _Reader(data)
    reader.unpack(f"{_MAGIC_LEN}s")
    dungeon.file_version, dungeon.file_size = reader.unpack(">II")
    dungeon.player.x, dungeon.player.y = reader.unpack("BB")

    for r in range(DUNGEON_Y):
        row = list(reader.unpack(f"{DUNGEON_X}B"))
        dungeon.hardness[r] = row
        dungeon.map[r] = [_terrain_for_hardness(h) for h in row]

    (num_rooms,) = reader.unpack(">H")
    rooms = []
    for _ in range(num_rooms):
        room = Room(*reader.unpack("4B"))
        if room.width or room.height:
            _check_inside(room.x + room.width - 1, room.y + room.height - 1)
        for c, r in room.cells():
            dungeon.map[r][c] = Terrain.FLOOR
        rooms.append(room)
    dungeon.rooms = rooms

    def read_stairs(direction: str, terrain: Terrain) -> list[Stair]:
        (count,) = reader.unpack(">H")
        stairs = []
        for _ in range(count):
            x, y = reader.unpack("BB")
            _check_inside(x, y)
            dungeon.map[y][x] = terrain
            stairs.append(Stair(x, y, direction))
        return stairs

    dungeon.up_stairs = read_stairs("u", Terrain.STAIR_UP)
    dungeon.down_stairs = read_stairs("d", Terrain.STAIR_DOWN)


def _encode(dungeon: Any) -> bytes:
    size = (
        HEADER_SIZE
        + 4 * len(dungeon.rooms)
        + 2 * len(dungeon.up_stairs)
        + 2 * len(dungeon.down_stairs)
    )
    parts = [
        FILE_TYPE.encode("ascii")[:_MAGIC_LEN].ljust(_MAGIC_LEN, b"\0"),
        struct.pack(">II", dungeon.file_version, size),
        struct.pack("BB", dungeon.player.x, dungeon.player.y),
    ]
    parts.extend(bytes(row) for row in dungeon.hardness)
    parts.append(struct.pack(">H", len(dungeon.rooms)))
    parts.extend(struct.pack("4B", r.x, r.y, r.width, r.height) for r in dungeon.rooms)
    for stairs in (dungeon.up_stairs, dungeon.down_stairs):
        parts.append(struct.pack(">H", len(stairs)))
        parts.extend(struct.pack("BB", s.x, s.y) for s in stairs)
    return b"".join(parts)


def load_dungeon(dungeon: Any, path: str | os.PathLike | None = None) -> None:
    """Replace ``dungeon``'s layout and player position with the saved one."""
    target = Path(path) if path is not None else default_dungeon_path()
    _decode(dungeon, target.read_bytes())


def save_dungeon(dungeon: Any, path: str | os.PathLike | None = None) -> None:
    """Write ``dungeon``'s layout and player position to ``path``."""
    target = Path(path) if path is not None else default_dungeon_path()
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(_encode(dungeon))