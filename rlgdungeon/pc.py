"""The player character and its keyboard commands."""

from __future__ import annotations

from typing import Any, NamedTuple

from .character import Character
from .terrain import Color, Terrain

WALL_MESSAGE = "There's a wall in the way!"
NO_UPSTAIRS_MESSAGE = "There is no set of upstairs here!"
NO_DOWNSTAIRS_MESSAGE = "There is no set of downstairs here!"
REST_MESSAGE = "The PC bides his (or her) time..."


class _Step(NamedTuple):
    check: tuple[int, int]
    dest: tuple[int, int]
    attacks: bool


_UP_LEFT = _Step((-1, -1), (-1, -1), False)
_UP = _Step((0, -1), (0, -1), True)
_UP_RIGHT = _Step((1, -1), (1, -1), True)
_RIGHT = _Step((1, 0), (1, 0), True)
_DOWN_RIGHT = _Step((1, 1), (1, 1), True)
_DOWN = _Step((0, 1), (0, 1), True)
# The down-left key checks the diagonal cell but steps straight down.
_DOWN_LEFT = _Step((-1, 1), (0, 1), True)
_LEFT = _Step((-1, 0), (-1, 0), True)

_STEPS = {
    "7": _UP_LEFT, "y": _UP_LEFT,
    "8": _UP, "k": _UP,
    "9": _UP_RIGHT, "u": _UP_RIGHT,
    "6": _RIGHT, "l": _RIGHT,
    "3": _DOWN_RIGHT, "n": _DOWN_RIGHT,
    "2": _DOWN, "j": _DOWN,
    "1": _DOWN_LEFT, "b": _DOWN_LEFT,
    "4": _LEFT, "h": _LEFT,
}


class PC(Character):
    """The player."""

    def __init__(self, x: int, y: int) -> None:
        speed = 10
        super().__init__(
            x=x,
            y=y,
            symbol="@",
            speed=speed,
            move_time=1000 // speed,
            color=Color.WHITE,
            is_pc=True,
        )

    def move(self, dungeon: Any, command: int | str, queue: Any) -> bool:
        """Carry out one command; return True when the player quits."""
        key = chr(command) if isinstance(command, int) else command
        step = _STEPS.get(key)
        if step is not None:
            self._step(dungeon, step)
        elif key == ">":
            self._take_stairs(dungeon, queue, Terrain.STAIR_UP, NO_UPSTAIRS_MESSAGE)
        elif key == "<":
            self._take_stairs(dungeon, queue, Terrain.STAIR_DOWN, NO_DOWNSTAIRS_MESSAGE)
        elif key in ("5", ".", " "):
            dungeon.message = REST_MESSAGE
        elif key == "Q":
            return True
        return False

    def _step(self, dungeon: Any, step: _Step) -> None:
        cx, cy = self.x + step.check[0], self.y + step.check[1]
        if dungeon.hardness[cy][cx] != 0:
            dungeon.message = WALL_MESSAGE
            return
        if step.attacks and dungeon.characters[cy][cx] is not None:
            dungeon.characters[cy][cx].alive = False
            dungeon.nummon -= 1
            dungeon.characters[cy][cx] = None
            return
        dungeon.characters[self.y][self.x] = None
        self.x += step.dest[0]
        self.y += step.dest[1]
        dungeon.characters[self.y][self.x] = self

    def _take_stairs(self, dungeon: Any, queue: Any, stair: Terrain, missing: str) -> None:
        if dungeon.map[self.y][self.x] != stair:
            dungeon.message = missing
            return
        dungeon.clear()
        dungeon.generate()
        self.y = dungeon.rooms[0].y
        self.x = dungeon.rooms[0].x
        dungeon.place_characters(queue)
        dungeon.place_objects()