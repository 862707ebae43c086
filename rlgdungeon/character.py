"""State shared by the player and monsters, and line of sight."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .dice import Dice
from .terrain import Color, Terrain


@dataclass(eq=False)
class Character:
    """Something that moves around the dungeon and takes turns."""

    x: int = 0
    y: int = 0
    symbol: str = "@"
    speed: int = 10
    move_time: int = 0
    hitpoints: int = 0
    color: int = Color.WHITE
    attack_damage: Dice = field(default_factory=Dice)
    is_pc: bool = False
    alive: bool = True
    next_x: int | None = None
    next_y: int | None = None
    template_index: int = 0
    item: Any = None

    def __post_init__(self) -> None:
        if self.next_x is None:
            self.next_x = self.x
        if self.next_y is None:
            self.next_y = self.y


def _toward(a: int, b: int) -> int:
    if b > a:
        return a + 1
    if b < a:
        return a - 1
    return a


def next_pos(x0: int, y0: int, x1: int, y1: int) -> tuple[int, int]:
    """Return the cell one step from (x0, y0) toward (x1, y1)."""
    return _toward(x0, x1), _toward(y0, y1)


def can_see(dungeon: Any, viewer: Character, viewee: Character) -> bool:
    """Whether ``viewer`` sees ``viewee`` along open floor and corridor.

    Stepping stops as soon as the two share a row or a column.
    """
    x0, y0 = viewer.x, viewer.y
    x1, y1 = viewee.x, viewee.y
    while x0 != x1 and y0 != y1:
        x0, y0 = next_pos(x0, y0, x1, y1)
        if dungeon.map[y0][x0] not in (Terrain.FLOOR, Terrain.CORRIDOR):
            return False
    return True