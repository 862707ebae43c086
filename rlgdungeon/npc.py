"""Monsters and how they choose their moves."""

from __future__ import annotations

import random
import time
from dataclasses import dataclass
from typing import Any

from .character import Character
from .dice import Dice
from .monster_template import MonsterTemplate
from .terrain import Terrain

_RANDOM_SYMBOLS = "0123456789abcdef"
# Order in which equally good steps are preferred: up, right, left, down.
_ORTHOGONAL = ((0, -1), (1, 0), (-1, 0), (0, 1))
TUNNEL_STRENGTH = 85


@dataclass(eq=False)
class NPC(Character):
    """A monster; ``abilities`` picks how it moves."""

    abilities: int = 0
    name: str = ""
    description: str = ""
    last_seen_x: int | None = None
    last_seen_y: int | None = None

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.last_seen_x is None:
            self.last_seen_x = self.x
        if self.last_seen_y is None:
            self.last_seen_y = self.y

    @classmethod
    def from_template(
        cls,
        template: MonsterTemplate,
        x: int,
        y: int,
        rng: random.Random | None = None,
    ) -> NPC:
        """Roll a new monster at (x, y) from ``template``."""
        if not template.colors:
            raise ValueError(f"monster template {template.name!r} has no colour")
        speed = template.speed.roll(rng)
        if speed <= 0:
            raise ValueError(f"monster template {template.name!r} rolled speed {speed}")
        return cls(
            x=x,
            y=y,
            symbol=template.symbol,
            speed=speed,
            move_time=1000 // speed,
            hitpoints=template.hitpoints.roll(rng),
            color=template.colors[0],
            attack_damage=template.attack_damage.copy(),
            template_index=template.index,
            abilities=int(template.abilities),
        )

    @classmethod
    def random(
        cls,
        x: int,
        y: int,
        seed: int = 0,
        rng: random.Random | None = None,
    ) -> NPC:
        """Make a monster with random telepathic, smart or tunnelling abilities."""
        if rng is None:
            rng = random.Random(int(time.time()) + seed * 17)
        abilities = (1, 3, 7)[rng.randrange(3)]
        speed = rng.randrange(16) + 5
        return cls(
            x=x,
            y=y,
            symbol=_RANDOM_SYMBOLS[abilities],
            speed=speed,
            move_time=1000 // speed,
            hitpoints=10,
            attack_damage=Dice(0, 3, 1),
            abilities=abilities,
        )

    def _choose(self, dungeon: Any) -> None:
        kind = self.abilities
        if kind in (0, 8):
            self.choose_erratic(dungeon)
        elif kind == 1:
            self.choose_telepathic(dungeon)
        elif kind in (2, 3):
            self.choose_smart(dungeon)
        elif 4 <= kind <= 7:
            self.choose_tunneling(dungeon)

    def move(self, dungeon: Any) -> None:
        """Take one turn: pick a cell, then kill what is there or step into it."""
        self._choose(dungeon)
        target = dungeon.characters[self.next_y][self.next_x]
        if target is not None and (self.next_x, self.next_y) != (self.x, self.y):
            if target.symbol != "@":
                target.alive = False
                dungeon.nummon -= 1
                template = dungeon.monster_templates[target.template_index]
                if template.unique:
                    template.valid = False
                dungeon.characters[self.next_y][self.next_x] = None
            else:
                dungeon.player.alive = False
        else:
            dungeon.characters[self.y][self.x] = None
            self.x, self.y = self.next_x, self.next_y
            dungeon.characters[self.y][self.x] = self

    def choose_erratic(self, dungeon: Any) -> None:
        """Pick a random open orthogonal neighbour."""
        rng = dungeon.rng
        while True:
            dx = dy = 0
            if rng.randrange(2):
                dy = 1 if rng.randrange(2) else -1
            else:
                dx = 1 if rng.randrange(2) else -1
            if dungeon.hardness[self.y + dy][self.x + dx] == 0:
                self.next_x, self.next_y = self.x + dx, self.y + dy
                return

    def choose_telepathic(self, dungeon: Any) -> None:
        """Step right or down when the player lies that way, else stay on that axis."""
        player = dungeon.player
        self.next_x = self.x + 1 if self.x < player.x else self.x
        self.next_y = self.y + 1 if self.y < player.y else self.y

    def _best_step(self, pathfinder: Any) -> tuple[int, int]:
        return min(
            _ORTHOGONAL,
            key=lambda step: pathfinder.cost(self.x + step[0], self.y + step[1]),
        )

    def choose_smart(self, dungeon: Any) -> None:
        """Step to the orthogonal neighbour nearest the player over open floor."""
        dx, dy = self._best_step(dungeon.floor_pathfinder)
        self.next_x, self.next_y = self.x + dx, self.y + dy

    def choose_tunneling(self, dungeon: Any) -> None:
        """Head for the player through rock, wearing it down before moving in."""
        dx, dy = self._best_step(dungeon.all_pathfinder)
        tx, ty = self.x + dx, self.y + dy
        if dungeon.hardness[ty][tx] <= TUNNEL_STRENGTH:
            dungeon.hardness[ty][tx] = 0
            if dungeon.map[ty][tx] == Terrain.WALL:
                dungeon.map[ty][tx] = Terrain.CORRIDOR
            self.next_x, self.next_y = tx, ty
        else:
            dungeon.hardness[ty][tx] -= TUNNEL_STRENGTH