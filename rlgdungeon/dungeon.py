"""A dungeon level: generation, inhabitants and distance maps."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Sequence

from .item import Item
from .npc import NPC
from .pathfinder import UNREACHABLE, Pathfinder
from .pc import PC
from .terrain import (
    DUNGEON_X,
    DUNGEON_Y,
    FILE_TYPE,
    MAX_DOWN,
    MAX_MONSTERS,
    MAX_ROOMS,
    MAX_UP,
    MIN_DOWN,
    MIN_ROOMS,
    MIN_UP,
    ROOM_MAX_X,
    ROOM_MAX_Y,
    ROOM_MIN_X,
    ROOM_MIN_Y,
    Color,
    Terrain,
)

IMMUTABLE_HARDNESS = 255
OBJECTS_PER_LEVEL = 10
MIN_MONSTER_DISTANCE = 3


@dataclass(frozen=True)
class Room:
    """A rectangle of floor; (x, y) is its top-left cell."""

    x: int
    y: int
    width: int
    height: int

    def cells(self):
        """Yield every (x, y) inside the room."""
        for r in range(self.y, self.y + self.height):
            for c in range(self.x, self.x + self.width):
                yield c, r


@dataclass(frozen=True)
class Stair:
    """A staircase; ``direction`` is 'u' or 'd'."""

    x: int
    y: int
    direction: str


def _eligible(template: Any) -> bool:
    return (
        template.valid
        and template.rarity > 0
        and not (template.unique and template.num_generated != 0)
    )


class Dungeon:
    """One level of the dungeon and everything on it."""

    file_type = FILE_TYPE

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.file_version = 0
        self.file_size = 0
        self.message = ""
        self.hardness = [[0] * DUNGEON_X for _ in range(DUNGEON_Y)]
        self.map = [[Terrain.WALL] * DUNGEON_X for _ in range(DUNGEON_Y)]
        self.seen = [[Terrain.WALL] * DUNGEON_X for _ in range(DUNGEON_Y)]
        for r in range(DUNGEON_Y):
            for c in range(DUNGEON_X):
                if r in (0, DUNGEON_Y - 1) or c in (0, DUNGEON_X - 1):
                    self.map[r][c] = Terrain.IMMUTABLE
                    self.seen[r][c] = Terrain.IMMUTABLE
                    self.hardness[r][c] = IMMUTABLE_HARDNESS
        self.rooms: list[Room] = []
        self.up_stairs: list[Stair] = []
        self.down_stairs: list[Stair] = []
        self.nummon = 0
        self.player = PC(0, 0)
        self.characters: list[list[Any]] = [[None] * DUNGEON_X for _ in range(DUNGEON_Y)]
        self.objects: list[list[Item | None]] = [[None] * DUNGEON_X for _ in range(DUNGEON_Y)]
        self.monster_templates: list[Any] = []
        self.object_templates: list[Any] = []
        self.floor_pathfinder: Pathfinder | None = None
        self.all_pathfinder: Pathfinder | None = None

    @property
    def num_rooms(self) -> int:
        return len(self.rooms)

    def clear(self) -> None:
        """Remove every character from the level."""
        for row in self.characters:
            row[:] = [None] * DUNGEON_X

    # Generation

    def _room_fits(self, room: Room) -> bool:
        bottom, right = room.y + room.height, room.x + room.width
        if bottom >= DUNGEON_Y or right >= DUNGEON_X:
            return False
        return all(
            0 < self.hardness[r][c] < IMMUTABLE_HARDNESS
            for r in range(room.y - 1, bottom + 1)
            for c in range(room.x - 1, right + 1)
        )

    def place_rooms(self) -> None:
        """Carve between MIN_ROOMS and MAX_ROOMS - 1 separated rooms."""
        rng = self.rng
        count = rng.randrange(MAX_ROOMS - MIN_ROOMS) + MIN_ROOMS
        self.rooms = []
        for _ in range(count):
            while True:
                y = rng.randrange(DUNGEON_Y - ROOM_MIN_Y) + 1
                x = rng.randrange(DUNGEON_X - ROOM_MIN_X) + 1
                width = rng.randrange(ROOM_MAX_X - ROOM_MIN_X) + ROOM_MIN_X
                height = rng.randrange(ROOM_MAX_Y - ROOM_MIN_Y) + ROOM_MIN_Y
                room = Room(x, y, width, height)
                if self._room_fits(room):
                    break
            for c, r in room.cells():
                self.map[r][c] = Terrain.FLOOR
                self.hardness[r][c] = 0
            self.rooms.append(room)

    def place_corridors(self) -> None:
        """Join each room to the next, the last back to the first."""
        for i, start in enumerate(self.rooms):
            end = self.rooms[(i + 1) % len(self.rooms)]
            r, c = start.y, start.x
            while True:
                if r < end.y:
                    r += 1
                elif r > end.y:
                    r -= 1
                elif c < end.x:
                    c += 1
                elif c > end.x:
                    c -= 1
                if self.hardness[r][c] != IMMUTABLE_HARDNESS and self.map[r][c] != Terrain.FLOOR:
                    self.map[r][c] = Terrain.CORRIDOR
                    self.hardness[r][c] = 0
                if r == end.y and c == end.x:
                    break

    def place_stairs(self) -> None:
        """Put up and down staircases in rooms, taking the rooms in turn."""
        rng = self.rng
        num_up = rng.randrange(MAX_UP) + MIN_UP
        num_down = rng.randrange(MAX_DOWN) + MIN_DOWN
        room_index = 0

        def place(direction: str, terrain: Terrain) -> Stair:
            nonlocal room_index
            room = self.rooms[room_index % len(self.rooms)]
            row = rng.randrange(room.height) + room.y
            col = rng.randrange(room.width) + room.x
            self.map[row][col] = terrain
            room_index += 1
            return Stair(col, row, direction)

        self.up_stairs = [place("u", Terrain.STAIR_UP) for _ in range(num_up)]
        self.down_stairs = [place("d", Terrain.STAIR_DOWN) for _ in range(num_down)]

    def _pick_template(self, templates: Sequence[Any], kind: str) -> Any:
        if not any(_eligible(t) for t in templates):
            raise ValueError(f"no {kind} template can be generated")
        while True:
            rarity_roll = self.rng.randrange(100)
            template = templates[self.rng.randrange(len(templates))]
            if rarity_roll < template.rarity and _eligible(template):
                return template

    def _monster_spot_ok(self, x: int, y: int) -> bool:
        return (
            self.characters[y][x] is None
            and abs(self.player.y - y) >= MIN_MONSTER_DISTANCE
            and abs(self.player.x - x) >= MIN_MONSTER_DISTANCE
        )

    def _random_room_cell(self) -> tuple[int, int]:
        room = self.rooms[self.rng.randrange(len(self.rooms))]
        x = room.x + self.rng.randrange(room.width)
        y = room.y + self.rng.randrange(room.height)
        return x, y

    def _reset_player(self, x: int, y: int) -> None:
        player = self.player
        player.is_pc = True
        player.alive = True
        player.color = Color.WHITE
        player.speed = 10
        player.move_time = 1000 // player.speed
        player.symbol = "@"
        player.x, player.y = x, y
        player.next_x, player.next_y = x, y

    def place_characters(self, queue: Any) -> None:
        """Put the player in the first room and monsters elsewhere, queueing them all."""
        self.clear()
        first = self.rooms[0]
        self._reset_player(first.x, first.y)
        self.characters[self.player.y][self.player.x] = self.player
        queue.insert(self.player)

        if not self.nummon:
            self.nummon = self.rng.randrange(MAX_MONSTERS - 1) + 1

        for _ in range(self.nummon):
            template = self._pick_template(self.monster_templates, "monster")
            if not any(
                self._monster_spot_ok(x, y) for room in self.rooms for x, y in room.cells()
            ):
                raise RuntimeError("no room left to place a monster")
            while True:
                x, y = self._random_room_cell()
                if self._monster_spot_ok(x, y):
                    break
            monster = NPC.from_template(template, x, y, self.rng)
            self.characters[y][x] = monster
            template.num_generated += 1
            queue.insert(monster)

        for template in self.monster_templates:
            template.num_generated = 0

    def place_objects(self) -> None:
        """Scatter OBJECTS_PER_LEVEL objects over the rooms."""
        for row in self.objects:
            row[:] = [None] * DUNGEON_X

        for _ in range(OBJECTS_PER_LEVEL):
            template = self._pick_template(self.object_templates, "object")
            if not any(
                self.objects[y][x] is None for room in self.rooms for x, y in room.cells()
            ):
                raise RuntimeError("no room left to place an object")
            while True:
                x, y = self._random_room_cell()
                if self.objects[y][x] is None:
                    break
            self.objects[y][x] = Item.from_template(template, x, y, self.rng)
            template.num_generated += 1

        for template in self.object_templates:
            template.num_generated = 0

    def generate(self) -> None:
        """Fill the interior with rock, then carve rooms, corridors and stairs."""
        for r in range(1, DUNGEON_Y - 1):
            for c in range(1, DUNGEON_X - 1):
                self.hardness[r][c] = self.rng.randrange(254) + 1
                self.map[r][c] = Terrain.WALL
                self.seen[r][c] = Terrain.UNKNOWN
        self.place_rooms()
        self.place_corridors()
        self.place_stairs()

    # Pathfinding

    def update_distances(self) -> None:
        """Recompute both distance maps from the player."""
        self.floor_pathfinder = Pathfinder(self.hardness)
        self.floor_pathfinder.dijkstra_floor(self.player.x, self.player.y)
        self.all_pathfinder = Pathfinder(self.hardness)
        self.all_pathfinder.dijkstra_all(self.player.x, self.player.y)

    def _render_costs(self, pathfinder: Pathfinder) -> str:
        lines = []
        for y in range(DUNGEON_Y):
            costs = (pathfinder.cost(x, y) for x in range(DUNGEON_X))
            lines.append("".join(" " if c == UNREACHABLE else str(c % 10) for c in costs))
        return "\n".join(lines) + "\n"

    def render_pc_cost_floor(self) -> str:
        """Last digit of each open cell's distance from the player, as text."""
        if self.floor_pathfinder is None:
            self.update_distances()
        return self._render_costs(self.floor_pathfinder)

    def render_pc_cost_all(self) -> str:
        """Last digit of each cell's tunnelling distance from the player, as text."""
        if self.all_pathfinder is None:
            self.update_distances()
        return self._render_costs(self.all_pathfinder)