import random

import pytest

from rlgdungeon.dungeon import Dungeon, Room, Stair
from rlgdungeon.heap import FibonacciHeap
from rlgdungeon.monster_template import MonsterTemplate
from rlgdungeon.object_template import ObjectTemplate
from rlgdungeon.pathfinder import UNREACHABLE
from rlgdungeon.terrain import (
    DUNGEON_X,
    DUNGEON_Y,
    MAX_DOWN,
    MAX_ROOMS,
    MAX_UP,
    MIN_ROOMS,
    Terrain,
)


def _monster(name="Orc", abilities="SMART", symbol="o", rarity="100", index=0):
    return MonsterTemplate.from_fields(
        name, "desc", "RED", "10+0d1", abilities, "5+0d1", "0+1d4", symbol, rarity, index
    )


def _object(name="Sword", rarity="100"):
    return ObjectTemplate.from_fields(
        name, "desc", "WEAPON", "WHITE", "0+0d1", "1+1d4", "0+0d1", "0+0d1",
        "3+0d1", "0+0d1", "0+0d1", "10+0d1", "FALSE", rarity,
    )


@pytest.fixture
def dungeon():
    d = Dungeon(random.Random(1234))
    d.generate()
    return d


def _queue():
    return FibonacciHeap(key=lambda c: c.move_time)


def test_new_dungeon_has_immutable_border():
    d = Dungeon(random.Random(0))
    for c in range(DUNGEON_X):
        assert d.hardness[0][c] == 255
        assert d.map[DUNGEON_Y - 1][c] == Terrain.IMMUTABLE
    for r in range(DUNGEON_Y):
        assert d.hardness[r][0] == 255
        assert d.map[r][DUNGEON_X - 1] == Terrain.IMMUTABLE


def test_generate_room_count_and_contents(dungeon):
    assert MIN_ROOMS <= dungeon.num_rooms < MAX_ROOMS
    for room in dungeon.rooms:
        assert room.x >= 1 and room.y >= 1
        assert room.x + room.width < DUNGEON_X
        assert room.y + room.height < DUNGEON_Y
        for x, y in room.cells():
            assert dungeon.hardness[y][x] == 0
            assert dungeon.map[y][x] in (Terrain.FLOOR, Terrain.STAIR_UP, Terrain.STAIR_DOWN)


def test_rooms_are_separated(dungeon):
    rooms = dungeon.rooms
    assert len(rooms) >= MIN_ROOMS
    overlaps = []
    for i, a in enumerate(rooms):
        cells_a = set(a.cells())
        for b in rooms[i + 1:]:
            margin = {
                (c, r)
                for r in range(b.y - 1, b.y + b.height + 1)
                for c in range(b.x - 1, b.x + b.width + 1)
            }
            if cells_a & margin:
                overlaps.append((a, b))
    assert overlaps == []


def test_stairs_are_inside_rooms(dungeon):
    assert 1 <= len(dungeon.up_stairs) <= MAX_UP
    assert 1 <= len(dungeon.down_stairs) <= MAX_DOWN
    room_cells = {cell for room in dungeon.rooms for cell in room.cells()}
    for stair in dungeon.up_stairs + dungeon.down_stairs:
        assert (stair.x, stair.y) in room_cells
    for stair in dungeon.down_stairs:
        assert stair.direction == "d"
        assert dungeon.map[stair.y][stair.x] == Terrain.STAIR_DOWN


def test_border_stays_immutable_after_generate(dungeon):
    assert all(h == 255 for h in dungeon.hardness[0])
    assert all(row[0] == 255 for row in dungeon.hardness)


def test_all_rooms_reachable_over_floor(dungeon):
    first = dungeon.rooms[0]
    dungeon.player.x, dungeon.player.y = first.x, first.y
    dungeon.update_distances()
    for room in dungeon.rooms:
        assert dungeon.floor_pathfinder.cost(room.x, room.y) < UNREACHABLE
    assert dungeon.floor_pathfinder.cost(first.x, first.y) == 0


def test_render_pc_cost_floor(dungeon):
    first = dungeon.rooms[0]
    dungeon.player.x, dungeon.player.y = first.x, first.y
    dungeon.update_distances()
    lines = dungeon.render_pc_cost_floor().splitlines()
    assert len(lines) == DUNGEON_Y
    assert all(len(line) == DUNGEON_X for line in lines)
    assert lines[first.y][first.x] == "0"
    assert lines[0] == " " * DUNGEON_X


def test_render_pc_cost_all_covers_rock(dungeon):
    first = dungeon.rooms[0]
    dungeon.player.x, dungeon.player.y = first.x, first.y
    dungeon.update_distances()
    lines = dungeon.render_pc_cost_all().splitlines()
    assert lines[0] == " " * DUNGEON_X
    assert all(ch.isdigit() for line in lines[1:-1] for ch in line[1:-1])


def test_place_characters(dungeon):
    dungeon.monster_templates = [_monster()]
    dungeon.nummon = 5
    queue = _queue()
    dungeon.place_characters(queue)
    assert len(queue) == 6
    first = dungeon.rooms[0]
    assert (dungeon.player.x, dungeon.player.y) == (first.x, first.y)
    assert dungeon.characters[first.y][first.x] is dungeon.player
    monsters = [c for row in dungeon.characters for c in row if c is not None and not c.is_pc]
    assert len(monsters) == 5
    for m in monsters:
        assert abs(m.x - first.x) >= 3 and abs(m.y - first.y) >= 3
        assert dungeon.characters[m.y][m.x] is m
    assert dungeon.monster_templates[0].num_generated == 0


def test_place_characters_unique_once(dungeon):
    boss = _monster("Boss", "SMART UNIQ", "B", index=0)
    orc = _monster("Orc", index=1)
    dungeon.monster_templates = [boss, orc]
    dungeon.nummon = 8
    dungeon.place_characters(_queue())
    symbols = [c.symbol for row in dungeon.characters for c in row if c is not None]
    assert symbols.count("B") <= 1
    assert boss.num_generated == 0


def test_place_characters_without_templates(dungeon):
    dungeon.nummon = 3
    with pytest.raises(ValueError):
        dungeon.place_characters(_queue())


def test_place_objects(dungeon):
    dungeon.object_templates = [_object()]
    dungeon.place_objects()
    items = [o for row in dungeon.objects for o in row if o is not None]
    assert len(items) == 10
    room_cells = {cell for room in dungeon.rooms for cell in room.cells()}
    for item in items:
        assert (item.x, item.y) in room_cells
        assert item.symbol == "|"
    assert dungeon.object_templates[0].num_generated == 0


def test_clear_removes_characters(dungeon):
    dungeon.monster_templates = [_monster()]
    dungeon.nummon = 2
    dungeon.place_characters(_queue())
    dungeon.clear()
    assert all(c is None for row in dungeon.characters for c in row)


def test_room_and_stair_values():
    room = Room(2, 3, 2, 1)
    assert list(room.cells()) == [(2, 3), (3, 3)]
    assert Stair(1, 2, "u") == Stair(1, 2, "u")