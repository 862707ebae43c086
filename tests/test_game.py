import random

import pytest

from rlgdungeon.dice import Dice
from rlgdungeon.display import ESCAPE, Display
from rlgdungeon.dungeon import Dungeon, Room
from rlgdungeon.game import GameResult, main, parse_args, play_game
from rlgdungeon.monster_template import Ability, MonsterTemplate
from rlgdungeon.object_template import ObjectTemplate
from rlgdungeon.pc import REST_MESSAGE
from rlgdungeon.terrain import DUNGEON_X, DUNGEON_Y, Color, Terrain


class FakeScreen:
    def __init__(self, keys=()):
        self.keys = list(keys)
        self.cells = {}
        self.history = []

    def addstr(self, y, x, text, attr=0):
        self.history.append(text)
        col = x
        for ch in text:
            if ch == "\n":
                y += 1
                col = 0
                continue
            self.cells[(y, col)] = ch
            col += 1

    def addch(self, y, x, ch, attr=0):
        self.cells[(y, x)] = ch

    def getch(self):
        if not self.keys:
            raise RuntimeError("out of keys")
        key = self.keys.pop(0)
        return ord(key) if isinstance(key, str) else key

    def clear(self):
        self.cells.clear()

    def text(self):
        return "\n".join(
            "".join(self.cells.get((y, c), " ") for c in range(100)) for y in range(40)
        )


def make_dungeon():
    d = Dungeon(rng=random.Random(7))
    for r in range(1, DUNGEON_Y - 1):
        for c in range(1, DUNGEON_X - 1):
            d.hardness[r][c] = 100
    d.rooms = [Room(5, 5, 3, 3), Room(2, 2, 1, 1)]
    for room in d.rooms:
        for c, r in room.cells():
            d.hardness[r][c] = 0
            d.map[r][c] = Terrain.FLOOR
    d.monster_templates = [
        MonsterTemplate(
            name="stalker", description="", colors=[Color.RED], speed=Dice(7, 0, 1),
            abilities=Ability.SMART, symbol="s", rarity=100,
        )
    ]
    d.object_templates = [
        ObjectTemplate(name="coin", description="", type="GOLD", color=Color.YELLOW,
                       symbol="$", rarity=100)
    ]
    d.nummon = 1
    return d


def test_parse_args_switches():
    options = parse_args(["-l", "--nummon", "5", "--pathfind", "--other"])
    assert options.load is True
    assert options.save is False
    assert options.pathfind is True
    assert options.nummon == 5


def test_parse_args_nummon_not_a_number_is_zero():
    assert parse_args(["--nummon", "abc"]).nummon == 0
    assert parse_args([]).nummon is None


def test_parse_args_nummon_missing_value():
    with pytest.raises(SystemExit):
        parse_args(["--nummon"])


def test_quit():
    screen = FakeScreen(["Q", " "])
    assert play_game(make_dungeon(), Display(screen)) is GameResult.QUIT
    assert "You're a quitter!" in screen.text()


def test_player_dies_when_resting():
    d = make_dungeon()
    screen = FakeScreen([".", ".", ".", ".", " "])
    assert play_game(d, Display(screen)) is GameResult.LOST
    assert d.player.alive is False
    assert "better luck next time bucko" in screen.text()
    assert REST_MESSAGE in screen.history


def test_player_wins_by_attacking():
    d = make_dungeon()
    screen = FakeScreen(["l", ".", ".", ".", "h", " "])
    assert play_game(d, Display(screen)) is GameResult.WON
    assert d.nummon == 0
    assert d.player.alive is True
    assert "Way 2 Go" in screen.text()
    assert screen.keys == []


def test_reveal_and_monster_list_do_not_spend_turn():
    d = make_dungeon()
    screen = FakeScreen(["f", "x", "f", "m", ESCAPE, "Q", " "])
    assert play_game(d, Display(screen)) is GameResult.QUIT
    assert d.message == ""
    assert screen.keys == []


def test_main_without_descriptions_fails(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert main(["--save", "--pathfind"]) == 1
    assert (tmp_path / ".rlg327" / "dungeon").is_file()
    out = capsys.readouterr()
    lines = out.out.splitlines()
    assert len(lines) == 2 * DUNGEON_Y
    assert all(len(line) == DUNGEON_X for line in lines)
    assert "descriptions" in out.err


def test_main_load_missing_file_fails(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert main(["--load"]) == 1
    assert "dungeon file" in capsys.readouterr().err