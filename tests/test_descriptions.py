import pytest

from rlgdungeon.descriptions import (
    DescriptionError,
    default_path,
    load_monster_templates,
    load_object_templates,
    parse_monster_descriptions,
    parse_object_descriptions,
)
from rlgdungeon.dice import Dice
from rlgdungeon.monster_template import Ability
from rlgdungeon.terrain import Color

MONSTERS = """RLG327 MONSTER DESCRIPTION 1

BEGIN MONSTER
NAME Junior Barbarian
SYMB p
COLOR BLUE
DESC
This is a junior barbarian.
He is cute.
.
SPEED 7+1d4
DAM 0+1d4
HP 12+2d6
RRTY 100
ABIL SMART TELE
END

BEGIN MONSTER
NAME Slime
SYMB s
COLOR GREEN YELLOW
DESC
Sticky.
.
SPEED 5+0d1
DAM 1+1d2
HP 3+1d3
RRTY 40
ABIL ERRATIC UNIQ
END
"""

OBJECTS = """RLG327 OBJECT DESCRIPTION 1

BEGIN OBJECT
NAME Long Sword
TYPE WEAPON
COLOR WHITE
WEIGHT 10+0d1
HIT 0+0d1
DAM 2+2d6
ATTR 0+0d1
VAL 100+0d1
DODGE 0+0d1
DEF 0+0d1
SPEED 0+0d1
DESC
A sharp blade.
.
RRTY 80
ART TRUE
END
"""


def test_parse_monsters():
    templates = parse_monster_descriptions(MONSTERS.splitlines(keepends=True))
    assert [t.name for t in templates] == ["Junior Barbarian", "Slime"]
    first, second = templates
    assert first.description == "This is a junior barbarian.\nHe is cute."
    assert first.colors == [Color.BLUE]
    assert first.speed == Dice(7, 1, 4)
    assert first.abilities == Ability.SMART | Ability.TELEPATHIC
    assert first.symbol == "p"
    assert first.rarity == 100
    assert (first.index, second.index) == (0, 1)
    assert second.colors == [Color.GREEN, Color.YELLOW]
    assert second.unique is True


def test_bad_header():
    with pytest.raises(DescriptionError):
        parse_monster_descriptions(["RLG327 MONSTER DESCRIPTION 2\n"])


def test_empty_input():
    with pytest.raises(DescriptionError):
        parse_object_descriptions([])


def test_missing_field_drops_block():
    text = MONSTERS.replace("RRTY 100\n", "")
    templates = parse_monster_descriptions(text.splitlines())
    assert [t.name for t in templates] == ["Slime"]
    assert templates[0].index == 0


def test_repeated_field_drops_block():
    text = MONSTERS.replace("SYMB p\n", "SYMB p\nSYMB q\n")
    templates = parse_monster_descriptions(text.splitlines())
    assert [t.name for t in templates] == ["Slime"]


def test_line_after_end_is_consumed():
    text = MONSTERS.replace("END\n\nBEGIN MONSTER\nNAME Slime", "END\nBEGIN MONSTER\nNAME Slime")
    templates = parse_monster_descriptions(text.splitlines())
    assert [t.name for t in templates] == ["Junior Barbarian"]


def test_unterminated_description():
    lines = ["RLG327 MONSTER DESCRIPTION 1", "BEGIN MONSTER", "DESC", "never ends"]
    with pytest.raises(DescriptionError):
        parse_monster_descriptions(lines)


def test_parse_objects():
    templates = parse_object_descriptions(OBJECTS.splitlines())
    assert len(templates) == 1
    sword = templates[0]
    assert sword.name == "Long Sword"
    assert sword.symbol == "|"
    assert sword.color == Color.WHITE
    assert sword.damage_bonus == Dice(2, 2, 6)
    assert sword.unique is True
    assert sword.description == "A sharp blade."
    assert sword.rarity == 80


def test_load_from_files(tmp_path):
    monsters = tmp_path / "m.txt"
    objects = tmp_path / "o.txt"
    monsters.write_text(MONSTERS, encoding="utf-8")
    objects.write_text(OBJECTS, encoding="utf-8")
    assert [t.symbol for t in load_monster_templates(monsters)] == ["p", "s"]
    assert [t.name for t in load_object_templates(objects)] == ["Long Sword"]


def test_default_path_uses_home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert default_path("monster_desc.txt") == tmp_path / ".rlg327" / "monster_desc.txt"


def test_load_default_location(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    (tmp_path / ".rlg327").mkdir()
    (tmp_path / ".rlg327" / "monster_desc.txt").write_text(MONSTERS, encoding="utf-8")
    assert len(load_monster_templates()) == 2
    with pytest.raises(OSError):
        load_object_templates()