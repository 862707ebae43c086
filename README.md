# rlgdungeon

A small roguelike that runs in the terminal. Each level is a freshly
generated dungeon of rooms joined by corridors, with up and down
staircases, objects lying on the floor and monsters that hunt you.
Monsters and objects come from plain-text description files. A level can
be saved to a binary dungeon file and loaded back later.

The game screen uses the standard `curses` module, so it needs a
terminal on a system where `curses` is available (Linux, macOS, other
POSIX systems).

## Installing

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Playing

```
rlgdungeon
```

Before starting, the game reads `~/.rlg327/monster_desc.txt` and
`~/.rlg327/object_desc.txt`. If either is missing or malformed, it prints
an error and exits with status 1.

Options:

| Option            | Effect                                                        |
|-------------------|---------------------------------------------------------------|
| `--load`, `-l`    | Load the dungeon from `~/.rlg327/dungeon` instead of generating one |
| `--save`, `-s`    | Save the dungeon to `~/.rlg327/dungeon`                       |
| `--pathfind`      | Print the player's distance maps (floor-only, then tunnelling) before the game starts |
| `--nummon N`      | Place `N` monsters instead of a random number (1 to 49)       |
| `--parse`         | Browse the loaded monster and object templates before playing (arrow keys to move, Enter to go on) |

Unknown arguments are ignored.

### Keys

| Key              | Action                               |
|------------------|--------------------------------------|
| `y` / `7`        | move up-left (steps onto the cell without attacking) |
| `k` / `8`        | move up                              |
| `u` / `9`        | move up-right                        |
| `l` / `6`        | move right                           |
| `n` / `3`        | move down-right                      |
| `j` / `2`        | move down                            |
| `b` / `1`        | checks the down-left cell, then moves straight down |
| `h` / `4`        | move left                            |
| `>`              | take an up staircase (generates a new level) |
| `<`              | take a down staircase (generates a new level) |
| `5`, `.`, space  | rest for a turn                      |
| `m`              | monster list (arrow keys scroll past 16 monsters, Esc closes) |
| `f`              | reveal the whole dungeon (`f` again to close) |
| `t`              | teleport mode (move the cursor with the movement keys, `t` to jump, `r` for a random open cell) |
| `Q`              | quit                                 |

Walking into rock leaves you in place with a message. Moving into a
monster kills it; a monster that steps onto you ends the game. Clear the
level of monsters to win. Only cells within two steps of you are revealed
on the map as you explore.

Monsters move according to their abilities: erratic monsters wander,
smart ones follow the shortest open path to you, and tunnelling ones dig
through rock toward you.

## Description files

Monster files begin with the line `RLG327 MONSTER DESCRIPTION 1` and hold
blocks like this:

```
BEGIN MONSTER
NAME Cave Rat
DESC
A large, twitchy rat.
.
COLOR BLACK
SPEED 7+1d4
ABIL ERRATIC
HP 4+1d6
DAM 0+1d4
SYMB r
RRTY 80
END
```

Object files begin with `RLG327 OBJECT DESCRIPTION 1` and use the keys
`NAME`, `DESC`, `TYPE`, `COLOR`, `HIT`, `DAM`, `DODGE`, `DEF`, `WEIGHT`,
`SPEED`, `ATTR`, `VAL`, `ART` and `RRTY` between `BEGIN OBJECT` and `END`.
Each key must appear exactly once in a block, or the block is skipped.
Dice are written `base+countdsides`, for example `10+2d6`. `RRTY` is a
percentage chance used when picking which templates to place.

## Using the library

The pieces can be used on their own:

```python
import random

from rlgdungeon.dice import Dice
from rlgdungeon.dungeon import Dungeon
from rlgdungeon.descriptions import parse_monster_descriptions

dice = Dice.parse("10+2d6")
print(dice, dice.roll(random.Random(1)))

dungeon = Dungeon(random.Random(42))
dungeon.generate()
dungeon.update_distances()
print(dungeon.render_pc_cost_floor())
```

- `rlgdungeon.dungeon_file.load_dungeon` and `save_dungeon` read and
  write the binary dungeon file.
- `rlgdungeon.descriptions.parse_monster_descriptions` and
  `parse_object_descriptions` build templates from lines of text;
  `load_monster_templates` and `load_object_templates` read files.
- `rlgdungeon.display.render_all_rows` and `render_map_rows` return a
  level as a list of strings, without needing a terminal.
- `rlgdungeon.heap.FibonacciHeap` is the priority queue behind both the
  turn order and the pathfinder in `rlgdungeon.pathfinder`.

## What it does not do

Objects are rolled from their templates and drawn on the map, but they
cannot be picked up, carried or used, and there is no inventory.
Hitpoints and attack damage are rolled for monsters but never used:
every attack kills outright.