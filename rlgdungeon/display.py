"""Drawing the dungeon and the interactive screens on a curses-like window."""

from __future__ import annotations

from typing import Any, Callable, Iterator, Sequence

from .monster_template import Ability, MonsterTemplate
from .object_template import ObjectTemplate
from .terrain import DUNGEON_X, DUNGEON_Y, Color, DisplayCommand, glyph

KEY_DOWN = 258
KEY_UP = 259
ENTER = 10
ESCAPE = 27

MONSTER_PAGE = 16
VIEW_RADIUS = 3
LIST_COLUMN = 25
LIST_FIRST_ROW = 5
TEMPLATE_HINT = "Press enter to proceed to game, use arrow keys to navigate templates"
UNKNOWN_ITEM_SYMBOL = "*"

_ABILITY_NAMES = (
    (Ability.SMART, "SMART"),
    (Ability.TELEPATHIC, "TELEPATHIC"),
    (Ability.TUNNELING, "TUNNELING"),
    (Ability.ERRATIC, "ERRATIC"),
    (Ability.PASS, "PASS"),
    (Ability.DESTROY, "DESTROY"),
    (Ability.PICKUP, "PICKUP"),
    (Ability.UNIQUE, "UNIQUE"),
    (Ability.BOSS, "BOSS"),
)


def _occupant(dungeon: Any, r: int, c: int) -> tuple[str, Any] | None:
    character = dungeon.characters[r][c]
    if character is not None:
        return character.symbol, character.color
    item = dungeon.objects[r][c]
    if item is not None:
        return item.symbol or UNKNOWN_ITEM_SYMBOL, item.color
    return None


def _all_cells(dungeon: Any) -> Iterator[tuple[int, int, str, Any]]:
    for r in range(DUNGEON_Y):
        for c in range(DUNGEON_X):
            shown = _occupant(dungeon, r, c)
            if shown is None:
                shown = glyph(dungeon.map[r][c]), None
            yield r, c, shown[0], shown[1]


def _in_view(player: Any, r: int, c: int) -> bool:
    return (
        player.y - VIEW_RADIUS < r < player.y + VIEW_RADIUS
        and player.x - VIEW_RADIUS < c < player.x + VIEW_RADIUS
    )


def _map_cells(dungeon: Any) -> Iterator[tuple[int, int, str, Any]]:
    """Cells as the player remembers them; cells near the player become seen."""
    player = dungeon.player
    for r in range(DUNGEON_Y):
        for c in range(DUNGEON_X):
            shown = None
            if _in_view(player, r, c):
                dungeon.seen[r][c] = dungeon.map[r][c]
                shown = _occupant(dungeon, r, c)
            if shown is None:
                shown = glyph(dungeon.seen[r][c]), None
            yield r, c, shown[0], shown[1]


def _rows(cells: Iterator[tuple[int, int, str, Any]]) -> list[str]:
    rows = [[" "] * DUNGEON_X for _ in range(DUNGEON_Y)]
    for r, c, symbol, _ in cells:
        rows[r][c] = symbol
    return ["".join(row) for row in rows]


def render_all_rows(dungeon: Any) -> list[str]:
    """Return the whole level, one string per row, with every character and object."""
    return _rows(_all_cells(dungeon))


def render_map_rows(dungeon: Any) -> list[str]:
    """Return the level as the player knows it, marking cells near the player as seen."""
    return _rows(_map_cells(dungeon))


def describe_monster(player: Any, monster: Any) -> str:
    """Say where ``monster`` is relative to ``player``."""
    dx = player.x - monster.x
    dy = player.y - monster.y
    dir_x = "west" if dx > 0 else "east"
    dir_y = "north" if dy > 0 else "south"
    return f"{monster.symbol}, {abs(dx)} {dir_x} and {abs(dy)} {dir_y}"


def monster_template_lines(template: MonsterTemplate) -> list[str]:
    """Return the lines shown for a monster template."""
    abilities = Ability(template.abilities)
    return [
        template.name,
        *template.description.split("\n"),
        "".join(f"{Color(color).name} " for color in template.colors),
        str(template.speed),
        "".join(f"{name} " for flag, name in _ABILITY_NAMES if flag in abilities),
        str(template.hitpoints),
        str(template.attack_damage),
        template.symbol,
        str(template.rarity),
    ]


def object_template_lines(template: ObjectTemplate) -> list[str]:
    """Return the lines shown for an object template."""
    return [
        template.name,
        *template.description.split("\n"),
        template.type,
        Color(template.color).name if template.color is not None else "",
        str(template.hit_bonus),
        str(template.damage_bonus),
        str(template.dodge_bonus),
        str(template.defense_bonus),
        str(template.weight),
        str(template.speed_bonus),
        str(template.attribute),
        str(template.value),
        template.artifact,
        template.symbol or "",
        str(template.rarity),
    ]


def _key(code: int) -> str:
    return chr(code) if 0 <= code < 0x110000 else ""


class Display:
    """Draws onto ``screen``, an object with addstr, addch, getch and clear."""

    def __init__(self, screen: Any) -> None:
        self.screen = screen
        self.color_attr: Callable[[int], int] = lambda color: 0

    def _attr(self, color: Any) -> int:
        return 0 if color is None else self.color_attr(int(color))

    def _draw(self, cells: Iterator[tuple[int, int, str, Any]]) -> None:
        for r, c, symbol, color in cells:
            self.screen.addch(r + 1, c, symbol, self._attr(color))

    def _write_block(self, row: int, lines: Sequence[str]) -> None:
        height = self.screen.getmaxyx()[0] if hasattr(self.screen, "getmaxyx") else None
        for offset, line in enumerate(lines):
            if height is not None and row + offset >= height:
                break
            self.screen.addstr(row + offset, 0, line)

    def show(self, command: DisplayCommand | int, dungeon: Any) -> None:
        """Write the dungeon's message, then draw the screen ``command`` names."""
        self.screen.addstr(0, 0, dungeon.message)
        handlers = {
            DisplayCommand.ALL: self.show_all,
            DisplayCommand.MAP: self.show_map,
            DisplayCommand.MONSTERS: self.show_monsters,
            DisplayCommand.TELEPORT: self.teleport,
        }
        handler = handlers.get(DisplayCommand(command))
        handler(dungeon)

    def show_all(self, dungeon: Any) -> None:
        """Draw the whole level."""
        self._draw(_all_cells(dungeon))

    def show_map(self, dungeon: Any) -> None:
        """Draw the level as the player knows it."""
        self._draw(_map_cells(dungeon))

    def show_monsters(self, dungeon: Any) -> None:
        """List the monsters relative to the player until Escape is pressed."""
        monsters = [
            ch for row in dungeon.characters for ch in row
            if ch is not None and ch.symbol != "@"
        ]
        rows_available = DUNGEON_Y + 1 - LIST_FIRST_ROW
        start = 0
        cmd = ord("m")
        screen = self.screen
        while True:
            screen.addstr(1, LIST_COLUMN, "-" * 32)
            screen.addstr(2, LIST_COLUMN, "|         Monster List         |")
            screen.addstr(3, LIST_COLUMN, "-" * 32)
            screen.addstr(4, LIST_COLUMN, f"       Live Monsters = {dungeon.nummon}       ")
            if len(monsters) > MONSTER_PAGE:
                if cmd == KEY_UP and start > 0:
                    start -= MONSTER_PAGE
                elif cmd == KEY_DOWN and len(monsters) - start >= MONSTER_PAGE:
                    start += MONSTER_PAGE
            page = monsters[start:start + rows_available]
            for offset, monster in enumerate(page):
                text = f" {describe_monster(dungeon.player, monster)}      "
                screen.addstr(LIST_FIRST_ROW + offset, LIST_COLUMN, text)
            for r in range(LIST_FIRST_ROW + len(page), DUNGEON_Y + 1):
                screen.addstr(r, LIST_COLUMN, " " * 32)
            cmd = screen.getch()
            if cmd == ESCAPE:
                return

    def teleport(self, dungeon: Any) -> None:
        """Move a cursor with the movement keys; 't' teleports there, 'r' somewhere random."""
        player = dungeon.player
        tx, ty = player.x, player.y
        while True:
            self.show_all(dungeon)
            self.screen.addch(ty + 1, tx, "*")
            key = _key(self.screen.getch())
            if key == "r":
                while True:
                    ty = dungeon.rng.randrange(DUNGEON_Y - 1) + 1
                    tx = dungeon.rng.randrange(DUNGEON_X - 1) + 1
                    if dungeon.hardness[ty][tx] == 0:
                        break
            elif key in ("7", "y"):
                if tx - 1 > 0 and ty - 1 > 0:
                    tx, ty = tx - 1, ty - 1
            elif key in ("8", "k"):
                if ty - 1 > 0:
                    ty -= 1
            elif key in ("9", "u"):
                if tx + 1 < DUNGEON_X and ty - 1 > 0:
                    tx, ty = tx + 1, ty - 1
            elif key in ("6", "l"):
                if tx + 1 < DUNGEON_X:
                    tx += 1
            elif key in ("3", "n"):
                if tx + 1 < DUNGEON_X and ty + 1 < DUNGEON_Y:
                    tx, ty = tx + 1, ty + 1
            elif key in ("2", "j"):
                if ty + 1 < DUNGEON_Y:
                    ty += 1
            elif key in ("1", "b"):
                if tx - 1 > 0 and ty + 1 < DUNGEON_Y:
                    tx, ty = tx - 1, ty + 1
            elif key in ("4", "h"):
                if tx - 1 > 0:
                    tx -= 1
            if key in ("t", "r"):
                break
        dungeon.characters[player.y][player.x] = None
        dungeon.characters[ty][tx] = player
        player.x, player.y = tx, ty

    def _browse(self, templates: Sequence[Any], title: str, describe: Callable[[Any], list[str]]) -> None:
        if not templates:
            raise ValueError(f"no {title.lower()} to show")
        index = 0
        while True:
            self.screen.clear()
            self._write_block(0, [TEMPLATE_HINT, "", title, "", *describe(templates[index])])
            cmd = self.screen.getch()
            if cmd == KEY_UP and index > 0:
                index -= 1
            elif cmd == KEY_DOWN and index < len(templates) - 1:
                index += 1
            if cmd == ENTER:
                return

    def show_monster_templates(self, templates: Sequence[MonsterTemplate]) -> None:
        """Page through monster templates until Enter is pressed."""
        self._browse(templates, "MONSTER TEMPLATES", monster_template_lines)

    def show_object_templates(self, templates: Sequence[ObjectTemplate]) -> None:
        """Page through object templates until Enter is pressed."""
        self._browse(templates, "OBJECT TEMPLATES", object_template_lines)