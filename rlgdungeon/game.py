"""The game loop and the command-line entry point."""

from __future__ import annotations

import argparse
import enum
import re
import sys
from operator import attrgetter
from typing import Any, Sequence

from .descriptions import load_monster_templates, load_object_templates
from .display import ESCAPE, Display
from .dungeon import Dungeon
from .dungeon_file import load_dungeon, save_dungeon
from .heap import FibonacciHeap
from .terrain import Color, DisplayCommand

QUIT_MESSAGE = "You're a quitter!                         "
REVEAL_MESSAGE = "Revealing dungeon.... (Press f to exit)"
TELEPORT_MESSAGE = "Entering teleport mode... (Press t to teleport, r for random)"

WIN_SCREEN = (
    "           .__    _\n"
    "           @ V; .Z~M\n"
    "          || :|:@  d\n"
    "          d' d\\@  jf\n"
    "   .*\\   :P  #P  |P\n"
    "   M `|  W  .@   Z\n"
    "   | .b :!  d'  W'\n"
    "   |  V W   #  .W**=m_\n"
    "    |  !||   @  W'_   ~V;\n"
    "    ||  M| _ Nm4| YmjL|PN               Way 2 Go\n"
    "     #   W#~    YN_W'YL#W#b\n"
    "     |;  +       |f   `#'#8L\n"
    "     W        ._#L_  .#,`'||\n"
    "     |,     .WMP' ~Mm#`Nm;d|\n"
    "     `|       W   Mmd#; .df\n"
    "      |       M    `M#@-W'\n"
    "      W       !b     WtZ'\n"
    "      M        V;    |P\n"
    "      ||        b   .@\n"
    "       D        Y| .W'\n"
    "      j|         'j@'\n"
    "     jP'  L_mq=-_@'\n"
    "   .Z!         jf\n"
    "  mf         .W'\n"
    "            .@'\n"
    "           .@'\n"
    "          .@\n"
    "         :@\n"
)

LOSS_SCREEN = (
    "                           ___________________________\n"
    "               ...        /                           \\\n"
    "             ;::::;      /  oof thats some hot tea ... \\\n"
    "           ;::::; :;     \\ better luck next time bucko /\n"
    "         ;:::::'   :;     \\___________________________/\n"
    "        ;:::::;     ;.     /\n"
    "       ,:::::'       ;    /      OOO\\\n"
    "       ::::::;       ;   /      OOOOO\\\n"
    "       ;:::::;       ;         OOOOOOOO\n"
    "      ,;::::::;     ;'         / OOOOOOO\n"
    "    ;:::::::::`. ,,,;.        /  / DOOOOOO\n"
    "  .';:::::::::::::::::;,     /  /     DOOOO\n"
    " ,::::::;::::::;;;;::::;,   /  /        DOOO\n"
    ";`::::::`'::::::;;;::::: ,#/  /          DOOO\n"
    ":`:::::::`;::::::;;::: ;::#  /            DOOO\n"
    "::`:::::::`;:::::::: ;::::# /              DOO\n"
    "`:`:::::::`;:::::: ;::::::#/               DOO\n"
    " :::`:::::::`;; ;:::::::::##                OO\n"
    " ::::`:::::::`;::::::::;:::#                OO\n"
    " `:::::`::::::::::::;'`:;::#                O\n"
    "  `:::::`::::::::;' /  / `:#\n"
    "   ::::::`:::::;'  /  /   `#\n"
)

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


class GameResult(enum.Enum):
    """How a game ended."""

    QUIT = "quit"
    LOST = "lost"
    WON = "won"


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    """Read the command-line switches; unknown arguments are ignored."""
    parser = argparse.ArgumentParser(prog="rlgdungeon", allow_abbrev=False)
    parser.add_argument("-l", "--load", action="store_true", help="load the saved dungeon")
    parser.add_argument("-s", "--save", action="store_true", help="save the dungeon")
    parser.add_argument("--pathfind", action="store_true", help="print distance maps")
    parser.add_argument("--parse", action="store_true", help="browse the templates first")
    parser.add_argument("--nummon", type=_atoi, default=None, help="number of monsters")
    options, _ = parser.parse_known_args(argv)
    return options


def _show_banner(screen: Any, row: int, text: str) -> None:
    height = screen.getmaxyx()[0] if hasattr(screen, "getmaxyx") else None
    for offset, line in enumerate(text.splitlines()):
        if height is not None and row + offset >= height:
            break
        screen.addstr(row + offset, 0, line)


def _key(code: int) -> str:
    return chr(code) if 0 <= code < 0x110000 else ""


def _player_turn(dungeon: Dungeon, display: Display, queue: FibonacciHeap) -> bool:
    """Handle keys until the player spends the turn; True when the player quits."""
    screen = display.screen
    while True:
        screen.clear()
        display.show(DisplayCommand.MAP, dungeon)
        key = _key(screen.getch())
        if key == "m":
            display.show(DisplayCommand.MONSTERS, dungeon)
        elif key == "f":
            screen.clear()
            dungeon.message = REVEAL_MESSAGE
            while True:
                display.show(DisplayCommand.ALL, dungeon)
                if _key(screen.getch()) == "f":
                    break
            dungeon.message = ""
        elif key == "t":
            screen.clear()
            dungeon.message = TELEPORT_MESSAGE
            display.show(DisplayCommand.TELEPORT, dungeon)
            dungeon.message = ""
        elif dungeon.player.move(dungeon, key, queue):
            screen.addstr(0, 0, QUIT_MESSAGE)
            screen.getch()
            return True
        screen.addstr(0, 0, dungeon.message)
        dungeon.update_distances()
        if key not in ("m", "f", "t"):
            return False


def play_game(dungeon: Dungeon, display: Display) -> GameResult:
    """Populate the level and run turns until the player quits, dies or clears it."""
    queue = FibonacciHeap(key=attrgetter("move_time"))
    dungeon.place_characters(queue)
    dungeon.place_objects()
    dungeon.update_distances()

    while dungeon.player.alive and dungeon.nummon:
        current = queue.remove_min()
        if current.is_pc:
            if _player_turn(dungeon, display, queue):
                return GameResult.QUIT
        elif current.alive:
            current.move(dungeon)
        current.move_time += 1000 // current.speed
        queue.insert(current)

    screen = display.screen
    screen.clear()
    if dungeon.nummon:
        _show_banner(screen, 1, LOSS_SCREEN)
        result = GameResult.LOST
    else:
        _show_banner(screen, 0, WIN_SCREEN)
        result = GameResult.WON
    screen.getch()
    return result


def _run(stdscr: Any, dungeon: Dungeon, options: argparse.Namespace) -> int:
    import curses

    if curses.has_colors():
        for color in Color:
            if color is not Color.BLACK:
                curses.init_pair(int(color), int(color), curses.COLOR_BLACK)
    stdscr.keypad(True)
    display = Display(stdscr)
    display.color_attr = curses.color_pair
    if options.parse:
        display.show_monster_templates(dungeon.monster_templates)
        display.show_object_templates(dungeon.object_templates)
    play_game(dungeon, display)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game from the command line."""
    options = parse_args(argv)
    dungeon = Dungeon()
    try:
        if options.load:
            load_dungeon(dungeon)
        else:
            dungeon.generate()
        if options.save:
            save_dungeon(dungeon)
    except (OSError, ValueError) as exc:
        print(f"rlgdungeon: cannot use the dungeon file: {exc}", file=sys.stderr)
        return 1
    if options.pathfind:
        sys.stdout.write(dungeon.render_pc_cost_floor())
        sys.stdout.write(dungeon.render_pc_cost_all())
    if options.nummon is not None:
        dungeon.nummon = options.nummon
    try:
        dungeon.monster_templates = load_monster_templates()
        dungeon.object_templates = load_object_templates()
    except (OSError, ValueError) as exc:
        print(f"rlgdungeon: cannot read descriptions: {exc}", file=sys.stderr)
        return 1

    import curses

    return curses.wrapper(_run, dungeon, options)


__all__ = ["GameResult", "ESCAPE", "main", "parse_args", "play_game"]