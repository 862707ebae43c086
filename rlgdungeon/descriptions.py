"""Reading monster and object description files."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Iterator

from .monster_template import MonsterTemplate
from .object_template import ObjectTemplate

MONSTER_HEADER = "RLG327 MONSTER DESCRIPTION 1"
OBJECT_HEADER = "RLG327 OBJECT DESCRIPTION 1"
MONSTER_FILE = "monster_desc.txt"
OBJECT_FILE = "object_desc.txt"

_MONSTER_KEYS = ("NAME", "DESC", "COLOR", "SPEED", "ABIL", "HP", "DAM", "SYMB", "RRTY")
_OBJECT_KEYS = (
    "NAME", "DESC", "TYPE", "COLOR", "HIT", "DAM", "DODGE",
    "DEF", "WEIGHT", "SPEED", "ATTR", "VAL", "ART", "RRTY",
)


class DescriptionError(ValueError):
    """A description file is malformed."""


def default_path(name: str) -> Path:
    """Return the path of ``name`` in the game's directory under HOME."""
    home = os.environ.get("HOME")
    base = Path(home) if home else Path.home()
    return base / ".rlg327" / name


def _read_description(lines: Iterator[str]) -> str:
    parts = []
    for line in lines:
        if line == ".":
            return "\n".join(parts)
        parts.append(line)
    raise DescriptionError("description not terminated by '.'")


def _blocks(
    lines: Iterable[str], header: str, begin: str, keys: tuple[str, ...]
) -> Iterator[dict[str, str]]:
    """Yield the fields of each complete block; blocks with missing or repeated fields are dropped."""
    it = (line.rstrip("\n") for line in lines)
    first = next(it, None)
    if first != header:
        raise DescriptionError(f"expected header {header!r}, found {first!r}")
    for line in it:
        if line != begin:
            continue
        counts = dict.fromkeys(keys, 0)
        values: dict[str, str] = {}
        in_progress = True
        # The line after a block's end is read before the loop notices it is done.
        for line in it:
            if not in_progress:
                break
            param, _, rest = line.partition(" ")
            if param == "DESC":
                counts[param] += 1
                values[param] = _read_description(it)
            elif param in counts:
                counts[param] += 1
                values[param] = rest
            elif param == "END":
                if all(count == 1 for count in counts.values()):
                    yield dict(values)
                in_progress = False
            if any(count > 1 for count in counts.values()):
                in_progress = False


def parse_monster_descriptions(lines: Iterable[str]) -> list[MonsterTemplate]:
    """Build the monster templates described by ``lines``."""
    return [
        MonsterTemplate.from_fields(
            f["NAME"], f["DESC"], f["COLOR"], f["SPEED"], f["ABIL"],
            f["HP"], f["DAM"], f["SYMB"], f["RRTY"], index,
        )
        for index, f in enumerate(_blocks(lines, MONSTER_HEADER, "BEGIN MONSTER", _MONSTER_KEYS))
    ]


def parse_object_descriptions(lines: Iterable[str]) -> list[ObjectTemplate]:
    """Build the object templates described by ``lines``."""
    return [
        ObjectTemplate.from_fields(
            f["NAME"], f["DESC"], f["TYPE"], f["COLOR"], f["HIT"], f["DAM"],
            f["DODGE"], f["DEF"], f["WEIGHT"], f["SPEED"], f["ATTR"], f["VAL"],
            f["ART"], f["RRTY"],
        )
        for f in _blocks(lines, OBJECT_HEADER, "BEGIN OBJECT", _OBJECT_KEYS)
    ]


def load_monster_templates(path: str | os.PathLike | None = None) -> list[MonsterTemplate]:
    """Read monster templates from ``path`` (default: the game directory)."""
    with open(path if path is not None else default_path(MONSTER_FILE), encoding="utf-8") as f:
        return parse_monster_descriptions(f)


def load_object_templates(path: str | os.PathLike | None = None) -> list[ObjectTemplate]:
    """Read object templates from ``path`` (default: the game directory)."""
    with open(path if path is not None else default_path(OBJECT_FILE), encoding="utf-8") as f:
        return parse_object_descriptions(f)