"""Monster descriptions read from the monster description file."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass, field

from .dice import Dice
from .terrain import Color, parse_color

_INT_RE = re.compile(r"\s*([+-]?\d+)")


class Ability(enum.IntFlag):
    """Monster ability bits."""

    SMART = 0x0001
    TELEPATHIC = 0x0002
    TUNNELING = 0x0004
    ERRATIC = 0x0008
    PASS = 0x0010
    DESTROY = 0x0020
    PICKUP = 0x0040
    UNIQUE = 0x0080
    BOSS = 0x0100


_ABILITY_WORDS = {
    "SMART": Ability.SMART,
    "TELE": Ability.TELEPATHIC,
    "TUNNEL": Ability.TUNNELING,
    "ERRATIC": Ability.ERRATIC,
    "PASS": Ability.PASS,
    "PICKUP": Ability.PICKUP,
    "DESTROY": Ability.DESTROY,
    "UNIQ": Ability.UNIQUE,
    "BOSS": Ability.BOSS,
}


def parse_abilities(text: str) -> Ability:
    """Combine the space separated ability words in ``text``; unknown words are ignored."""
    result = Ability(0)
    for word in text.split(" "):
        result |= _ABILITY_WORDS.get(word, Ability(0))
    return result


def scan_int(text: str) -> int:
    """Read a leading integer from ``text``, as a description field holds it."""
    match = _INT_RE.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    return int(match.group(1))


@dataclass(eq=False)
class MonsterTemplate:
    """What every monster of one kind has in common."""

    name: str
    description: str
    colors: list[Color] = field(default_factory=list)
    speed: Dice = field(default_factory=Dice)
    abilities: Ability = Ability(0)
    hitpoints: Dice = field(default_factory=Dice)
    attack_damage: Dice = field(default_factory=Dice)
    symbol: str = "?"
    rarity: int = 0
    index: int = 0
    unique: bool = False
    valid: bool = True
    num_generated: int = 0

    @classmethod
    def from_fields(
        cls,
        name: str,
        description: str,
        color: str,
        speed: str,
        abilities: str,
        hitpoints: str,
        damage: str,
        symbol: str,
        rarity: str,
        index: int,
    ) -> MonsterTemplate:
        """Build a template from the raw text of each field."""
        colors = [c for c in (parse_color(word) for word in color.split(" ")) if c is not None]
        ability_bits = parse_abilities(abilities)
        if not symbol:
            raise ValueError("a monster needs a symbol")
        return cls(
            name=name,
            description=description,
            colors=colors,
            speed=Dice.parse(speed),
            abilities=ability_bits,
            hitpoints=Dice.parse(hitpoints),
            attack_damage=Dice.parse(damage),
            symbol=symbol[0],
            rarity=scan_int(rarity),
            index=index,
            unique=Ability.UNIQUE in ability_bits,
        )