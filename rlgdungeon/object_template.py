"""Object descriptions read from the object description file."""

from __future__ import annotations

from dataclasses import dataclass, field

from .dice import Dice
from .monster_template import scan_int
from .terrain import Color, parse_color

_TYPE_SYMBOLS = {
    "WEAPON": "|",
    "OFFHAND": ")",
    "RANGED": "}",
    "ARMOR": "[",
    "HELMET": "]",
    "CLOAK": "(",
    "GLOVES": "{",
    "BOOTS": "\\",
    "RING": "=",
    "AMULET": '"',
    "LIGHT": "_",
    "SCROLL": "~",
    "BOOK": "?",
    "FLASK": "!",
    "GOLD": "$",
    "AUMMUNITION": "/",
    "FOOD": ",",
    "WAND": "-",
    "CONTAINER": "%",
}


def symbol_for_type(type_name: str) -> str | None:
    """Return the symbol drawn for an object type, or None for an unknown type."""
    return _TYPE_SYMBOLS.get(type_name)


@dataclass(eq=False)
class ObjectTemplate:
    """What every object of one kind has in common."""

    name: str
    description: str
    type: str
    color: Color | None = None
    hit_bonus: Dice = field(default_factory=Dice)
    damage_bonus: Dice = field(default_factory=Dice)
    dodge_bonus: Dice = field(default_factory=Dice)
    defense_bonus: Dice = field(default_factory=Dice)
    weight: Dice = field(default_factory=Dice)
    speed_bonus: Dice = field(default_factory=Dice)
    attribute: Dice = field(default_factory=Dice)
    value: Dice = field(default_factory=Dice)
    artifact: str = "FALSE"
    unique: bool = False
    symbol: str | None = None
    rarity: int = 0
    valid: bool = True
    num_generated: int = 0

    @classmethod
    def from_fields(
        cls,
        name: str,
        description: str,
        type_name: str,
        color: str,
        hit: str,
        damage: str,
        dodge: str,
        defense: str,
        weight: str,
        speed: str,
        attribute: str,
        value: str,
        artifact: str,
        rarity: str,
    ) -> ObjectTemplate:
        """Build a template from the raw text of each field."""
        return cls(
            name=name,
            description=description,
            type=type_name,
            color=parse_color(color),
            hit_bonus=Dice.parse(hit),
            damage_bonus=Dice.parse(damage),
            dodge_bonus=Dice.parse(dodge),
            defense_bonus=Dice.parse(defense),
            weight=Dice.parse(weight),
            speed_bonus=Dice.parse(speed),
            attribute=Dice.parse(attribute),
            value=Dice.parse(value),
            artifact=artifact,
            unique=artifact == "TRUE",
            symbol=symbol_for_type(type_name),
            rarity=scan_int(rarity),
        )