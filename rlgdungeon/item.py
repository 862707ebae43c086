"""Objects lying in the dungeon, rolled from their templates."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from .dice import Dice
from .object_template import ObjectTemplate
from .terrain import Color


@dataclass(eq=False)
class Item:
    """One object with its bonuses already rolled."""

    name: str
    description: str
    type: str
    color: Color | None
    hit_bonus: int
    damage_bonus: Dice = field(default_factory=Dice)
    dodge_bonus: int = 0
    defense_bonus: int = 0
    weight: int = 0
    speed_bonus: int = 0
    attribute: int = 0
    value: int = 0
    artifact: bool = False
    symbol: str | None = None
    rarity: int = 0
    x: int = 0
    y: int = 0

    @classmethod
    def from_template(
        cls,
        template: ObjectTemplate,
        x: int,
        y: int,
        rng: random.Random | None = None,
    ) -> Item:
        """Roll a new object at (x, y) from ``template``."""
        return cls(
            name=template.name,
            description=template.description,
            type=template.type,
            color=template.color,
            hit_bonus=template.hit_bonus.roll(rng),
            damage_bonus=template.damage_bonus.copy(),
            dodge_bonus=template.dodge_bonus.roll(rng),
            defense_bonus=template.defense_bonus.roll(rng),
            weight=template.weight.roll(rng),
            speed_bonus=template.speed_bonus.roll(rng),
            attribute=template.attribute.roll(rng),
            value=template.value.roll(rng),
            artifact=template.artifact == "TRUE",
            symbol=template.symbol,
            rarity=template.rarity,
            x=x,
            y=y,
        )