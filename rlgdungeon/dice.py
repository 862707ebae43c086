"""Dice expressions of the form base+NdS."""

from __future__ import annotations

import random
import re
from dataclasses import dataclass, replace

_DICE_RE = re.compile(r"\s*([+-]?\d+)\+\s*([+-]?\d+)d\s*([+-]?\d+)")


@dataclass(frozen=True)
class Dice:
    """A base value plus ``num`` rolls of a ``sides``-sided die."""

    base: int = 0
    num: int = 0
    sides: int = 1

    @classmethod
    def parse(cls, text: str) -> Dice:
        """Read an expression such as ``10+2d6``."""
        match = _DICE_RE.match(text)
        if match is None:
            raise ValueError(f"not a dice expression: {text!r}")
        base, num, sides = (int(part) for part in match.groups())
        return cls(base, num, sides)

    def roll(self, rng: random.Random | None = None) -> int:
        """Return the base plus the sum of ``num`` die rolls."""
        if self.num > 0 and self.sides <= 0:
            raise ValueError(f"cannot roll a die with {self.sides} sides")
        source = rng if rng is not None else random
        return self.base + sum(source.randint(1, self.sides) for _ in range(self.num))

    def copy(self) -> Dice:
        """Return an equal, separate Dice."""
        return replace(self)

    def __str__(self) -> str:
        return f"{self.base}+{self.num}d{self.sides}"