"""Dice — the game's only source of randomness during play."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Callable, Protocol, runtime_checkable

DEFAULT_FACES = 6


@runtime_checkable
class Roller(Protocol):
    """Structural interface — anything with roll() can drive a game."""

    def roll(self) -> int: ...


@dataclass
class Dice:
    """Uniform roll over 1..faces. Pass a seeded *rng* for repeatable games."""

    faces: int = DEFAULT_FACES
    rng: random.Random = field(default_factory=random.Random, repr=False)

    def __post_init__(self) -> None:
        if self.faces < 2:
            raise ValueError(f"Dice needs at least 2 faces, got {self.faces}.")

    def roll(self) -> int:
        return self.rng.randint(1, self.faces)


@dataclass
class PromptDice:
    """Waits for the user to confirm before each roll, then delegates."""

    inner: Dice
    prompt: Callable[[str], str] = input
    message: str = "Press Enter to roll the dice..."

    def roll(self) -> int:
        self.prompt(self.message)
        return self.inner.roll()
