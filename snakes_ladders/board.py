"""Board cells and the snakes and ladders that sit on them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator


class EntityKind(str, Enum):
    SNAKE = "snake"
    LADDER = "ladder"


class InvalidEntityError(ValueError):
    """A snake that goes up, or a ladder that goes down."""


@dataclass(frozen=True)
class BoardEntity:
    """A snake or ladder spanning *start* → *end*."""

    kind: EntityKind
    start: int
    end: int

    def __post_init__(self) -> None:
        if self.kind is EntityKind.SNAKE and self.end >= self.start:
            raise InvalidEntityError(
                f"Invalid snake {self.start} -> {self.end}: end must be below start."
            )
        if self.kind is EntityKind.LADDER and self.end <= self.start:
            raise InvalidEntityError(
                f"Invalid ladder {self.start} -> {self.end}: end must be above start."
            )

    @classmethod
    def snake(cls, start: int, end: int) -> BoardEntity:
        return cls(EntityKind.SNAKE, start, end)

    @classmethod
    def ladder(cls, start: int, end: int) -> BoardEntity:
        return cls(EntityKind.LADDER, start, end)

    def __str__(self) -> str:
        return f"{self.kind.value.capitalize()}: {self.start} -> {self.end}"


# fmt: off
STANDARD_SNAKES: list[tuple[int, int]] = [
    (99, 54), (95, 75), (92, 88), (89, 68), (74, 53),
    (64, 60), (62, 19), (49, 11), (46, 25), (16,  6),
]
STANDARD_LADDERS: list[tuple[int, int]] = [
    ( 2, 38), ( 7, 14), ( 8, 31), (15, 26), (21, 42), (28, 84),
    (36, 44), (51, 67), (71, 91), (78, 98), (87, 94),
]
# fmt: on

STANDARD_SIDE = 10


@dataclass
class Board:
    """A side×side grid of cells numbered 1..side².

    Entities are written once during setup and only read during play.
    """

    side: int = STANDARD_SIDE
    _entities: dict[int, BoardEntity] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        if self.side < 1:
            raise ValueError(f"Board side must be at least 1, got {self.side}.")

    def size(self) -> int:
        return self.side * self.side

    def can_place(self, cell: int) -> bool:
        return cell not in self._entities

    def place(self, entity: BoardEntity) -> bool:
        """Insert *entity* unless its start cell is taken. Never raises."""
        if not self.can_place(entity.start):
            return False
        self._entities[entity.start] = entity
        return True

    def entity_at(self, cell: int) -> BoardEntity | None:
        return self._entities.get(cell)

    def entities(self) -> Iterator[BoardEntity]:
        return iter(self._entities.values())

    def snakes(self) -> list[BoardEntity]:
        return [e for e in self._entities.values() if e.kind is EntityKind.SNAKE]

    def ladders(self) -> list[BoardEntity]:
        return [e for e in self._entities.values() if e.kind is EntityKind.LADDER]

    def describe(self) -> str:
        snakes = self.snakes()
        ladders = self.ladders()
        lines = [
            "=== Board Configuration ===",
            f"Total Cells: {self.size()}",
            "",
            f"Snakes: {len(snakes)}",
            *(str(s) for s in snakes),
            "",
            f"Ladders: {len(ladders)}",
            *(str(ladder) for ladder in ladders),
            "===========================",
        ]
        return "\n".join(lines)
