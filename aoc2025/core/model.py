from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator


class Direction(str, Enum):
    """Which way the dial turns."""
    RIGHT = "R"
    LEFT = "L"


@dataclass(frozen=True)
class Instruction:
    """A single rotation read from one line of the document."""
    direction: Direction
    distance: int


@dataclass(frozen=True)
class ProductRange:
    """Inclusive span of product IDs."""
    start: int
    end: int

    def __iter__(self) -> Iterator[int]:
        # start > end is simply empty
        return iter(range(self.start, self.end + 1))


ProductId = int
