"""
Coordinate value type.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Coordinate:
    """An immutable (x, y) cell position. Equality and hashing are by value."""

    x: int
    y: int

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def __repr__(self):
        return f"({self.x}, {self.y})"
