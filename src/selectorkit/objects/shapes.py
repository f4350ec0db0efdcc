"""Shape value objects."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rectangle:
    """An axis-aligned rectangle described by its width and height."""

    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height
