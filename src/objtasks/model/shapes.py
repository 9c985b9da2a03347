"""Shape models: Rectangle and Circle value types."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle."""

    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height

    def to_dict(self) -> dict[str, Any]:
        return {"width": self.width, "height": self.height}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Rectangle:
        """Build a Rectangle from a mapping with numeric ``width`` and ``height`` keys."""
        return cls(width=float(data["width"]), height=float(data["height"]))


@dataclass(frozen=True)
class Circle:
    """A circle described by its radius."""

    radius: float

    def area(self) -> float:
        return math.pi * self.radius**2

    def to_dict(self) -> dict[str, Any]:
        return {"radius": self.radius}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Circle:
        return cls(radius=float(data["radius"]))
