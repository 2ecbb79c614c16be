"""Rectangle value object."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Rectangle", "make_rectangle"]


@dataclass
class Rectangle:
    """A rectangle whose area is computed from its current dimensions."""

    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height


def make_rectangle(width: float, height: float) -> Rectangle:
    """Create a Rectangle with the given *width* and *height*."""
    return Rectangle(width=width, height=height)
