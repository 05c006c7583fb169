"""Rectangle with a derived area."""

from __future__ import annotations


class Rectangle:
    """A width-by-height rectangle.

    ``area`` is computed on every access, so it follows later changes to
    ``width`` and ``height``.
    """

    def __init__(self, width: float, height: float) -> None:
        self.width = width
        self.height = height

    @property
    def area(self) -> float:
        return self.width * self.height

    def get_area(self) -> float:
        return self.area

    def __repr__(self) -> str:
        return f"Rectangle(width={self.width!r}, height={self.height!r})"
