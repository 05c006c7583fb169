"""Selector fragment categories in the order CSS requires them."""

from __future__ import annotations

from enum import IntEnum


class Category(IntEnum):
    """A slot of a compound selector; the value is its position."""

    TYPE = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5

    @property
    def unique(self) -> bool:
        """True if the category may be used at most once per selector."""
        return self in _UNIQUE

    def format(self, value: str) -> str:
        """Wrap *value* in the category's CSS punctuation."""
        prefix, suffix = _DECORATION[self]
        return f"{prefix}{value}{suffix}"


_UNIQUE = frozenset({Category.TYPE, Category.PSEUDO_ELEMENT})

_DECORATION: dict[Category, tuple[str, str]] = {
    Category.TYPE: ("", ""),
    Category.ID: ("#", ""),
    Category.CLASS: (".", ""),
    Category.ATTRIBUTE: ("[", "]"),
    Category.PSEUDO_CLASS: (":", ""),
    Category.PSEUDO_ELEMENT: ("::", ""),
}
