"""Error hierarchy for selectorkit."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from selectorkit.selector.category import Category


class SelectorKitError(Exception):
    """Base error for all selectorkit errors."""


class SelectorError(SelectorKitError):
    """The selector builder protocol was misused."""

    def __init__(self, message: str, *, category: Category) -> None:
        super().__init__(message)
        self.category = category


class OrderViolation(SelectorError):
    """A category was appended after a higher-indexed category was used."""

    def __init__(
        self,
        message: str = (
            "selector parts must follow element, id, class, attribute, "
            "pseudo-class, pseudo-element order"
        ),
        *,
        category: Category,
        conflicting: Category,
    ) -> None:
        super().__init__(message, category=category)
        self.conflicting = conflicting


class DuplicateCategory(SelectorError):
    """Element or pseudo-element was appended a second time."""

    def __init__(
        self,
        message: str = "element and pseudo-element may occur at most once",
        *,
        category: Category,
    ) -> None:
        super().__init__(message, category=category)


class BindingError(SelectorKitError):
    """Decoded data could not be bound to a capability class."""
