"""Fluent CSS compound-selector builder.

Each append returns a new builder, so a partially built selector can be
reused as the base of several others::

    base = css_selector_builder.element("a").attr('href$=".png"')
    base.pseudo_class("focus").render()   # 'a[href$=".png"]:focus'
    base.pseudo_class("hover").render()   # 'a[href$=".png"]:hover'

Parts must arrive in the order element, id, class, attribute, pseudo-class,
pseudo-element. Element and pseudo-element may appear at most once.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from selectorkit.errors import DuplicateCategory, OrderViolation
from selectorkit.selector.category import Category
from selectorkit.selector.combinator import CombinedSelector, Renderable, combine
from selectorkit.selector.fragments import FragmentSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectorBuilder:
    """An immutable compound selector under construction."""

    fragments: FragmentSet = field(default_factory=FragmentSet)

    # --- category appends -----------------------------------------------------

    def with_type(self, value: str) -> SelectorBuilder:
        return self._append(Category.TYPE, value)

    def with_id(self, value: str) -> SelectorBuilder:
        return self._append(Category.ID, value)

    def with_class(self, value: str) -> SelectorBuilder:
        return self._append(Category.CLASS, value)

    def with_attribute(self, value: str) -> SelectorBuilder:
        return self._append(Category.ATTRIBUTE, value)

    def with_pseudo_class(self, value: str) -> SelectorBuilder:
        return self._append(Category.PSEUDO_CLASS, value)

    def with_pseudo_element(self, value: str) -> SelectorBuilder:
        return self._append(Category.PSEUDO_ELEMENT, value)

    def append(self, category: Category, value: str) -> SelectorBuilder:
        """Append *value* to an arbitrary *category*."""
        return self._append(Category(category), value)

    # CSS-flavoured names
    element = with_type
    id = with_id
    class_ = with_class
    attr = with_attribute
    pseudo_class = with_pseudo_class
    pseudo_element = with_pseudo_element

    # --- rendering --------------------------------------------------------------

    def render(self) -> str:
        """Return the selector text. Never changes the builder."""
        return self.fragments.render()

    def stringify(self) -> str:
        return self.render()

    def __str__(self) -> str:
        return self.render()

    def combine(
        self, left: Renderable, combinator: str, right: Renderable
    ) -> CombinedSelector:
        return combine(left, combinator, right)

    # --- internals --------------------------------------------------------------

    def _append(self, category: Category, value: str) -> SelectorBuilder:
        # Ordering is checked first so an out-of-order duplicate reports order.
        conflicting = self.fragments.first_used_after(category)
        if conflicting is not None:
            logger.debug(
                "Rejected %s %r: %s already used", category.name, value, conflicting.name
            )
            raise OrderViolation(category=category, conflicting=conflicting)

        if category.unique and self.fragments.is_used(category):
            logger.debug("Rejected %s %r: already used", category.name, value)
            raise DuplicateCategory(category=category)

        return SelectorBuilder(self.fragments.append(category, category.format(value)))


css_selector_builder = SelectorBuilder()
