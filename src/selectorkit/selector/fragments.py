"""Fragment set: per-category usage flags and accumulated selector text."""

from __future__ import annotations

from dataclasses import dataclass, replace

from selectorkit.selector.category import Category

_SLOTS = len(Category)


@dataclass(frozen=True)
class FragmentSet:
    """Immutable state of one compound selector.

    Both tuples are indexed by :class:`Category`. ``used[i]`` records whether
    category ``i`` has been appended at all; ``texts[i]`` holds its rendered
    fragments concatenated in append order.
    """

    used: tuple[bool, ...] = (False,) * _SLOTS
    texts: tuple[str, ...] = ("",) * _SLOTS

    def is_used(self, category: Category) -> bool:
        return self.used[category]

    def first_used_after(self, category: Category) -> Category | None:
        """Return the lowest used category ranked after *category*, if any."""
        for index in range(category + 1, _SLOTS):
            if self.used[index]:
                return Category(index)
        return None

    def append(self, category: Category, text: str) -> FragmentSet:
        """Return a copy with *text* appended to *category*'s slot."""
        used = list(self.used)
        texts = list(self.texts)
        used[category] = True
        texts[category] += text
        return replace(self, used=tuple(used), texts=tuple(texts))

    def render(self) -> str:
        return "".join(self.texts)
