"""Combinator joins of two rendered selectors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class Renderable(Protocol):
    """Anything that renders to a selector string."""

    def render(self) -> str: ...


@dataclass(frozen=True)
class CombinedSelector:
    """Two rendered selectors joined by a combinator token."""

    left: str
    combinator: str
    right: str

    def render(self) -> str:
        return f"{self.left} {self.combinator} {self.right}"

    def stringify(self) -> str:
        return self.render()

    def __str__(self) -> str:
        return self.render()


def combine(left: Renderable, combinator: str, right: Renderable) -> CombinedSelector:
    """Join *left* and *right* with *combinator*.

    The token is inserted verbatim; ``" "``, ``"+"``, ``"~"`` and ``">"`` are
    the CSS combinators but any string is accepted. Either side may itself be
    a :class:`CombinedSelector`, so nesting follows the call structure.
    """
    return CombinedSelector(left=left.render(), combinator=combinator, right=right.render())
