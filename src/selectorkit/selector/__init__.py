from selectorkit.selector.category import Category
from selectorkit.selector.fragments import FragmentSet
from selectorkit.selector.combinator import CombinedSelector, Renderable, combine
from selectorkit.selector.builder import SelectorBuilder, css_selector_builder

__all__ = [
    "Category",
    "CombinedSelector",
    "FragmentSet",
    "Renderable",
    "SelectorBuilder",
    "combine",
    "css_selector_builder",
]
