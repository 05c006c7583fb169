"""selectorkit: CSS selector builder, rectangle helper and JSON codec."""

from selectorkit.codec import decode, encode
from selectorkit.config import DEFAULT_CODEC_CONFIG, CodecConfig
from selectorkit.errors import (
    BindingError,
    DuplicateCategory,
    OrderViolation,
    SelectorError,
    SelectorKitError,
)
from selectorkit.selector import (
    Category,
    CombinedSelector,
    FragmentSet,
    Renderable,
    SelectorBuilder,
    combine,
    css_selector_builder,
)
from selectorkit.shapes import Rectangle

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Selector
    "Category",
    "CombinedSelector",
    "FragmentSet",
    "Renderable",
    "SelectorBuilder",
    "combine",
    "css_selector_builder",
    # Shapes
    "Rectangle",
    # Codec
    "CodecConfig",
    "DEFAULT_CODEC_CONFIG",
    "decode",
    "encode",
    # Errors
    "BindingError",
    "DuplicateCategory",
    "OrderViolation",
    "SelectorError",
    "SelectorKitError",
]
