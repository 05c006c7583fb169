"""JSON encode/decode helpers.

``encode`` writes compact JSON in mapping iteration order. ``decode`` parses
JSON and binds a class's behaviour to the resulting top-level object::

    text = encode({"width": 10, "height": 20})   # '{"width":10,"height":20}'
    rect = decode(Rectangle, text)
    rect.area                                    # 200
"""

from __future__ import annotations

import json
import logging
import math
from typing import Any, TypeVar

from selectorkit.config import DEFAULT_CODEC_CONFIG, CodecConfig
from selectorkit.errors import BindingError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _finite(value: Any) -> Any:
    """Replace non-finite floats with ``None`` so output stays valid JSON."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {key: _finite(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_finite(item) for item in value]
    return value


def _default(obj: Any) -> Any:
    """Encode plain objects through their instance attributes."""
    try:
        return _finite(vars(obj))
    except TypeError:
        raise TypeError(
            f"Object of type {type(obj).__name__} is not JSON serializable"
        ) from None


def encode(value: Any, config: CodecConfig | None = None) -> str:
    """Return the JSON text for *value*.

    NaN and infinities are written as ``null``.
    """
    cfg = config or DEFAULT_CODEC_CONFIG
    return json.dumps(
        _finite(value),
        default=_default,
        allow_nan=False,
        indent=cfg.indent,
        separators=cfg.separators,
        ensure_ascii=cfg.ensure_ascii,
        sort_keys=cfg.sort_keys,
    )


def decode(capabilities: type[T], text: str) -> T:
    """Parse *text* and bind *capabilities* to the top-level object.

    A new *capabilities* instance is created without calling its constructor;
    the decoded keys become its attributes. Nested values stay plain dicts and
    lists. Invalid JSON raises :class:`json.JSONDecodeError`.
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise BindingError(
            f"cannot bind {capabilities.__name__} to a JSON {type(data).__name__}"
        )

    instance = capabilities.__new__(capabilities)
    for key, item in data.items():
        # object.__setattr__ also fills frozen dataclasses
        try:
            object.__setattr__(instance, key, item)
        except AttributeError:
            raise BindingError(
                f"cannot bind key {key!r} to {capabilities.__name__}"
            ) from None
    logger.debug("Bound %s to keys %s", capabilities.__name__, list(data))
    return instance
