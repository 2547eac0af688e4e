"""
Value helpers shared by the renderer.

Classifies context values (empty, sequence, map-like), resolves dotted names
against a context, and escapes interpolated text. All functions are pure and
keep no state.
"""

from __future__ import annotations

import dataclasses
import inspect
from collections.abc import Mapping, Sequence
from typing import Any

# Sequence types rendered as scalars, not iterated
_STRING_TYPES = (str, bytes, bytearray)

# Order matters: "&" must be replaced first
_HTML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)


def is_sequence(value: Any) -> bool:
    """Return True for list-like values a section iterates over."""
    return isinstance(value, Sequence) and not isinstance(value, _STRING_TYPES)


def as_mapping(value: Any) -> Mapping[str, Any] | None:
    """
    Return a mapping view of a map-like value, or None.

    Mappings are returned as-is. Dataclass instances and pydantic-style
    models (anything whose class exposes ``model_fields``) are viewed through
    their declared fields, detected without importing pydantic.
    """
    if isinstance(value, Mapping):
        return value
    if isinstance(value, type):
        return None
    if dataclasses.is_dataclass(value):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    fields = getattr(type(value), "model_fields", None)
    if isinstance(fields, Mapping):
        return {name: getattr(value, name) for name in fields}
    return None


def is_empty(value: Any) -> bool:
    """
    Return True if a value counts as empty for sections and interpolation.

    None, False, zero and "" are empty. Sequences are empty when they have no
    items and map-like values when they have no keys. Values whose truth is
    ambiguous (array-likes that raise from ``__bool__``) are not empty.
    """
    if is_sequence(value):
        return len(value) == 0
    mapping = as_mapping(value)
    if mapping is not None:
        return len(mapping) == 0
    try:
        return not value
    except (TypeError, ValueError):
        return False


def escape_html(value: Any) -> str:
    """Escape ``& < > " '`` in the string form of value."""
    text = str(value)
    for char, entity in _HTML_ESCAPES:
        text = text.replace(char, entity)
    return text


def _get(container: Any, key: str) -> Any:
    """Index container by key; None when the key cannot be resolved."""
    mapping = as_mapping(container)
    if mapping is not None:
        return mapping.get(key)
    if is_sequence(container):
        try:
            return container[int(key)]
        except (ValueError, IndexError):
            return None
    return None


def _invoke(value: Any) -> Any:
    """Call value if it can be called with no arguments."""
    if not callable(value):
        return value
    try:
        inspect.signature(value).bind()
    except (TypeError, ValueError):
        # Needs arguments, or has no signature to check
        return None
    return value()


def lookup(context: Any, name: str) -> Any:
    """
    Resolve a tag name against a context.

    A name with a dot after its first character is walked segment by segment
    (``user.address.city``, ``items.0``); an empty value along the way ends
    the walk and is returned. Any other name, including ``.``, is a single
    key lookup. A callable result that takes no arguments is called and its
    return value used.

    Never raises for missing keys or non-map contexts; they resolve to None.

    Example:
        >>> lookup({"a": {"b": [10, 20]}}, "a.b.1")
        20
        >>> lookup(42, "name") is None
        True
    """
    if name.find(".") > 0:
        value = context
        for part in name.split("."):
            if is_empty(value):
                break
            value = _get(value, part)
    else:
        value = _get(context, name)
    return _invoke(value)
