"""
Token types for compiled templates.

A compiled template is a tuple of tokens in document order. Section tokens
hold their own child tuples, so the whole tree is immutable once parsed and
can be shared between threads.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union


@dataclass(frozen=True, slots=True)
class Text:
    """Literal text copied to the output unchanged."""

    kind: ClassVar[str] = "text"

    value: str


@dataclass(frozen=True, slots=True)
class Name:
    """Escaped interpolation: ``{{name}}``."""

    kind: ClassVar[str] = "name"

    name: str


@dataclass(frozen=True, slots=True)
class Raw:
    """Unescaped interpolation: ``{{&name}}`` or ``{{{name}}}``."""

    kind: ClassVar[str] = "raw"

    name: str


@dataclass(frozen=True, slots=True)
class Section:
    """``{{#name}}...{{/name}}``, rendered once per truthy value or list item."""

    kind: ClassVar[str] = "section"

    name: str
    children: tuple[Token, ...] = ()


@dataclass(frozen=True, slots=True)
class InvertedSection:
    """``{{^name}}...{{/name}}``, rendered only when the value is empty."""

    kind: ClassVar[str] = "inverted_section"

    name: str
    children: tuple[Token, ...] = ()


@dataclass(frozen=True, slots=True)
class Partial:
    """``{{>name}}``, replaced by the named partial rendered in place."""

    kind: ClassVar[str] = "partial"

    name: str


Token = Union[Text, Name, Raw, Section, InvertedSection, Partial]


def iter_tokens(tokens: tuple[Token, ...]):
    """Yield every token in the tree, depth first, in document order."""
    for token in tokens:
        yield token
        if isinstance(token, (Section, InvertedSection)):
            yield from iter_tokens(token.children)
