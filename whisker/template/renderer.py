"""
Template renderer.

Walks a token tree against a context and returns the output string. Rendering
is permissive: missing names, wrong types and missing or malformed partials
all render as nothing, so a compiled template can be rendered against
incomplete or untrusted data without raising.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .._logging import scoped_logger
from ..exceptions import TemplateError
from .config import config
from .parser import parse
from .tokens import InvertedSection, Name, Partial, Raw, Section, Text, Token
from .values import as_mapping, escape_html, is_empty, is_sequence, lookup

log = scoped_logger("renderer")


def render(
    tokens: tuple[Token, ...],
    context: Any = None,
    partials: Mapping[str, str] | None = None,
) -> str:
    """
    Render a token tree.

    Args:
        tokens: Tree returned by ``parse()``.
        context: Data that tag names resolve against. Usually a mapping;
            any other value is accepted and simply resolves nothing.
        partials: Optional mapping of partial name to template source.
            Partial bodies are parsed each time they are expanded.

    Returns
    -------
        The rendered string. Never raises for missing or malformed data.

    Example:
        >>> render(parse("{{#items}}{{.}},{{/items}}"), {"items": [1, 2, 3]})
        '1,2,3,'
    """
    return _render(tokens, context, partials, 0)


def _render(tokens: tuple[Token, ...], context: Any, partials: Any, depth: int) -> str:
    parts: list[str] = []

    for token in tokens:
        match token:
            case Text(value=value):
                parts.append(value)
            case Name(name=name):
                value = lookup(context, name)
                if not is_empty(value):
                    parts.append(escape_html(value))
            case Raw(name=name):
                value = lookup(context, name)
                if not is_empty(value):
                    parts.append(str(value))
            case InvertedSection(name=name, children=children):
                if is_empty(lookup(context, name)):
                    parts.append(_render(children, context, partials, depth))
            case Section(name=name, children=children):
                parts.append(_render_section(name, children, context, partials, depth))
            case Partial(name=name):
                parts.append(_render_partial(name, context, partials, depth))

    return "".join(parts)


def _render_section(
    name: str, children: tuple[Token, ...], context: Any, partials: Any, depth: int
) -> str:
    value = lookup(context, name)
    if is_empty(value):
        return ""

    if is_sequence(value):
        return "".join(
            _render(
                children,
                item if as_mapping(item) is not None else {".": item},
                partials,
                depth,
            )
            for item in value
        )

    if as_mapping(value) is not None:
        return _render(children, value, partials, depth)

    # Truthy scalar: gate only, the context is unchanged
    return _render(children, context, partials, depth)


def _render_partial(name: str, context: Any, partials: Any, depth: int) -> str:
    if not isinstance(partials, Mapping):
        return ""

    source = partials.get(name)
    if not source or not isinstance(source, str):
        return ""

    if depth >= config.max_partial_depth:
        log.warning(
            "Partial nesting limit reached, rendering nothing",
            extra={"partial": name, "depth": depth},
        )
        return ""

    try:
        tokens = parse(source)
    except TemplateError as e:
        log.warning(
            f"Partial failed to parse, rendering nothing: {e}",
            extra={"partial": name, "code": e.code},
        )
        return ""

    if config.debug:
        log.debug("Expanding partial", extra={"partial": name, "depth": depth + 1})

    if depth > 0:
        return _render(tokens, context, partials, depth + 1)

    # Sections nested in recursive partials can exhaust the interpreter stack
    # before max_partial_depth is reached; unwind to the outermost partial.
    try:
        return _render(tokens, context, partials, depth + 1)
    except RecursionError:
        log.warning(
            "Partial nesting exceeded the interpreter stack, rendering nothing",
            extra={"partial": name, "depth": depth},
        )
        return ""
