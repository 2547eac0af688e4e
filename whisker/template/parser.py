"""
Template parser.

Turns template source into a tree of tokens in a single pass. Tags are
delimited by ``{{`` and ``}}`` (or ``}}}`` for the triple-brace raw form); the
first character inside a tag selects its type:

=======  ==========================================
Sigil    Meaning
=======  ==========================================
``!``    comment, dropped
``#``    open a section
``^``    open an inverted section
``/``    close the innermost open section
``>``    partial
``&``    unescaped interpolation
``{``    unescaped interpolation (``{{{name}}}``)
other    escaped interpolation of the whole tag text
=======  ==========================================
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from .._logging import scoped_logger
from ..exceptions import InvalidTemplateError, ParseError
from .config import config
from .tokens import InvertedSection, Name, Partial, Raw, Section, Text, Token

log = scoped_logger("parser")

_OPEN_TAG = "{{"
_CLOSE_TAG_RE = re.compile(r"\}\}\}?")


@dataclass
class _Frame:
    """An open section waiting for its close tag."""

    sigil: str
    name: str
    parent: list[Token]
    children: list[Token] = field(default_factory=list)

    def close(self) -> Token:
        children = tuple(self.children)
        if self.sigil == "^":
            return InvertedSection(self.name, children)
        return Section(self.name, children)


def parse(template: str) -> tuple[Token, ...]:
    """
    Parse template source into a token tree.

    Args:
        template: Template source. Must be a non-empty string.

    Returns
    -------
        Top-level tokens in document order. Section tokens carry their
        children, so the returned tuple is the whole tree.

    Raises
    ------
        InvalidTemplateError: If template is not a non-empty string.
        ParseError: If a close tag has no open section ("unopened"), names a
            different section than the innermost open one, or the template
            ends with a section still open ("unclosed").

    Example:
        >>> parse("Hi {{#user}}{{name}}{{/user}}")
        (Text(value='Hi '), Section(name='user', children=(Name(name='name'),)))
    """
    if not isinstance(template, str) or not template:
        raise InvalidTemplateError(details={"type": type(template).__name__})

    # Closing delimiters become opening ones, so chunks alternate text/tag
    chunks = _CLOSE_TAG_RE.sub(_OPEN_TAG, template).split(_OPEN_TAG)

    root: list[Token] = []
    tokens = root
    stack: list[_Frame] = []

    for index, chunk in enumerate(chunks):
        if not chunk:
            continue

        if index % 2 == 0:
            tokens.append(Text(chunk))
            continue

        sigil = chunk[0]
        name = chunk[1:].strip()

        match sigil:
            case "!":
                pass
            case "#" | "^":
                frame = _Frame(sigil, name, tokens)
                stack.append(frame)
                tokens = frame.children
            case ">":
                tokens.append(Partial(name))
            case "&" | "{":
                tokens.append(Raw(name))
            case "/":
                if not stack:
                    raise ParseError(name, "unopened")
                frame = stack.pop()
                if frame.name != name:
                    raise ParseError(frame.name, "unclosed", details={"closed_by": name})
                tokens = frame.parent
                tokens.append(frame.close())
            case _:
                tokens.append(Name(chunk.strip()))

    if stack:
        raise ParseError(stack[-1].name, "unclosed", details={"closed_by": None})

    if config.debug:
        log.debug(
            "Parsed template",
            extra={"length": len(template), "tokens": len(root)},
        )

    return tuple(root)
