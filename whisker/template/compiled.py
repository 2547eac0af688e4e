"""
Compiled templates.

Provides ``compile()`` and the CompiledTemplate class: a template parsed once
and rendered any number of times with different contexts.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from .parser import parse
from .renderer import render as render_tokens
from .tokens import InvertedSection, Name, Partial, Raw, Section, Token, iter_tokens

if TYPE_CHECKING:
    from .environment import TemplateEnvironment


class CompiledTemplate:
    r"""
    A parsed template, ready to render.

    The token tree is built once in the constructor and never modified, so a
    CompiledTemplate can be rendered repeatedly, and from several threads at
    once, with identical results for identical inputs.

    Basic Usage
    -----------

        >>> from whisker import compile
        >>> t = compile("Hello {{name}}!")
        >>> t.render({"name": "World"})
        'Hello World!'
        >>> t({"name": "<b>"})       # Callable form, output is escaped
        'Hello &lt;b&gt;!'

    Sections and lists:

        >>> t = compile("{{#people}}{{name}} {{/people}}{{^people}}nobody{{/people}}")
        >>> t.render({"people": [{"name": "Amy"}, {"name": "Bo"}]})
        'Amy Bo '
        >>> t.render({"people": []})
        'nobody'

    Partials are supplied per render, as template source:

        >>> t = compile("{{> greet}}!")
        >>> t.render({"name": "Amy"}, {"greet": "Hi {{name}}"})
        'Hi Amy!'

    Args:
        source: The template string.

    Raises
    ------
        InvalidTemplateError: If source is not a non-empty string.
        ParseError: If section tags do not nest correctly.
    """

    __slots__ = ("_source", "_tokens", "_env")

    def __init__(self, source: str):
        self._tokens = parse(source)
        self._source = source
        # Set by TemplateEnvironment.from_string()
        self._env: TemplateEnvironment | None = None

    # =========================================================================
    # Introspection
    # =========================================================================

    @property
    def source(self) -> str:
        """The template source string."""
        return self._source

    @property
    def tokens(self) -> tuple[Token, ...]:
        """The compiled token tree."""
        return self._tokens

    @property
    def variables(self) -> frozenset[str]:
        """
        Names referenced by interpolation and section tags.

        Names are reported as written, including dotted paths and ``.``, and
        include names used inside sections (which resolve against the
        section's context at render time). Partial bodies are not inspected.

        Example:
            >>> compile("{{a}} {{#list}}{{.}}{{/list}} {{{b.c}}}").variables
            frozenset({'a', 'list', '.', 'b.c'})
        """
        return frozenset(
            token.name
            for token in iter_tokens(self._tokens)
            if isinstance(token, (Name, Raw, Section, InvertedSection))
        )

    @property
    def partial_names(self) -> frozenset[str]:
        """Names of the partials this template references."""
        return frozenset(
            token.name for token in iter_tokens(self._tokens) if isinstance(token, Partial)
        )

    # =========================================================================
    # Rendering
    # =========================================================================

    def render(self, context: Any = None, partials: Mapping[str, str] | None = None) -> str:
        """
        Render the template.

        Args:
            context: Data that tag names resolve against.
            partials: Optional mapping of partial name to template source.

        Returns
        -------
            The rendered string. Missing or mistyped data renders as nothing.
        """
        if self._env is not None:
            context, partials = self._env._merge(context, partials)
        return render_tokens(self._tokens, context, partials)

    def __call__(self, context: Any = None, partials: Mapping[str, str] | None = None) -> str:
        """Render the template; same as ``render()``."""
        return self.render(context, partials)

    def __repr__(self) -> str:
        preview = self._source[:50]
        if len(self._source) > 50:
            preview += "..."
        return f"CompiledTemplate({preview!r})"

    def __str__(self) -> str:
        return self._source


def compile(template: str) -> CompiledTemplate:
    """
    Compile template source into a reusable CompiledTemplate.

    Args:
        template: Template source. Must be a non-empty string.

    Returns
    -------
        The compiled template.

    Raises
    ------
        InvalidTemplateError: If template is not a non-empty string.
        ParseError: If section tags do not nest correctly.

    Example:
        >>> compile("{{a.b.c}}").render({"a": {"b": {"c": 42}}})
        '42'
    """
    return CompiledTemplate(template)
