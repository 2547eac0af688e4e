"""
Logic-less templates with ``{{ }}`` tags.

Templates compile once into an immutable token tree and render many times
against different data. There are no expressions: tags only look up names,
test emptiness and iterate.

Tag Reference
-------------

    {{name}}            Escaped value of ``name``
    {{{name}}}          Unescaped value
    {{&name}}           Unescaped value
    {{a.b.c}}           Dotted lookup through nested data
    {{#list}}..{{/list}}  Render once per item, or once if truthy
    {{^list}}..{{/list}}  Render only if empty or missing
    {{> partial}}       Insert a partial supplied at render time
    {{! comment }}      Dropped
    {{.}}               Current item inside a list of scalars

Quick Start
-----------

    >>> from whisker.template import compile
    >>> t = compile("{{#items}}<li>{{.}}</li>{{/items}}{{^items}}none{{/items}}")
    >>> t.render({"items": ["a", "b"]})
    '<li>a</li><li>b</li>'
    >>> t.render({})
    'none'

See Also
--------
whisker.TemplateEnvironment : Share partials and globals between templates.
"""

from .compiled import CompiledTemplate, compile
from .config import config as config
from .environment import TemplateEnvironment
from .parser import parse
from .renderer import render
from .tokens import InvertedSection, Name, Partial, Raw, Section, Text, Token

# =============================================================================
# Public API - See whisker/__init__.py for the top-level re-exports
# =============================================================================
__all__ = [
    # Core
    "compile",
    "parse",
    "render",
    "CompiledTemplate",
    "TemplateEnvironment",
    # Tokens
    "Token",
    "Text",
    "Name",
    "Raw",
    "Section",
    "InvertedSection",
    "Partial",
]
