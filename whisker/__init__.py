r"""
Whisker - Logic-less templates for Python.

A template is compiled once into an immutable token tree, then rendered any
number of times against a context (and optional named partials). Rendering
never raises for missing or mistyped data; only malformed templates fail, and
they fail at compile time.

Quick Start
-----------

    >>> import whisker
    >>> t = whisker.compile("Hello {{name}}!")
    >>> t.render({"name": "World"})
    'Hello World!'

Sections iterate lists, push nested objects and gate on truthiness:

    >>> t = whisker.compile("{{#users}}{{name}}{{^admin}} (guest){{/admin}}\n{{/users}}")
    >>> print(t.render({"users": [{"name": "Amy", "admin": True}, {"name": "Bo"}]}))
    Amy
    Bo (guest)

Partials are passed per render as template source:

    >>> t = whisker.compile("{{> greet}}!")
    >>> t.render({"name": "Amy"}, {"greet": "Hi {{name}}"})
    'Hi Amy!'


Errors
------

    >>> whisker.compile("{{#a}}x{{/b}}")
    Traceback (most recent call last):
    ...
    whisker.exceptions.exceptions.ParseError: Unclosed section "a"

All errors derive from ``whisker.WhiskerError`` and carry a stable ``code``
and a ``details`` dict.


Logging
-------

Whisker logs through the standard ``logging`` module under the ``whisker``
logger. Use ``whisker.setup_logging()`` or the ``WHISKER_LOG_LEVEL`` and
``WHISKER_LOG_FORMAT`` environment variables to configure it.
"""

from whisker._logging import setup_logging as setup_logging
from whisker._version import __version__ as __version__

# Exceptions (all also available via whisker.exceptions)
from whisker.exceptions import (
    InvalidTemplateError,
    ParseError,
    TemplateError,
    ValidationError,
    WhiskerError,
)

# Templates
from whisker.template import (
    CompiledTemplate,
    TemplateEnvironment,
    compile,
    parse,
    render,
)

# =============================================================================
# Public API
# =============================================================================
__all__ = [
    # Templates
    "compile",
    "parse",
    "render",
    "CompiledTemplate",
    "TemplateEnvironment",
    # Exceptions
    "WhiskerError",
    "TemplateError",
    "InvalidTemplateError",
    "ParseError",
    "ValidationError",
    # Logging
    "setup_logging",
]
