"""
Whisker exceptions.

This module defines the exception hierarchy for whisker:

    WhiskerError (base)
    ├── TemplateError - Errors while compiling a template
    │   ├── InvalidTemplateError - Template source is not a usable string
    │   └── ParseError - Section open/close markers do not match
    └── ValidationError - Invalid parameter value

Only compilation raises template errors. Rendering a compiled template never
raises for missing or malformed data.

Usage:
    try:
        whisker.compile("{{#items}}{{name}}{{/item}}")
    except whisker.ParseError as e:
        print(f"Bad section {e.section!r} ({e.reason})")
    except whisker.WhiskerError as e:
        # Catch any whisker error with structured details
        print(f"Error {e.code}: {e}")
        print(f"Details: {e.details}")

See Also
--------
    WhiskerError : Base exception for all whisker errors.
"""

from typing import Any

__all__ = [
    # Base
    "WhiskerError",
    # Template
    "TemplateError",
    "InvalidTemplateError",
    "ParseError",
    # Validation
    "ValidationError",
]


class WhiskerError(Exception):
    """
    Base exception for all whisker errors.

    All whisker-specific exceptions inherit from this class, enabling:
    - Catch-all handling: ``except whisker.WhiskerError``
    - Stable string-based error codes for programmatic handling
    - Structured details for debugging and logging

    Attributes
    ----------
    message : str
        Human-readable error description.
    code : str
        Stable, string-based error code (e.g., "TEMPLATE_PARSE_ERROR").
        Use this for programmatic error handling.
    details : dict[str, Any]
        Structured context (e.g., {"section": "items", "reason": "unclosed"}).

    Example
    -------
    >>> try:
    ...     whisker.compile("{{/a}}")
    ... except whisker.WhiskerError as e:
    ...     print(f"Error code: {e.code}")
    ...     print(f"Details: {e.details}")
    Error code: TEMPLATE_PARSE_ERROR
    Details: {'section': 'a', 'reason': 'unopened'}
    """

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.details = details or {}

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, code={self.code!r})"


# =============================================================================
# Template Errors
# =============================================================================


class TemplateError(WhiskerError, RuntimeError):
    """
    Base error for template operations.

    This exception (or its subclasses) is raised when a template cannot be
    compiled.
    """

    def __init__(
        self,
        message: str,
        code: str = "TEMPLATE_ERROR",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, details)


class InvalidTemplateError(TemplateError, ValueError):
    """
    Template source is not a usable template string.

    Raised by ``compile()`` and ``parse()`` when the source is not a
    ``str`` or is the empty string.
    """

    def __init__(
        self,
        message: str | None = None,
        code: str = "TEMPLATE_INVALID",
        details: dict[str, Any] | None = None,
    ):
        if message is None:
            message = "Template must be a non-empty string"
        super().__init__(message, code, details)


class ParseError(TemplateError):
    """
    Section markers in the template do not nest correctly.

    Two reasons are distinguished:

    - ``"unopened"``: a close tag ``{{/name}}`` appears with no section open.
      ``section`` is the name on the close tag.
    - ``"unclosed"``: a section is still open where it must be closed, either
      because a close tag names a different section or because the template
      ends. ``section`` is the name of the section left open.

    Example:
        >>> whisker.compile("{{#a}}x{{/b}}")
        ParseError: Unclosed section "a"
    """

    def __init__(
        self,
        section: str,
        reason: str,
        code: str = "TEMPLATE_PARSE_ERROR",
        details: dict[str, Any] | None = None,
    ):
        message = f'{reason.capitalize()} section "{section}"'
        merged = {"section": section, "reason": reason}
        if details:
            merged.update(details)
        super().__init__(message, code, merged)
        self.section = section
        self.reason = reason


# =============================================================================
# Validation Errors
# =============================================================================


class ValidationError(WhiskerError, ValueError):
    """
    Invalid parameter value.

    Raised when configuration or environment APIs receive an argument of the
    wrong type or an inappropriate value (e.g., ``max_partial_depth=0``).

    This exception inherits from both WhiskerError and ValueError, so both work::

        except whisker.WhiskerError:   # catches all whisker errors
        except ValueError:             # catches validation errors (Pythonic)
    """

    def __init__(
        self,
        message: str,
        code: str = "INVALID_ARGUMENT",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, details)
