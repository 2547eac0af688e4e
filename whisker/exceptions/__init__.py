"""
Whisker exceptions.

This module defines the exception hierarchy for whisker:

    WhiskerError (base)
    ├── TemplateError - Errors while compiling a template
    │   ├── InvalidTemplateError - Template source is not a usable string
    │   └── ParseError - Section open/close markers do not match
    └── ValidationError - Invalid parameter value
"""

from .exceptions import (
    InvalidTemplateError,
    ParseError,
    TemplateError,
    ValidationError,
    WhiskerError,
)

# =============================================================================
# Public API - See whisker/__init__.py for the top-level re-exports
# =============================================================================
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
