"""
Template module configuration.

Provides runtime configuration for template behavior. Settings can be
modified programmatically without environment variables.

Example:
    >>> from whisker.template import config
    >>> config.debug = True  # Log compile and partial expansion details
    >>> config.max_partial_depth = 16
"""

from ..exceptions import ValidationError

DEFAULT_MAX_PARTIAL_DEPTH = 64


class _TemplateConfig:
    """
    Singleton configuration for template module settings.

    This is a singleton - import and modify `config` directly:

        from whisker.template import config
        config.debug = True

    Attributes
    ----------
        debug: When True, the parser and renderer emit DEBUG log records.
            Useful for tracing which partials a render expands.
        max_partial_depth: Maximum nesting of partial expansions in one
            render. A partial that would go deeper renders as nothing.
    """

    __slots__ = ("_debug", "_max_partial_depth")

    def __init__(self) -> None:
        self._debug = False
        self._max_partial_depth = DEFAULT_MAX_PARTIAL_DEPTH

    @property
    def debug(self) -> bool:
        """Enable debug output for template operations."""
        return self._debug

    @debug.setter
    def debug(self, value: bool) -> None:
        if not isinstance(value, bool):
            raise ValidationError(
                f"debug must be bool, got {type(value).__name__}",
                code="INVALID_ARGUMENT",
                details={"param": "debug", "type": type(value).__name__},
            )
        self._debug = value

    @property
    def max_partial_depth(self) -> int:
        """Maximum partial nesting depth per render."""
        return self._max_partial_depth

    @max_partial_depth.setter
    def max_partial_depth(self, value: int) -> None:
        # bool is an int subclass; reject it explicitly
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationError(
                f"max_partial_depth must be int, got {type(value).__name__}",
                code="INVALID_ARGUMENT",
                details={"param": "max_partial_depth", "type": type(value).__name__},
            )
        if value < 1:
            raise ValidationError(
                f"max_partial_depth must be at least 1, got {value}",
                code="INVALID_ARGUMENT",
                details={"param": "max_partial_depth", "value": value},
            )
        self._max_partial_depth = value

    def reset(self) -> None:
        """Restore default settings."""
        self._debug = False
        self._max_partial_depth = DEFAULT_MAX_PARTIAL_DEPTH

    def __repr__(self) -> str:
        return (
            f"TemplateConfig(debug={self._debug}, "
            f"max_partial_depth={self._max_partial_depth})"
        )


# Module-level singleton
config = _TemplateConfig()
