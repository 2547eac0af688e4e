"""
Template environment for shared configuration.

Provides TemplateEnvironment class for managing partials and globals shared
across multiple templates.
"""

from __future__ import annotations

from collections import ChainMap
from collections.abc import Mapping
from typing import Any

from .._logging import scoped_logger
from ..exceptions import ValidationError
from .compiled import CompiledTemplate
from .config import config

log = scoped_logger("environment")


class TemplateEnvironment:
    """
    Shared partials and globals for a group of templates.

    Use an environment when several templates render with the same:

    - **Partials**: Headers, footers, list-item layouts
    - **Global variables**: Site name, version, feature flags

    Templates created with ``from_string()`` see the environment's partials
    and globals at every render. Values passed to ``render()`` take
    precedence: render-time partials override environment partials of the
    same name, and keys of a mapping context shadow globals.

    Parameters
    ----------
        partials: Initial partials, name to template source.
        globals: Initial global variables.

    Example:
        >>> from whisker import TemplateEnvironment
        >>> env = TemplateEnvironment(globals={"site": "Example"})
        >>> env.register_partial("footer", "-- {{site}}")
        >>> page = env.from_string("{{title}}\\n{{> footer}}")
        >>> page.render({"title": "Home"})
        'Home\\n-- Example'

    See Also
    --------
        CompiledTemplate : For standalone templates without shared state.
    """

    def __init__(
        self,
        partials: Mapping[str, str] | None = None,
        globals: Mapping[str, Any] | None = None,
    ):
        self._partials: dict[str, str] = {}
        self._globals: dict[str, Any] = dict(globals or {})
        for name, source in (partials or {}).items():
            self.register_partial(name, source)

    @property
    def partials(self) -> dict[str, str]:
        """
        Partials available to all templates in this environment.

        Modify directly, or use ``register_partial()`` for type checking.
        """
        return self._partials

    @property
    def globals(self) -> dict[str, Any]:
        """
        Global variables available to all templates in this environment.

        Example:
            >>> env.globals["year"] = 2026
        """
        return self._globals

    def register_partial(self, name: str, source: str) -> TemplateEnvironment:
        """
        Register a partial for this environment.

        Args:
            name: Partial name, as used in ``{{> name}}``.
            source: Partial template source.

        Returns
        -------
            Self, for method chaining.

        Raises
        ------
            ValidationError: If name or source is not a string.

        Example:
            >>> env.register_partial("a", "A").register_partial("b", "B")
        """
        if not isinstance(name, str):
            raise ValidationError(
                f"Partial name must be str, got {type(name).__name__}",
                code="INVALID_ARGUMENT",
                details={"param": "name", "type": type(name).__name__},
            )
        if not isinstance(source, str):
            raise ValidationError(
                f"Partial source must be str, got {type(source).__name__}",
                code="INVALID_ARGUMENT",
                details={"param": "source", "type": type(source).__name__},
            )
        self._partials[name] = source
        return self

    def from_string(self, source: str) -> CompiledTemplate:
        """
        Compile a template bound to this environment.

        Args:
            source: Template source string.

        Returns
        -------
            A CompiledTemplate that renders with this environment's partials
            and globals.

        Raises
        ------
            InvalidTemplateError: If source is not a non-empty string.
            ParseError: If section tags do not nest correctly.
        """
        t = CompiledTemplate(source)
        t._env = self
        return t

    def _merge(self, context: Any, partials: Any) -> tuple[Any, dict[str, str]]:
        """Layer render-time context and partials over the environment's."""
        merged_partials = dict(self._partials)
        if isinstance(partials, Mapping):
            merged_partials.update(partials)

        if not self._globals:
            return context, merged_partials

        if context is None:
            return self._globals, merged_partials
        if isinstance(context, Mapping):
            return ChainMap(context, self._globals), merged_partials

        if config.debug:
            log.debug(
                "Context is not a mapping, globals not applied",
                extra={"context_type": type(context).__name__},
            )
        return context, merged_partials
