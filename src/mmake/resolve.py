"""Resolver — expand ${...} references in rule values."""

from __future__ import annotations

import logging
import os
import re
from typing import Any

logger = logging.getLogger(__name__)

_INTERP_PATTERN = re.compile(r"\$\$\{|(\$\{([^{}]+)\})")


def default_variables(variables: dict[str, Any] | None = None) -> dict[str, Any]:
    """Build the lookup context: ``env``, ``CWD`` and any user variables."""
    context: dict[str, Any] = {"env": dict(os.environ), "CWD": os.getcwd}
    context.update(variables or {})
    return context


class Resolver:
    """Resolve ${...} interpolation references against a context dict."""

    def __init__(self, context: dict[str, Any] | None = None) -> None:
        self._context = context if context is not None else default_variables()

    def _resolve_ref(self, ref: str) -> Any:
        """Resolve a dotted reference (e.g., 'env.HOME') against the context."""
        parts = ref.split(".")
        current: Any = self._context

        for part in parts:
            try:
                current = current[part]
            except (KeyError, TypeError):
                try:
                    current = getattr(current, part)
                except AttributeError:
                    raise ValueError(f"undefined variable '{ref}'") from None

        if callable(current) and not isinstance(current, type):
            current = current()

        logger.debug("Resolved '%s' -> %r", ref, current)
        return current

    def resolve_value(self, value: Any) -> Any:
        """Resolve ${...} interpolations in a single value.

        If the entire string is a single ${ref}, returns the resolved object
        directly (preserving type). If ${ref} is embedded in a larger string,
        the resolved value is stringified. Use $${...} for literal ${...}.
        Non-string values are returned unchanged.
        """
        if not isinstance(value, str) or "${" not in value:
            return value

        match = re.fullmatch(r"\$\{([^{}]+)\}", value)
        if match:
            return self._resolve_ref(match.group(1).strip())

        def _replace(m: re.Match) -> str:  # type: ignore[type-arg]
            if m.group(0) == "$${":
                return "${"
            ref = m.group(2).strip()
            return str(self._resolve_ref(ref))

        return _INTERP_PATTERN.sub(_replace, value)
