"""Rule model and the rule table the build engine walks."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from pydantic import BaseModel

from .resolve import Resolver

logger = logging.getLogger(__name__)


class Rule(BaseModel):
    """How to make one target: its prerequisites and an argv-style command."""

    model_config = {"frozen": True}

    name: str
    prerequisites: tuple[str, ...] = ()
    command: tuple[str, ...] = ()


def _as_strings(rule_name: str, key: str, value: Any, resolver: Resolver) -> list[str]:
    """Normalize a rule attribute to a list of resolved strings."""
    if value is None:
        return []
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list):
        raise ValueError(f"Rule '{rule_name}': '{key}' must be a string or a list of strings")
    return [str(resolver.resolve_value(item)) for item in value]


class RuleTable(Mapping[str, Rule]):
    """Rules keyed by target name, in declaration order."""

    def __init__(self, rules: Iterable[Rule] = (), *, default: str | None = None) -> None:
        self._rules: dict[str, Rule] = {}
        self._default = default
        for rule in rules:
            self.add(rule)

    @property
    def default_target(self) -> str | None:
        """The explicitly designated default, or else the first rule declared."""
        if self._default is not None:
            return self._default
        return next(iter(self._rules), None)

    def add(self, rule: Rule) -> None:
        """Register a rule; target names must be unique."""
        if rule.name in self._rules:
            raise ValueError(f"Duplicate rule: '{rule.name}'")
        logger.debug("Found rule '%s'", rule.name)
        self._rules[rule.name] = rule

    def lookup(self, name: str) -> Rule | None:
        return self._rules.get(name)

    def load(self, data: dict[str, Any], *, resolver: Resolver | None = None) -> None:
        """Extract rule blocks (and an optional ``default``) from a parsed data dict.

        Parsed structure:
            {"default": "prog", "rule": [{"prog": {"prerequisites": [...], "command": [...]}}]}
        """
        resolver = resolver or Resolver()

        default = data.get("default")
        if default is not None:
            if not isinstance(default, str):
                raise ValueError("'default' must be a target name")
            self._default = default

        for rule_block in data.get("rule", []):
            for name, attrs in rule_block.items():
                attrs = attrs or {}
                unknown = set(attrs) - {"prerequisites", "command"}
                if unknown:
                    raise ValueError(f"Rule '{name}' has unknown attribute(s): {', '.join(sorted(unknown))}")
                self.add(
                    Rule(
                        name=name,
                        prerequisites=_as_strings(name, "prerequisites", attrs.get("prerequisites"), resolver),
                        command=_as_strings(name, "command", attrs.get("command"), resolver),
                    )
                )

    def __getitem__(self, name: str) -> Rule:
        return self._rules[name]

    def __contains__(self, name: object) -> bool:
        return name in self._rules

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"RuleTable(rules={len(self._rules)}, default={self.default_target!r})"
