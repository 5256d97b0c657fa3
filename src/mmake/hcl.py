"""HCL loading engine — parse rule files into a RuleTable."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import hcl2
import jinja2
from lark.exceptions import LarkError

from .resolve import Resolver, default_variables
from .rules import RuleTable

logger = logging.getLogger(__name__)

DEFAULT_RULE_FILE = "mmakefile"


def load(
    file: str | Path,
    *,
    context: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Load and parse a single HCL file, rendering Jinja2 templates with context."""
    file = Path(file)
    text = file.read_text()
    ctx = context if context is not None else {}
    env = jinja2.Environment(
        undefined=jinja2.StrictUndefined,
        keep_trailing_newline=True,
        autoescape=False,
    )
    try:
        template = env.from_string(text)
        text = template.render(ctx)
    except jinja2.TemplateError as exc:
        raise ValueError(f"{file}: {exc}") from exc
    try:
        return hcl2.loads(text)
    except LarkError as exc:
        raise ValueError(f"{file}: {exc}") from exc


def read_rules(
    file: str | Path,
    *,
    variables: dict[str, Any] | None = None,
) -> RuleTable:
    """Load a rule file and return a ready RuleTable.

    ``variables`` feed both the Jinja2 render and ${...} resolution.
    """
    logger.debug("Reading rules from %s", file)
    data = load(file, context=variables)
    table = RuleTable()
    try:
        table.load(data, resolver=Resolver(default_variables(variables)))
    except ValueError as exc:
        raise ValueError(f"{file}: {exc}") from exc
    logger.info("Loaded %d rule(s) from %s", len(table), file)
    return table
