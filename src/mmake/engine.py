"""BuildEngine — recursive, timestamp-driven target resolution."""

from __future__ import annotations

import logging

from .context import BuildRequest
from .errors import ConfigurationError
from .rules import Rule, RuleTable
from .runner import CommandRunner
from .staleness import StalenessChecker

logger = logging.getLogger(__name__)


class BuildEngine:
    """Walk the rule graph depth first and run the commands that are due.

    The graph is not checked for cycles; a cyclic rule set recurses until
    Python raises RecursionError.
    """

    def __init__(
        self,
        runner: CommandRunner | None = None,
        checker: StalenessChecker | None = None,
    ) -> None:
        self.runner = runner or CommandRunner()
        self.checker = checker or StalenessChecker()

    def run(self, rules: RuleTable, request: BuildRequest) -> int:
        """Build every requested target in order, or the default target.

        Returns the status of the last command that exited normally.
        """
        targets = request.targets
        if not targets:
            default = rules.default_target
            if default is None:
                raise ConfigurationError("No targets")
            targets = [default]

        for target in targets:
            logger.info("Building target '%s'", target)
            self.build(target, rules, request)
        return request.exit_status

    def build(self, target: str, rules: RuleTable, request: BuildRequest) -> None:
        """Build ``target`` after recursively building its prerequisites.

        Targets without a rule are skipped. A rule without prerequisites
        always runs. Otherwise the command runs once when forced, or once
        for every prerequisite the checker reports as stale.
        """
        rule = rules.lookup(target)
        if rule is None:
            logger.debug("No rule for '%s'; skipping", target)
            return

        for prereq in rule.prerequisites:
            self.build(prereq, rules, request)

        if not rule.prerequisites:
            self._execute(rule, request)
        elif request.force:
            logger.debug("Forcing rebuild of '%s'", target)
            self._execute(rule, request)
        else:
            for prereq in rule.prerequisites:
                if self.checker.needs_rebuild(target, prereq, rules):
                    self._execute(rule, request)

    def _execute(self, rule: Rule, request: BuildRequest) -> None:
        outcome = self.runner.run(rule.command, request)
        logger.debug("'%s' finished: %s", rule.name, outcome)
