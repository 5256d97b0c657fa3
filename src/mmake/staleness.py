"""Timestamp-based staleness checks."""

from __future__ import annotations

import logging
import os

from .errors import ConfigurationError
from .rules import RuleTable

logger = logging.getLogger(__name__)


def _mtime_seconds(path: str) -> int:
    """Modification time of the link itself, truncated to whole seconds."""
    return os.lstat(path).st_mtime_ns // 1_000_000_000


class StalenessChecker:
    """Decide whether a target is out of date relative to one prerequisite.

    Files are stat'ed afresh on every call; nothing is cached.
    """

    def needs_rebuild(self, target: str, prereq: str, rules: RuleTable) -> bool:
        """Return True if ``target`` must be rebuilt because of ``prereq``.

        A missing prerequisite counts as stale when a rule can make it, and
        raises ConfigurationError when nothing can. Otherwise the target is
        stale only if it is missing or strictly older than the prerequisite,
        comparing whole seconds; equal modification times are up to date.
        """
        if not os.path.exists(prereq):
            if rules.lookup(prereq) is None:
                raise ConfigurationError(f"No rule to make target '{prereq}'")
            logger.debug("'%s' is stale; prerequisite '%s' does not exist yet", target, prereq)
            return True

        if not os.path.exists(target):
            logger.debug("'%s' is stale; it does not exist", target)
            return True

        prereq_mtime = _mtime_seconds(prereq)
        target_mtime = _mtime_seconds(target)
        if prereq_mtime > target_mtime:
            logger.debug("'%s' is stale; '%s' is newer", target, prereq)
            return True

        logger.debug("Skipping '%s' for '%s'; up to date", target, prereq)
        return False
