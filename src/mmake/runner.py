"""Command execution and exit-status propagation."""

from __future__ import annotations

import logging
import signal
import subprocess
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TextIO

from .context import BuildRequest
from .errors import SpawnError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProcessOutcome:
    """How a child process ended: an exit status or a terminating signal."""

    status: int | None = None
    signal: int | None = None

    @property
    def exited(self) -> bool:
        """True if the child terminated normally."""
        return self.signal is None


class CommandRunner:
    """Echo a command line, run it as a child process and wait for it."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def run(self, argv: Sequence[str], request: BuildRequest) -> ProcessOutcome:
        """Run ``argv`` and record its exit status on ``request``.

        Raises SpawnError if the child cannot be started.
        """
        if not argv:
            logger.debug("Skipping empty command")
            return ProcessOutcome(status=0)

        argv = list(argv)
        if not request.quiet:
            print(" ".join(argv), file=self.stream, flush=True)

        if request.dry_run:
            logger.info("[DRY RUN] Would run %s", argv[0])
            return ProcessOutcome(status=0)

        logger.info("Running %s", argv[0])
        try:
            proc = subprocess.run(argv, check=False)
        except OSError as exc:
            raise SpawnError(argv[0], exc) from exc

        if proc.returncode >= 0:
            request.exit_status = proc.returncode
            if proc.returncode:
                logger.info("%s exited with status %d", argv[0], proc.returncode)
            return ProcessOutcome(status=proc.returncode)

        signum = -proc.returncode
        logger.warning("%s terminated by %s", argv[0], _signal_name(signum))
        if request.signal_status:
            request.exit_status = 128 + signum
        return ProcessOutcome(signal=signum)


def _signal_name(signum: int) -> str:
    try:
        return signal.Signals(signum).name
    except ValueError:
        return f"signal {signum}"
