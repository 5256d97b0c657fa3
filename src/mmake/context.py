"""Runtime request context for a single build invocation."""

from __future__ import annotations

from collections.abc import Iterable


class BuildRequest:
    """Runtime state passed through the build chain.

    ``exit_status`` is overwritten by every command that exits normally, so
    after a build it holds the status of the last one to finish.
    """

    def __init__(
        self,
        targets: Iterable[str] = (),
        *,
        force: bool = False,
        quiet: bool = False,
        dry_run: bool = False,
        signal_status: bool = False,
    ) -> None:
        self.targets = list(targets)
        self.force = force
        self.quiet = quiet
        self.dry_run = dry_run
        self.signal_status = signal_status
        self.exit_status = 0

    def __repr__(self) -> str:
        return (
            f"BuildRequest(targets={self.targets!r}, force={self.force}, "
            f"quiet={self.quiet}, exit_status={self.exit_status})"
        )
