"""Fatal build errors."""

from __future__ import annotations


class MakeError(Exception):
    """Base class for errors that abort the whole invocation."""

    exit_status: int = 1


class ConfigurationError(MakeError):
    """A required prerequisite is missing and nothing knows how to make it."""


class SpawnError(MakeError):
    """A command's child process could not be created."""

    def __init__(self, program: str, error: OSError) -> None:
        super().__init__(f"{program}: {error.strerror or error}")
        self.program = program
        self.errno = error.errno
        self.exit_status = error.errno or 1
