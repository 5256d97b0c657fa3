"""Tests for mmake.errors."""

from __future__ import annotations

import errno

from mmake.errors import ConfigurationError, MakeError, SpawnError


class TestErrors:
    def test_configuration_error_exit_status(self):
        exc = ConfigurationError("No rule to make target 'x'")
        assert isinstance(exc, MakeError)
        assert exc.exit_status == 1
        assert str(exc) == "No rule to make target 'x'"

    def test_spawn_error_uses_errno(self):
        exc = SpawnError("cc", OSError(errno.EACCES, "Permission denied"))
        assert exc.exit_status == errno.EACCES
        assert exc.errno == errno.EACCES
        assert str(exc) == "cc: Permission denied"

    def test_spawn_error_without_errno(self):
        exc = SpawnError("cc", OSError("boom"))
        assert exc.exit_status == 1
        assert "cc" in str(exc)
