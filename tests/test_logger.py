"""Tests for the launcher's crash hook."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from runjava.logger import _log_launcher_crash


class TestLauncherCrashHook:
    def test_logs_and_exits_1(self):
        exc = ValueError("boom")
        with (
            patch("runjava.logger.logger") as mock_logger,
            pytest.raises(SystemExit) as exc_info,
        ):
            _log_launcher_crash(ValueError, exc, None)
        assert exc_info.value.code == 1
        mock_logger.critical.assert_called_once()
        assert mock_logger.critical.call_args.kwargs["error_type"] == "ValueError"

    def test_keyboard_interrupt_uses_default_hook(self):
        with patch("runjava.logger.sys.__excepthook__") as default_hook:
            _log_launcher_crash(KeyboardInterrupt, KeyboardInterrupt(), None)
        default_hook.assert_called_once()
