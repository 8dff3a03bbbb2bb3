"""Tests for application logging."""

from unittest.mock import patch
from mailscan.config.settings import appsettings
from mailscan.lib import log


def test_log_emits_debug_record():
    with (
        patch.object(appsettings, "beQuiet", False),
        patch.object(log, "app_logger") as mock_logger,
    ):
        log.LOG("scanner message")
    mock_logger.opt.return_value.debug.assert_called_once_with("scanner message")


def test_log_respects_be_quiet():
    with (
        patch.object(appsettings, "beQuiet", True),
        patch.object(log, "app_logger") as mock_logger,
    ):
        log.LOG("scanner message")
    mock_logger.opt.assert_not_called()
