"""Tests for the shared logging setup."""

from __future__ import annotations

import logging

from bigip_provider.base.main import LOG_FORMAT


def test_log_format_puts_level_in_brackets() -> None:
    record = logging.LogRecord("bigip_provider.bigip.connector", logging.WARNING, __file__, 1,
                               "Could not validate connection to BigIP", None, None)

    line = logging.Formatter(LOG_FORMAT).format(record)

    assert line == "[WARNING] bigip_provider.bigip.connector Could not validate connection to BigIP"
