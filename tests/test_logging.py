"""Tests for structlog setup."""

from __future__ import annotations

import json
import logging

import structlog

from tfbtp.utils.logging import get_logger, setup_logging


class TestSetupLogging:
    def test_json_renderer(self, caplog):
        setup_logging(level="DEBUG", json=True)
        try:
            with caplog.at_level(logging.DEBUG):
                get_logger("tfbtp.test").info("thing.happened", count=2)
            payload = json.loads(caplog.records[-1].getMessage())
            assert payload["event"] == "thing.happened"
            assert payload["count"] == 2
            assert payload["level"] == "info"
            assert payload["logger"] == "tfbtp.test"
        finally:
            structlog.reset_defaults()

    def test_level_filter(self, caplog):
        setup_logging(level="WARNING", json=True)
        try:
            with caplog.at_level(logging.WARNING):
                get_logger("tfbtp.test").debug("hidden")
            assert not [r for r in caplog.records if "hidden" in r.getMessage()]
        finally:
            structlog.reset_defaults()
