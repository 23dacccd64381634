"""Tests for amiai.config and amiai.log."""

from __future__ import annotations

import io
import logging

import pytest

from amiai.config import AmiConfig
from amiai.log import LOGGER_NAME, configure_logging, enable_debug_logging


class TestAmiConfig:

    def test_defaults(self):
        config = AmiConfig({})
        assert config.debug is False
        assert config.max_depth == 10

    @pytest.mark.parametrize("value,expected", [
        ("true", True), ("1", True), ("YES", True), ("on", True),
        ("false", False), ("0", False), ("", False),
    ])
    def test_debug_env(self, value, expected):
        assert AmiConfig({"AMI_DEBUG": value}).debug is expected

    def test_max_depth_env(self):
        assert AmiConfig({"AMI_MAX_DEPTH": "25"}).max_depth == 25

    @pytest.mark.parametrize("value", ["zero", "-3", "0", "1.5"])
    def test_invalid_max_depth_falls_back(self, value, caplog):
        with caplog.at_level(logging.WARNING, logger="amiai.config"):
            config = AmiConfig({"AMI_MAX_DEPTH": value})
        assert config.max_depth == 10
        assert "AMI_MAX_DEPTH" in caplog.text

    def test_overrides_win(self):
        config = AmiConfig({"AMI_MAX_DEPTH": "25", "AMI_DEBUG": "1"}, max_depth=3, debug=False)
        assert config.max_depth == 3
        assert config.debug is False

    def test_none_override_ignored(self):
        assert AmiConfig({"AMI_MAX_DEPTH": "4"}, max_depth=None).get("max_depth") == 4


class TestConfigureLogging:

    def test_debug_stream(self):
        stream = io.StringIO()
        configure_logging(debug=True, stream=stream)
        logging.getLogger("amiai.env").debug("Detected %s", "claude")
        assert stream.getvalue() == "[am-i-ai] Detected claude\n"

    def test_not_debug_hides_debug(self):
        stream = io.StringIO()
        configure_logging(debug=False, stream=stream)
        logging.getLogger("amiai.tree").debug("noise")
        logging.getLogger("amiai.config").warning("heads up")
        assert stream.getvalue() == "[am-i-ai] heads up\n"

    def test_repeat_calls_do_not_stack_handlers(self):
        first, second = io.StringIO(), io.StringIO()
        configure_logging(debug=True, stream=first)
        configure_logging(debug=True, stream=second)
        logging.getLogger(LOGGER_NAME).debug("once")
        assert first.getvalue() == ""
        assert second.getvalue() == "[am-i-ai] once\n"

    def test_override_skips_env_parsing(self, caplog):
        with caplog.at_level(logging.WARNING, logger="amiai.config"):
            config = AmiConfig({"AMI_MAX_DEPTH": "oops"}, max_depth=7)
        assert config.max_depth == 7
        assert caplog.text == ""


class TestEnableDebugLogging:

    def test_installs_stderr_handler(self, capsys):
        enable_debug_logging()
        logging.getLogger("amiai.tree").debug("walking")
        assert capsys.readouterr().err == "[am-i-ai] walking\n"

    def test_keeps_existing_handler(self):
        stream = io.StringIO()
        configure_logging(debug=False, stream=stream)
        enable_debug_logging()
        logging.getLogger("amiai.tree").debug("walking")
        assert stream.getvalue() == ""
        assert len([h for h in logging.getLogger(LOGGER_NAME).handlers
                    if not isinstance(h, logging.NullHandler)]) == 1
