from __future__ import annotations

import logging

from classmonkey import before, unpatch
from classmonkey.logging import (
    MonkeyLogger,
    get_logger,
    setup_logging,
)
from tests.sample_classes import Greeter


def _reset_package_logger():
    package_logger = logging.getLogger("classmonkey")
    for handler in package_logger.handlers:
        handler.close()
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


class TestMonkeyLogger:

    def teardown_method(self):
        _reset_package_logger()

    def test_get_logger_returns_monkey_logger(self):
        logger = get_logger("test.module")
        assert isinstance(logger, MonkeyLogger)
        assert logger.stdlib_logger.name == "classmonkey.test.module"

    def test_setup_logging_runs_without_error(self):
        logger = setup_logging(level="DEBUG")
        assert isinstance(logger, MonkeyLogger)
        assert (
            logging.getLogger("classmonkey").level
            == logging.DEBUG
        )

    def test_setup_logging_replaces_handlers(self):
        setup_logging(level="INFO")
        setup_logging(level="INFO", rich_output=False)
        assert len(logging.getLogger("classmonkey").handlers) == 1

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "monkey.log"
        setup_logging(
            level="INFO", rich_output=False, log_file=str(log_file)
        )
        get_logger("test").info("patches applied")

        for handler in logging.getLogger("classmonkey").handlers:
            handler.flush()
        assert "patches applied" in log_file.read_text()


class TestPatchEvents:

    def test_install_and_restore_are_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="classmonkey")

        before("greet", lambda self, name: None, Greeter)
        unpatch("greet", Greeter)

        messages = [
            record.getMessage()
            for record in caplog.records
            if record.name == "classmonkey.registry"
        ]
        assert any(
            "installed on" in m
            and "tests.sample_classes.Greeter.greet" in m
            for m in messages
        )
        assert any("Restored" in m for m in messages)

