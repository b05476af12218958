"""Tests for logging bootstrap."""

import json
import logging

from seemore.configs.system import LoggingConfig
from seemore.infra.logging import setup_logging


class TestSetupLogging:
    def setup_method(self):
        self.root = logging.getLogger()
        self.saved = (self.root.level, list(self.root.handlers))

    def teardown_method(self):
        self.root.setLevel(self.saved[0])
        self.root.handlers = self.saved[1]

    def test_human_readable_by_default(self, capsys):
        setup_logging()

        logging.getLogger("seemore.test").info("hello")

        err = capsys.readouterr().err
        assert "INFO" in err
        assert "seemore.test  hello" in err

    def test_json_lines(self, capsys):
        setup_logging(LoggingConfig(level="debug", json_output=True))

        logging.getLogger("seemore.test").debug("truncated")

        record = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert record["message"] == "truncated"
        assert record["level"] == "DEBUG"
        assert record["logger"] == "seemore.test"
        assert "timestamp" in record

    def test_pil_logger_quieted(self):
        setup_logging(LoggingConfig(level="DEBUG"))

        assert logging.getLogger("PIL").level == logging.WARNING
