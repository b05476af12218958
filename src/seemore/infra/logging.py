"""Structured logging bootstrap.

Configures the root logger so every ``logging.getLogger(__name__)`` call
across the package emits either:

* **JSON lines** (``json_output=True``): machine-parseable, one object
  per record.
* **Human-readable** (``json_output=False``, default): timestamp-prefixed
  lines for local use, written to stderr so they never interleave with
  rendered text on stdout.
"""

from __future__ import annotations

import logging
import sys

from seemore.configs.system import LoggingConfig

_DEV_FORMAT = "%(levelname)-8s %(asctime)s %(name)s  %(message)s"
_DEV_DATEFMT = "%H:%M:%S"


def setup_logging(config: LoggingConfig | None = None) -> None:
    """Configure the root logger (call once at startup)."""
    if config is None:
        config = LoggingConfig()

    level = config.level.upper()
    root = logging.getLogger()
    root.setLevel(level)

    handler = logging.StreamHandler(sys.stderr)

    if config.json_output:
        from pythonjsonlogger.json import JsonFormatter

        formatter: logging.Formatter = JsonFormatter(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            rename_fields={
                "asctime": "timestamp",
                "levelname": "level",
                "name": "logger",
            },
        )
    else:
        formatter = logging.Formatter(fmt=_DEV_FORMAT, datefmt=_DEV_DATEFMT)

    handler.setFormatter(formatter)
    root.handlers = [handler]

    logging.getLogger("PIL").setLevel(logging.WARNING)
