"""
Logging Configuration
Custom JSON Logger implementation for structured request logs.

Provides:
- CustomJsonFormatter: one JSON object per record, extra fields included
- setup_logging: YAML dictConfig loader with environment substitution
"""

import json
import logging
import logging.config
import os
import string
from datetime import datetime, timezone

import yaml

_STANDARD_ATTRS = {
    "args",
    "asctime",
    "created",
    "exc_info",
    "exc_text",
    "filename",
    "funcName",
    "levelname",
    "levelno",
    "lineno",
    "module",
    "msecs",
    "message",
    "msg",
    "name",
    "pathname",
    "process",
    "processName",
    "relativeCreated",
    "stack_info",
    "taskName",
    "thread",
    "threadName",
}


class CustomJsonFormatter(logging.Formatter):
    """
    JSON Formatter.

    Fields:
      - _time: ISO8601 timestamp (millisecond precision)
      - level: Log level
      - logger: Logger name (e.g. normalizer.body, normalizer.update_check)
      - message: Log message
      - any ``extra=`` fields attached to the record
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "_time": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(
                timespec="milliseconds"
            ),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key, value in record.__dict__.items():
            if key not in _STANDARD_ATTRS and not key.startswith("_"):
                log_data[key] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False, default=str)


def setup_logging(config_path: str = "logging.yml", default_level: str = "INFO"):
    """
    Initialize logging from a YAML dictConfig file.

    ${VAR} placeholders are filled from the environment. LOG_LEVEL falls back to
    default_level and is upper-cased, so "debug" and "DEBUG" both work. Without
    the file, basicConfig is used at that same level.
    """
    level = (os.environ.get("LOG_LEVEL") or default_level).strip().upper()
    if not os.path.exists(config_path):
        logging.basicConfig(level=level)
        return

    with open(config_path, "r", encoding="utf-8") as f:
        template = string.Template(f.read())

    content = template.safe_substitute({**os.environ, "LOG_LEVEL": level})
    logging.config.dictConfig(yaml.safe_load(content))
