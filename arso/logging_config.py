"""Logging setup: one line per record, with ``extra`` fields appended as JSON."""
import json
import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Attributes every LogRecord carries; anything else was passed via ``extra``
_RECORD_ATTRS = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}


def record_extras(record: logging.LogRecord) -> dict:
    """Fields attached to a record through ``extra=``."""
    return {k: v for k, v in record.__dict__.items() if k not in _RECORD_ATTRS}


class ExtraFormatter(logging.Formatter):
    """Formats the record, then appends its extras (url, href, counts) as JSON."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extras = record_extras(record)
        if not extras:
            return line
        return f"{line} | {json.dumps(extras, default=str, ensure_ascii=False)}"


def configure_logging(level: str = "INFO") -> None:
    """Install the ExtraFormatter on the root logger once; later calls only set the level."""
    if logging.root.handlers:
        logging.root.setLevel(level.upper())
        return
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    for handler in logging.root.handlers:
        handler.setFormatter(ExtraFormatter(LOG_FORMAT))
