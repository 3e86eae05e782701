"""Logging helpers for sqlweave."""

from __future__ import annotations

import logging

_ROOT = "sqlweave"
_DIALECT_NAMESPACE = f"{_ROOT}.dialects."


def dialect_of(logger_name: str) -> str:
    """Return the dialect a ``sqlweave.dialects.<name>`` logger belongs to, else ``-``."""
    if logger_name.startswith(_DIALECT_NAMESPACE):
        return logger_name[len(_DIALECT_NAMESPACE):].split(".", 1)[0] or "-"
    return "-"


class DialectNameFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.dialect = dialect_of(record.name)
        return True


def configure_logging(level: int = logging.INFO) -> None:
    logger = logging.getLogger(_ROOT)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | dialect=%(dialect)s | %(name)s | %(message)s"
    )
    handler.setFormatter(formatter)
    handler.addFilter(DialectNameFilter())
    logger.addHandler(handler)
    logger.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    configure_logging()
    return logging.getLogger(f"{_ROOT}.{name}")
