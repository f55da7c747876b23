"""Logging setup for vectorgfx, driven by ``GeometryConfig``."""

from __future__ import annotations

import json
import logging
import queue
from datetime import UTC, datetime
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

from vectorgfx.runtime.config import GeometryConfig, get_geometry_config

PACKAGE_LOGGER = "vectorgfx"
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Attributes of a bare record plus the two that Formatter.format adds.
_RECORD_ATTRIBUTES = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}

_listener: QueueListener | None = None


class JsonFormatter(logging.Formatter):
    """Render one JSON object per record; ``extra=`` values land under ``fields``."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, object] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        fields = {
            key: value for key, value in vars(record).items() if key not in _RECORD_ATTRIBUTES
        }
        if fields:
            entry["fields"] = fields
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=True, default=str)


def configure_logging(config: GeometryConfig | None = None) -> None:
    """Install root handlers from ``config`` (the active config when omitted).

    The console uses ``log_format``. When ``log_file`` is set, records also go
    to that file as JSON lines, written from a ``QueueListener`` thread.
    """
    global _listener

    if config is None:
        config = get_geometry_config()
    shutdown_logging()

    console = logging.StreamHandler()
    console.setFormatter(_formatter(config.log_format))

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.setLevel(logging.getLevelNamesMapping().get(config.log_level.upper(), logging.INFO))

    if not config.log_file:
        root.addHandler(console)
        return

    path = Path(config.log_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    log_file = logging.FileHandler(path, encoding="utf-8", delay=True)
    log_file.setFormatter(JsonFormatter())

    records: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    root.addHandler(QueueHandler(records))
    _listener = QueueListener(records, console, log_file, respect_handler_level=True)
    _listener.start()


def shutdown_logging() -> None:
    """Drain and stop the file listener, if ``configure_logging`` started one."""
    global _listener

    listener, _listener = _listener, None
    if listener is None:
        return
    listener.stop()
    for handler in listener.handlers:
        handler.close()


def setup_logging() -> None:
    """Configure from the active ``GeometryConfig`` unless the root logger has handlers."""
    if logging.getLogger().handlers:
        return
    configure_logging(get_geometry_config())


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``vectorgfx`` namespace."""
    if name == PACKAGE_LOGGER or name.startswith(f"{PACKAGE_LOGGER}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")


def _formatter(kind: str) -> logging.Formatter:
    if kind.lower() == "json":
        return JsonFormatter()
    return logging.Formatter(TEXT_FORMAT)


__all__ = [
    "JsonFormatter",
    "PACKAGE_LOGGER",
    "configure_logging",
    "get_logger",
    "setup_logging",
    "shutdown_logging",
]
