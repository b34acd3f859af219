"""
AlgoLex Logging
================

:class:`LexLogger` is a :class:`logging.LoggerAdapter` bound to one
AlgoLex tool. Records go to a Rich console handler on stderr and,
optionally, to a rotating log file written as plain text or JSON lines.

Keyword arguments that :mod:`logging` does not recognise are collected
into the record's ``context`` (``log.info("done", names=3)``), which the
JSON formatter writes as a nested object.

References:
    - Python logging HOWTO. https://docs.python.org/3/howto/logging.html
    - Rich library. https://github.com/Textualize/rich
"""

from __future__ import annotations

import json
import logging
from contextlib import contextmanager
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Iterator, MutableMapping

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

_LOG_THEME = Theme(
    {
        "log.level.debug": "dim cyan",
        "log.level.info": "bold bright_blue",
        "log.level.warning": "bold yellow",
        "log.level.error": "bold red",
    }
)

_PLAIN_FORMAT = "%(asctime)s %(levelname)-8s [%(tool_name)s:%(operation)s] %(message)s"

# Keyword arguments consumed by Logger._log itself
_LOGGING_KWARGS = frozenset({"exc_info", "stack_info", "stacklevel", "extra"})

_MAX_LOG_BYTES = 5 * 1024 * 1024
_LOG_BACKUPS = 3


class _JSONLineFormatter(logging.Formatter):
    """One JSON object per record: time, level, tool, operation, message,
    context and, when present, the formatted exception."""

    def format(self, record: logging.LogRecord) -> str:
        line: dict[str, Any] = {
            "time": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "tool": getattr(record, "tool_name", None),
            "operation": getattr(record, "operation", None),
            "message": record.getMessage(),
        }
        context = getattr(record, "context", None)
        if context:
            line["context"] = context
        if record.exc_info:
            line["error"] = self.formatException(record.exc_info)
        return json.dumps(line, ensure_ascii=False, default=str)


def _console_handler(level: int) -> logging.Handler:
    handler = RichHandler(
        console=Console(theme=_LOG_THEME, stderr=True),
        level=level,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("[%(operation)s] %(message)s"))
    return handler


def _file_handler(path: Path, level: int, json_logs: bool) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        path, maxBytes=_MAX_LOG_BYTES, backupCount=_LOG_BACKUPS, encoding="utf-8"
    )
    handler.setLevel(level)
    handler.setFormatter(
        _JSONLineFormatter() if json_logs else logging.Formatter(_PLAIN_FORMAT)
    )
    return handler


class LexLogger(logging.LoggerAdapter):
    """Logger adapter that stamps records with the tool and operation.

    Usage::

        log = LexLogger("decomposer.engine", log_file="algolex.log", json_logs=True)
        with log.operation("decompose_file"):
            log.info("Parsed %s", path, names=12)

    Creating a second ``LexLogger`` for the same tool replaces (and closes)
    the handlers of the first.
    """

    def __init__(
        self,
        tool_name: str,
        *,
        log_level: str = "INFO",
        log_file: str | Path | None = None,
        json_logs: bool = False,
        console_output: bool = True,
    ) -> None:
        level = logging.getLevelName(log_level.upper())
        if not isinstance(level, int):
            level = logging.INFO

        logger = logging.getLogger(f"algolex.{tool_name}")
        logger.setLevel(level)
        logger.propagate = False
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

        if console_output:
            logger.addHandler(_console_handler(level))
        if log_file:
            logger.addHandler(_file_handler(Path(log_file), level, json_logs))

        super().__init__(logger, {"tool_name": tool_name})
        self._operations: list[str] = []

    @property
    def tool_name(self) -> str:
        return self.extra["tool_name"]

    @contextmanager
    def operation(self, name: str) -> Iterator[LexLogger]:
        """Tag every record logged inside the block with *name*."""
        self._operations.append(name)
        try:
            yield self
        finally:
            self._operations.pop()

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        context = {
            key: kwargs.pop(key) for key in list(kwargs) if key not in _LOGGING_KWARGS
        }
        kwargs["extra"] = {
            **(kwargs.get("extra") or {}),
            "tool_name": self.tool_name,
            "operation": self._operations[-1] if self._operations else "-",
            "context": context,
        }
        return msg, kwargs
