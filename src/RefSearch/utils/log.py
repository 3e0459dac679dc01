"""RefSearch logging utilities.

One package logger, `log`, shared by every module. Engine code only logs at
DEBUG; the CLI decides where records go via `configure_logging`.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Final, Optional, TextIO

_FORMAT: Final = "%(asctime)s [%(levelabbr)s] %(message)s"
_DATEFMT: Final = "%m-%d %H:%M:%S"

_LEVEL_ABBREV: Final[dict[int, str]] = {
    logging.DEBUG: "DEBG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERRO",
    logging.CRITICAL: "ERRO",
}


class _AbbrevLevelFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: A003 - record is stdlib name
        record.levelabbr = _LEVEL_ABBREV.get(record.levelno, record.levelname[:4])
        return super().format(record)


log = logging.getLogger("RefSearch")


def _console_handler(level: int, stream: Optional[TextIO]) -> logging.Handler:
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(level)
    return handler


def _file_handler(action: str, log_dir: str) -> tuple[logging.Handler, Path]:
    stamp = datetime.now().strftime("%m%d%H%M%S")
    target_dir = Path(log_dir or "log") / action
    target_dir.mkdir(parents=True, exist_ok=True)
    path = target_dir / f"{action}_{stamp}.log"
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    return handler, path


def configure_logging(
    *,
    level: str = "INFO",
    action: str | None = None,
    log_to_file: bool = False,
    log_dir: str = "log",
    stream: Optional[TextIO] = None,
) -> Optional[Path]:
    """Route RefSearch log records to the console and optionally a file.

    Lines look like ``mm-dd HH:MM:SS [LVL] message`` with LVL one of
    DEBG/INFO/WARN/ERRO. Console output defaults to stderr so that results
    printed on stdout stay machine-readable. Calling this again replaces the
    previous handlers.

    Args:
        level: Console threshold name (e.g., WARNING, DEBUG).
        action: CLI command name; required for file logging, where it names
            both the subdirectory and the file.
        log_to_file: Also write DEBUG and above to ``<log_dir>/<action>/``.
        log_dir: Base directory for log files.
        stream: Console stream override.

    Returns:
        Path of the log file, or None when file logging is off.
    """
    console_level = getattr(logging, (level or "INFO").upper(), logging.INFO)
    formatter = _AbbrevLevelFormatter(fmt=_FORMAT, datefmt=_DATEFMT)

    handlers = [_console_handler(console_level, stream)]
    log_path: Optional[Path] = None
    if log_to_file and action:
        file_handler, log_path = _file_handler(action, log_dir)
        handlers.append(file_handler)

    log.handlers.clear()
    for handler in handlers:
        handler.setFormatter(formatter)
        log.addHandler(handler)
    log.setLevel(logging.DEBUG if log_path is not None else console_level)
    log.propagate = False
    return log_path
