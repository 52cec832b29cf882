"""DocPresenter logging.

All modules log through the shared ``DocPresenter`` logger. Records are
prefixed with a short timestamp and a four-letter level tag, e.g.::

    03-14 09:26:53 [WARN] display.show_fields.subject_ssim.link_to_facet names ...

CLI actions call `configure_logging` once before doing any work.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Final

LOG_FORMAT: Final[str] = "%(asctime)s [%(levelabbr)s] %(message)s"
DATE_FORMAT: Final[str] = "%m-%d %H:%M:%S"

_LEVEL_TAGS: Final[dict[int, str]] = {
    logging.DEBUG: "DEBG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERRO",
    logging.CRITICAL: "ERRO",
}

log = logging.getLogger("DocPresenter")


class _LevelTagFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: A003 - stdlib override
        record.levelabbr = _LEVEL_TAGS.get(record.levelno, record.levelname[:4])
        return super().format(record)


def resolve_level(level: str | None) -> int:
    """Map a level name to its numeric value; unknown names mean INFO."""
    return getattr(logging, (level or "INFO").upper(), logging.INFO)


def log_file_path(log_dir: str, action: str) -> Path:
    """Return ``<log_dir>/<action>/<action>_<mmddHHMMSS>.log``."""
    timestamp = datetime.now().strftime("%m%d%H%M%S")
    return Path(log_dir or "log") / action / f"{action}_{timestamp}.log"


def _replace_handlers(handlers: list[logging.Handler]) -> None:
    for handler in list(log.handlers):
        log.removeHandler(handler)
        handler.close()
    for handler in handlers:
        log.addHandler(handler)


def configure_logging(
    *,
    level: str = "INFO",
    action: str | None = None,
    log_to_file: bool = True,
    log_dir: str = "log",
) -> Path | None:
    """Configure the DocPresenter logger for one CLI action.

    The console handler honors ``level``; the optional file handler records
    everything from DEBUG up.

    Args:
        level: Console level name (e.g. ``INFO``, ``DEBUG``).
        action: CLI action name; required for file logging.
        log_to_file: Whether to mirror logs to a file.
        log_dir: Base directory for log files.

    Returns:
        Path of the log file, or None when logging only to the console.
    """
    console_level = resolve_level(level)
    formatter = _LevelTagFormatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console = logging.StreamHandler()
    console.setLevel(console_level)
    console.setFormatter(formatter)
    handlers: list[logging.Handler] = [console]

    log_path = None
    if log_to_file and action:
        log_path = log_file_path(log_dir, action)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    _replace_handlers(handlers)
    log.setLevel(logging.DEBUG if log_path else console_level)
    log.propagate = False
    return log_path
