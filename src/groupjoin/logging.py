"""Logging setup for the groupjoin CLI.

The console shows records at the level picked with ``-v``/``-q``, rendered by
Rich on stderr so it never mixes with listings on stdout. The flight recorder
keeps recent records at DEBUG in memory and writes them to a file once a
WARNING shows up, so a rejected ``assign`` or a failed connection leaves the
dispatch and SQL that led to it on disk.
"""

from __future__ import annotations

import logging
import platform
from logging.handlers import MemoryHandler
from typing import TYPE_CHECKING

import sqlalchemy
from rich.console import Console
from rich.logging import RichHandler

from groupjoin import config

if TYPE_CHECKING:
    from pathlib import Path

CONSOLE_FORMAT = "%(origin)s%(message)s"
DEBUG_CONSOLE_FORMAT = "%(name)s: %(message)s"
RECORDER_FORMAT = "%(asctime)s %(levelname)-8s %(name)s:%(lineno)d: %(message)s"


class OriginFilter(logging.Filter):
    """Set ``record.origin`` to ``"[library] "`` for records from outside groupjoin."""

    def filter(self, record: logging.LogRecord) -> bool:
        top = record.name.partition(".")[0]
        record.origin = "" if top == "groupjoin" else f"[{top}] "
        return True


def console_handler(
    level: int, *, debug: bool = False, color: bool = True
) -> RichHandler:
    """Return a Rich handler on stderr.

    With ``debug`` everything down to DEBUG is shown, with logger names and
    source locations.
    """
    handler = RichHandler(
        level=logging.DEBUG if debug else level,
        console=Console(stderr=True, color_system="auto" if color else None),
        show_time=False,
        show_path=debug,
        rich_tracebacks=True,
    )
    if debug:
        handler.setFormatter(logging.Formatter(DEBUG_CONSOLE_FORMAT))
    else:
        handler.addFilter(OriginFilter())
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    return handler


def flight_recorder(
    path: Path, capacity: int, *, flush_on_close: bool = False
) -> MemoryHandler:
    """Buffer up to ``capacity`` records and write them to ``path`` on WARNING.

    The file is created on the first flush, so quiet runs leave nothing behind.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    target.setFormatter(logging.Formatter(RECORDER_FORMAT))
    return MemoryHandler(
        capacity,
        flushLevel=logging.WARNING,
        target=target,
        flushOnClose=flush_on_close,
    )


def log_startup(  # pylint: disable=too-many-arguments
    logger: logging.Logger,
    *,
    app_version: str,
    level: int,
    recorder_path: Path | None,
    db_url: str | None,
    logger_levels: dict[str, int],
) -> None:
    """Log what this run is configured with: one INFO line, details at DEBUG."""
    logger.info(
        "groupjoin %s: backend=%s, console=%s, flight-recorder=%s",
        app_version,
        config.backend_label(db_url),
        logging.getLevelName(level),
        recorder_path or "OFF",
    )
    logger.debug("Python %s on %s", platform.python_version(), platform.platform())
    logger.debug("SQLAlchemy %s", sqlalchemy.__version__)
    if logger_levels:
        logger.debug(
            "Logger levels: %s",
            ", ".join(
                f"{name}={logging.getLevelName(lvl)}"
                for name, lvl in sorted(logger_levels.items())
            ),
        )
