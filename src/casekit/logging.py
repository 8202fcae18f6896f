"""Logging helpers used by the casekit CLI.

Console records go through Rich on stderr so converted text on stdout stays
clean. A conversion trace can also be written to a file: every segmentation
is logged at DEBUG, which shows why an input split into the words it did.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from platformdirs import user_log_dir
from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

TRACE_FILE_NAME = "trace.log"  # pragma: no mutate
TRACE_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"  # pragma: no mutate


def default_trace_path() -> Path:
    """Return the trace file location inside the user's log directory."""
    return Path(user_log_dir("casekit", appauthor=False)) / TRACE_FILE_NAME


def config_console_handler(
    level: int = logging.WARNING, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Configure and return a RichHandler writing to stderr.

    Args:
        level: Minimum level for console output (overridden to DEBUG in debug_mode).
        debug_mode: When True, prefix records with the logger name and show
            the emitting file and line.
        color: Enable color output when True.

    Returns:
        RichHandler: Configured handler suitable to attach to the root logger.
    """
    console = Console(color_system="auto" if color else None, stderr=True)

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=console,
        show_time=False,
        show_path=debug_mode,
        rich_tracebacks=True,
    )
    fmt = "%(name)s: %(message)s" if debug_mode else "%(message)s"
    handler.setFormatter(logging.Formatter(fmt=fmt))
    return handler


def config_trace_file(path: Path) -> logging.FileHandler:
    """Configure and return a DEBUG-level file handler for conversion traces.

    The parent directory is created when missing and the file is truncated on
    every run, so it only ever holds the latest invocation.

    Args:
        path: Destination file for trace records.

    Returns:
        logging.FileHandler: Handler suitable to attach to the root logger.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, mode="w", encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(TRACE_FORMAT))
    return handler


def log_startup(
    logger: Logger,
    *,
    app_version: str,
    level: int,
    trace_path: Path | None,
    logger_levels: dict[str, int],
) -> None:
    """Log a one-line startup summary and the active logger overrides.

    Args:
        logger: Logger used to emit startup messages.
        app_version: Application version string to display.
        level: Effective console logging level (numeric).
        trace_path: File receiving the conversion trace, or None when tracing is off.
        logger_levels: Mapping of logger names to their configured numeric levels.
    """
    logger.info(
        "casekit %s: console=%s, trace=%s",
        app_version,
        logging.getLevelName(level),
        trace_path or "OFF",
    )
    logger.debug(
        "Per-logger overrides: %s",
        {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()},
    )
