"""Logging setup for the mallardoc command-line driver.

Render diagnostics are logged by ``mallardoc.diagnostics`` as they are
recorded. The CLI also prints them itself after each render, so its console
handler can be told to drop those records; a log file still receives them.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

DIAGNOSTICS_LOGGER_NAME = "mallardoc.diagnostics"


class DiagnosticsFilter(logging.Filter):
    """Reject records emitted by the diagnostics logger."""

    def filter(self, record: logging.LogRecord) -> bool:
        return not (record.name == DIAGNOSTICS_LOGGER_NAME or record.name.startswith(DIAGNOSTICS_LOGGER_NAME + "."))


def resolve_level(log_level: int | str) -> int:
    """Return a numeric level for ``log_level``, falling back to INFO for unknown names."""
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
    console_diagnostics: bool = True,
) -> logging.Logger:
    """Configure root logging handlers for the command-line driver.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or string name (e.g., "INFO").
    log_file : str, optional
        Path to a log file that receives a copy of every record.
    trace_mode : bool, default False
        When true, emit timestamps and logger names for debugging traces.
    console_diagnostics : bool, default True
        When False, render diagnostics are kept off the console handler.
        The CLI sets this because it reports diagnostics on its own.

    Returns
    -------
    logging.Logger
        The configured root logger instance.

    """
    resolved_level = resolve_level(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(resolved_level)
    root_logger.handlers.clear()

    if trace_mode:
        formatter = logging.Formatter("[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s", "%Y-%m-%d %H:%M:%S")
    else:
        formatter = logging.Formatter("%(levelname)s: %(message)s")

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(resolved_level)
    console_handler.setFormatter(formatter)
    if not console_diagnostics:
        console_handler.addFilter(DiagnosticsFilter())
    root_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            root_logger.warning("Could not create log file %s: %s", log_file, exc)
        else:
            file_handler.setLevel(resolved_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
            root_logger.debug("Logging to file: %s", log_file)

    return root_logger
