"""Logging setup shared by the ``pandocwalk`` command and the filter scripts.

A filter's stdout carries the JSON document back to pandoc, so every log
record goes to stderr (and optionally to a log file). The level, log file
and trace mode are resolved once from the command line and the
configuration file into a ``LogSettings`` value.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from pandocwalk.constants import DEFAULT_LOG_LEVEL

LOG_FORMAT = "%(levelname)s: %(message)s"
TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def parse_log_level(value: int | str) -> int:
    """Return the numeric logging level for a level name or number.

    Raises
    ------
    argparse.ArgumentTypeError
        If value names no logging level

    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    level = logging.getLevelName(str(value).strip().upper())
    if not isinstance(level, int):
        raise argparse.ArgumentTypeError(f"Unknown log level: {value!r}")
    return level


@dataclass(frozen=True)
class LogSettings:
    """Resolved logging options.

    Parameters
    ----------
    level : int
        Numeric level for the root logger and its handlers
    log_file : str, optional
        File that receives a copy of every record
    trace : bool, default False
        Emit timestamps and logger names

    """

    level: int = logging.WARNING
    log_file: Optional[str] = None
    trace: bool = False

    @classmethod
    def resolve(cls, config: Mapping[str, Any], args: Optional[argparse.Namespace] = None) -> LogSettings:
        """Combine command line flags with the configuration file.

        ``--trace`` forces debug level. Otherwise ``--log-level`` wins over
        the ``log_level`` config key, which wins over the default. The same
        order applies to ``--log-file`` and ``log_file``.

        Raises
        ------
        argparse.ArgumentTypeError
            If the configured level is not a logging level

        """
        trace = bool(getattr(args, "trace", False))
        log_file = getattr(args, "log_file", None) or config.get("log_file")

        if trace:
            level = logging.DEBUG
        else:
            level = parse_log_level(getattr(args, "log_level", None) or config.get("log_level") or DEFAULT_LOG_LEVEL)

        return cls(level=level, log_file=str(log_file) if log_file else None, trace=trace)


def configure_logging(settings: LogSettings) -> logging.Logger:
    """Install the stderr handler, and the file handler if any, on the root logger.

    Handlers from an earlier call are replaced. A log file that cannot be
    opened is reported as a warning and skipped.

    Returns
    -------
    logging.Logger
        The configured root logger.

    """
    if settings.trace:
        formatter = logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT)
    else:
        formatter = logging.Formatter(LOG_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    file_error: Optional[OSError] = None
    if settings.log_file:
        try:
            handlers.append(logging.FileHandler(settings.log_file, mode="a", encoding="utf-8"))
        except OSError as e:
            file_error = e

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(settings.level)
    for handler in handlers:
        handler.setLevel(settings.level)
        handler.setFormatter(formatter)
        root.addHandler(handler)

    if file_error is not None:
        root.warning("Could not open log file %s: %s", settings.log_file, file_error)
    elif settings.log_file:
        root.debug("Logging to file: %s", settings.log_file)

    return root


__all__ = [
    "LogSettings",
    "configure_logging",
    "parse_log_level",
]
