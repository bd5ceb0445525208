# topmark:header:start
#
#   project      : PkgSurface
#   file         : logging.py
#   file_relpath : src/pkgsurface/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PkgSurface logging: a TRACE level, a colored formatter and setup helpers.

Logging is diagnostics only; user-facing output goes through the CLI console.
Levels used across the package:

- DEBUG: one line per phase (service resolved, per-category counts, renders).
- TRACE: individual surface entries and parsed configuration tables.

The level comes from ``PKGSURFACE_LOG_LEVEL`` when set, otherwise from the
caller (the CLI maps ``-v``/``-q`` to a level). Without either, only CRITICAL
records are shown.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from pkgsurface.constants import LOG_LEVEL_ENV

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"


class PkgSurfaceLogger(logging.Logger):
    """Logger with a ``trace()`` method for records below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at TRACE level."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(PkgSurfaceLogger)

# Highest threshold first; the first match colors the record.
_LEVEL_COLORS: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Formatter coloring each record by severity."""

    def format(self, record: logging.LogRecord) -> str:
        """Return the formatted record wrapped in its level color."""
        message: str = super().format(record)
        for threshold, paint in _LEVEL_COLORS:
            if record.levelno >= threshold:
                return paint(message)
        return chalk.dim(message)


def resolve_env_log_level() -> int | None:
    """Return the level named by ``PKGSURFACE_LOG_LEVEL``, or None.

    Accepts level names (``TRACE``, ``debug``, ``WARN``...) and numbers. An
    unrecognized name counts as unset.
    """
    raw: str = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if not raw:
        return None
    if raw.isdigit():
        return int(raw)
    level: object = logging.getLevelName(raw)
    return level if isinstance(level, int) else None


def setup_logging(level: int | None = None) -> None:
    """(Re)configure the root logger to write colored records to stderr.

    Args:
        level (int | None): Threshold; None consults `resolve_env_log_level`
            and falls back to CRITICAL.
    """
    if level is None:
        env_level: int | None = resolve_env_log_level()
        level = env_level if env_level is not None else logging.CRITICAL

    root: logging.Logger = logging.getLogger()
    root.setLevel(level)
    for handler in list(root.handlers):
        root.removeHandler(handler)

    stream = logging.StreamHandler(sys.stderr)
    stream.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root.addHandler(stream)


def get_logger(name: str) -> PkgSurfaceLogger:
    """Return the `PkgSurfaceLogger` called ``name``."""
    return cast("PkgSurfaceLogger", logging.getLogger(name))
