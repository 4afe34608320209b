# topmark:header:start
#
#   project      : BuildBits
#   file         : logging.py
#   file_relpath : src/buildbits/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Internal logging for BuildBits.

Logging is diagnostic output for people debugging BuildBits itself; the
result lines and relayed tool output shown by the CLI go through the console
instead. The root level comes from ``BUILDBITS_LOG_LEVEL`` and defaults to
CRITICAL, so a normal build prints nothing on stderr.

Levels in use:

* ``TRACE`` (below DEBUG): every line a backend tool prints and the raw
  TOML tables read from config files.
* ``DEBUG``: config discovery, backend selection and the tool argv.
* ``INFO``: job outcomes and inputs with no backend.
* ``WARNING``: malformed config values that were skipped.

Example:
    ``BUILDBITS_LOG_LEVEL=trace buildbits compile site.less``
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from buildbits.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5


class BuildbitsLogger(logging.Logger):
    """Logger adding `trace` for per-line backend output."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at TRACE level."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


if logging.getLevelName(TRACE_LEVEL) != "TRACE":
    logging.addLevelName(TRACE_LEVEL, "TRACE")

logging.setLoggerClass(BuildbitsLogger)


LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
# Below INFO the emitting module matters more than brevity.
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] %(name)s:%(lineno)d %(message)s"

# Checked top-down; the first threshold a record reaches picks its style.
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Formatter coloring each record by severity with yachalk."""

    def format(self, record: logging.LogRecord) -> str:
        message: str = super().format(record)
        for threshold, style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return style(message)
        return chalk.dim(message)


_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


def resolve_env_log_level() -> int | None:
    """Return the level named by ``BUILDBITS_LOG_LEVEL``.

    Accepts a level name in any case (``trace``, ``WARN``) or a number.
    Returns None when the variable is unset, empty or unrecognized.
    """
    raw: str | None = os.environ.get(LOG_LEVEL_ENV_VAR)
    if not raw:
        return None
    value: str = raw.strip().upper()
    if value.isdigit():
        return int(value)
    return _LEVEL_NAMES.get(value)


def setup_logging(level: int | None = None) -> None:
    """Install a single colored stderr handler on the root logger.

    Args:
        level (int | None): Root level. None reads ``BUILDBITS_LOG_LEVEL``
            and falls back to CRITICAL.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger: logging.Logger = logging.getLogger()
    root_logger.setLevel(level)
    for existing in list(root_logger.handlers):
        root_logger.removeHandler(existing)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root_logger.addHandler(handler)


def get_logger(name: str) -> BuildbitsLogger:
    """Return the `BuildbitsLogger` named ``name`` (use ``__name__``)."""
    return cast("BuildbitsLogger", logging.getLogger(name))
