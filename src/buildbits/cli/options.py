# topmark:header:start
#
#   project      : BuildBits
#   file         : options.py
#   file_relpath : src/buildbits/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

Centralizes reusable options (verbosity, config sources) and their
resolution, so commands and the group stay thin.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from buildbits.cli.errors import BuildbitsUsageError

P = ParamSpec("P")
R = TypeVar("R")

#: Program-output verbosity levels.
QUIET: int = -1
NORMAL: int = 0
VERBOSE: int = 1


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from ``-v`` / ``-q`` counts.

    Returns:
        int: ``QUIET`` (-1) with ``-q``, the ``-v`` count otherwise (0 = normal).

    Raises:
        BuildbitsUsageError: If both flags are used simultaneously.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise BuildbitsUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return QUIET
    return verbose_count


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored on the context (default normal)."""
    obj = ctx.obj if isinstance(ctx.obj, dict) else {}
    return int(obj.get("verbosity_level", NORMAL))


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity; -v also relays backend tool output.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only print errors.",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config`` (repeatable) and ``--no-config`` options."""
    f = click.option(
        "--config",
        "config_files",
        multiple=True,
        type=click.Path(path_type=Path, dir_okay=False),
        help="Extra config file merged after discovered ones (repeatable).",
    )(f)
    f = click.option(
        "--no-config",
        is_flag=True,
        default=False,
        help="Skip user and project config discovery (defaults and --config only).",
    )(f)
    return f
