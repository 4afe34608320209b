# topmark:header:start
#
#   project      : BuildBits
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running BuildBits in a controlled working directory.

`run_cli_in()` changes the process working directory to the given directory
before invoking the Click CLI, so that relative input paths and relative
``--output-dir`` values resolve against the temporary project, and upward
config discovery starts there.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from click.testing import CliRunner, Result

from buildbits.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


def run_cli_in(tmp_path: Path, argv: Sequence[str]) -> Result:
    """Invoke the CLI with ``tmp_path`` as the working directory.

    Args:
        tmp_path (Path): Directory used as the CWD for the invocation.
        argv (Sequence[str]): CLI argument vector, e.g. ``["compile", "site.less"]``.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, list(argv))
    finally:
        os.chdir(cwd)


def run_cli(argv: Sequence[str]) -> Result:
    """Invoke the CLI without changing the working directory.

    Use this for commands that touch no project files (``version``,
    ``filetypes``, ``output-path``) or when all paths are absolute.
    """
    runner = CliRunner()
    return runner.invoke(cli, list(argv))


def output_lines(result: Result) -> list[str]:
    """Return the non-empty lines of ``result.output``, right-stripped."""
    return [line.rstrip() for line in result.output.splitlines() if line.strip()]
