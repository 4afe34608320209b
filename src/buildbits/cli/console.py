# topmark:header:start
#
#   project      : BuildBits
#   file         : console.py
#   file_relpath : src/buildbits/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console abstraction for user-facing program output.

Results and relayed tool output go through `ClickConsole`; `logging` stays
reserved for internal diagnostics (enabled via ``BUILDBITS_LOG_LEVEL``).
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

import click


class ClickConsole:
    """Program-output console, independent from the logger.

    Args:
        enable_color (bool | None): True forces ANSI color codes, False disables
            them, None lets Click strip them when the stream is not a terminal.
        out (TextIO | None): Standard output stream (defaults to `sys.stdout`).
        err (TextIO | None): Error stream (defaults to `sys.stderr`).
    """

    def __init__(
        self,
        *,
        enable_color: bool | None = None,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out = out
        self.err = err

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        click.echo(text, nl=nl, file=self.out or sys.stdout, color=self.enable_color)

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning message to stderr."""
        click.secho(
            text, nl=nl, file=self.err or sys.stderr, color=self.enable_color, fg="yellow"
        )

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        click.secho(
            text, nl=nl, file=self.err or sys.stderr, color=self.enable_color, fg="bright_red"
        )

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` styled with `click.style`, or plain when color is disabled."""
        if self.enable_color is False:
            return text
        return click.style(text, **style_kwargs)
