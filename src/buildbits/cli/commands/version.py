# topmark:header:start
#
#   project      : BuildBits
#   file         : version.py
#   file_relpath : src/buildbits/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BuildBits `version` command."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from buildbits.cli.options import get_effective_verbosity
from buildbits.constants import BUILDBITS_VERSION

if TYPE_CHECKING:
    from buildbits.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of BuildBits.",
)
def version_command() -> None:
    """Print the installed BuildBits version."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    if get_effective_verbosity(ctx) > 0:
        console.print(f"BuildBits version: {console.styled(BUILDBITS_VERSION, bold=True)}")
    else:
        console.print(BUILDBITS_VERSION)
