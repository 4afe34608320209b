# topmark:header:start
#
#   project      : BuildBits
#   file         : output_path.py
#   file_relpath : src/buildbits/cli/commands/output_path.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BuildBits `output-path` command.

Previews the file a compile job would produce, next to the input. No file is
read or written.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from buildbits.cli.errors import from_core_error
from buildbits.errors import ConfigurationError
from buildbits.pipeline.outputs import get_output_file_path

if TYPE_CHECKING:
    from buildbits.cli.console import ClickConsole


@click.command(
    name="output-path",
    help="Print the file name compiling PATH would produce (e.g. app.coffee -> app.js).",
)
@click.argument("path", type=str)
def output_path_command(*, path: str) -> None:
    """Print the compile output path for ``path``."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    try:
        console.print(str(get_output_file_path(path)))
    except ConfigurationError as exc:
        raise from_core_error(exc) from exc
