# topmark:header:start
#
#   project      : BuildBits
#   file         : init_config.py
#   file_relpath : src/buildbits/cli/commands/init_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BuildBits `init-config` command.

Prints a starter configuration (the bundled defaults, comments included) to
stdout, either as a standalone ``buildbits.toml`` or nested under
``[tool.buildbits]`` for ``pyproject.toml``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from buildbits.cli.options import get_effective_verbosity
from buildbits.config.io import nest_toml_under_section
from buildbits.config.keys import Toml
from buildbits.config.model import MutableConfig

if TYPE_CHECKING:
    from buildbits.cli.console import ClickConsole


@click.command(
    name="init-config",
    help="Display an initial BuildBits configuration file.",
)
@click.option(
    "--pyproject",
    is_flag=True,
    default=False,
    help="Emit a [tool.buildbits] block for pyproject.toml.",
)
def init_config_command(*, pyproject: bool = False) -> None:
    """Print a starter config file to stdout."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]
    vlevel = get_effective_verbosity(ctx)

    toml_doc: str = MutableConfig.get_default_config_toml()
    if pyproject:
        toml_doc = nest_toml_under_section(toml_doc, Toml.PYPROJECT_DOTTED_SECTION)

    if vlevel > 0:
        console.print(console.styled("Initial BuildBits Configuration (TOML):", bold=True))
    console.print(toml_doc.rstrip())
