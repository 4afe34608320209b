# topmark:header:start
#
#   project      : BuildBits
#   file         : dump_config.py
#   file_relpath : src/buildbits/cli/commands/dump_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BuildBits `dump-config` command.

Emits the effective configuration as TOML after applying defaults, user and
project config files and any CLI overrides. The output is wrapped between
``# === BEGIN ===`` and ``# === END ===`` markers for easy parsing in tests or
tooling.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from buildbits.cli.config_resolver import report_config_diagnostics, resolve_config_from_click
from buildbits.cli.options import VERBOSE, common_config_options, get_effective_verbosity
from buildbits.config.io import to_toml

if TYPE_CHECKING:
    from buildbits.cli.console import ClickConsole
    from buildbits.config.model import Config


@click.command(
    name="dump-config",
    help="Dump the final merged BuildBits configuration as TOML.",
    epilog="With -v, the contributing config files are listed under 'config_files'.",
)
@click.option(
    "-o",
    "--output-dir",
    "output_dir",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Output directory override, as for the build commands.",
)
@common_config_options
def dump_config_command(
    *,
    output_dir: Path | None,
    config_files: tuple[Path, ...],
    no_config: bool,
) -> None:
    """Print the effective configuration."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]
    verbosity = get_effective_verbosity(ctx)

    config: Config = resolve_config_from_click(
        config_files=config_files,
        no_config=no_config,
        output_dir=output_dir,
    ).freeze()
    report_config_diagnostics(config, console, verbosity)

    console.print("# === BEGIN ===")
    console.print(to_toml(config.to_toml_dict(include_files=verbosity >= VERBOSE)).rstrip())
    console.print("# === END ===")
