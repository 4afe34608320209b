# topmark:header:start
#
#   project      : BuildBits
#   file         : main.py
#   file_relpath : src/buildbits/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BuildBits CLI entry point.

Group-level options (verbosity) are initialized once and placed into
``ctx.obj`` together with the program-output console; subcommands read them
from there. Internal logging is configured from ``BUILDBITS_LOG_LEVEL``.
"""

from __future__ import annotations

import click

from buildbits.backends import register_all_backends
from buildbits.cli.commands.build import compile_command, minify_command, optimize_command
from buildbits.cli.commands.dump_config import dump_config_command
from buildbits.cli.commands.filetypes import filetypes_command
from buildbits.cli.commands.init_config import init_config_command
from buildbits.cli.commands.output_path import output_path_command
from buildbits.cli.commands.version import version_command
from buildbits.cli.console import ClickConsole
from buildbits.cli.options import common_verbose_options, resolve_verbosity
from buildbits.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)

register_all_backends()


def init_common_state(ctx: click.Context, *, verbose: int, quiet: int) -> None:
    """Initialize shared state (verbosity, logging, console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; its ``obj`` is populated.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
    """
    ctx.obj = ctx.obj or {}
    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    ctx.obj["console"] = ClickConsole(enable_color=ctx.color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="BuildBits: compile, minify and optimize web assets.",
)
@common_verbose_options
@click.pass_context
def cli(ctx: click.Context, verbose: int, quiet: int) -> None:
    """Entry point for the BuildBits CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet)

    if ctx.invoked_subcommand is None:
        console: ClickConsole = ctx.obj["console"]
        console.print("Hint: use 'buildbits compile [PATHS...]' to build assets.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(init_config_command)

cli.add_command(dump_config_command)

cli.add_command(compile_command)

cli.add_command(minify_command)

cli.add_command(optimize_command)

cli.add_command(filetypes_command)

cli.add_command(output_path_command)

if __name__ == "__main__":
    cli()
