# topmark:header:start
#
#   project      : BuildBits
#   file         : build.py
#   file_relpath : src/buildbits/cli/commands/build.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BuildBits `compile`, `minify` and `optimize` commands.

Each command runs one job per PATH through a shared
[`Dispatcher`][buildbits.pipeline.dispatcher.Dispatcher] and prints one
result line per file. Backend tool output is relayed with ``-v``.

Exit status:
    All jobs run even when one fails; the process then exits with the code of
    the first failure (see [`ExitCode`][buildbits.cli.exit_codes.ExitCode]).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from buildbits.cli.config_resolver import report_config_diagnostics, resolve_config_from_click
from buildbits.cli.errors import BuildbitsBackendError, BuildbitsCliError, from_core_error
from buildbits.cli.options import VERBOSE, common_config_options, get_effective_verbosity
from buildbits.config.logging import get_logger
from buildbits.errors import BuildbitsError
from buildbits.pipeline.dispatcher import Dispatcher
from buildbits.pipeline.job import Job, JobType

if TYPE_CHECKING:
    from buildbits.cli.console import ClickConsole
    from buildbits.config.logging import BuildbitsLogger
    from buildbits.config.model import Config
    from buildbits.pipeline.job import CompileResult, OutputEvent

logger: BuildbitsLogger = get_logger(__name__)


def _format_result(console: ClickConsole, result: CompileResult) -> str:
    state = "new" if result.is_new_file else "updated"
    return (
        f"{result.input_path} -> {console.styled(str(result.output_path), bold=True)} "
        f"{console.styled(f'({state})', fg='green' if result.success else 'red')}"
    )


def run_jobs(
    *,
    console: ClickConsole,
    config: Config,
    job_type: JobType,
    paths: list[Path],
    verbosity: int,
) -> None:
    """Dispatch one ``job_type`` job per path and report each outcome.

    Raises:
        BuildbitsCliError: Mapped from the first failure, after all jobs ran.
    """
    dispatcher = Dispatcher(config)

    def relay(event: OutputEvent) -> None:
        console.print(console.styled(f"  [{event.source}] ", dim=True) + event.message)

    if verbosity >= VERBOSE:
        dispatcher.subscribe(relay)

    first_failure: BuildbitsCliError | None = None
    failures = 0
    for path in paths:
        try:
            if not path.exists():
                raise FileNotFoundError(f"No such file: '{path}'")
            result: CompileResult = dispatcher.process(Job(path, config.output_dir, job_type))
        except (BuildbitsError, OSError) as exc:
            logger.debug("Job for '%s' failed", path, exc_info=True)
            error: BuildbitsCliError = from_core_error(exc)
        else:
            if verbosity >= 0:
                console.print(_format_result(console, result))
            for diagnostic in result.diagnostics:
                if verbosity >= VERBOSE or not result.success:
                    console.print("  " + diagnostic.level.color(str(diagnostic)))
            if result.success:
                continue
            error = BuildbitsBackendError(f"{path}: backend reported failure")

        failures += 1
        console.error(error.format_message())
        first_failure = first_failure or error

    if first_failure is not None:
        first_failure.message = f"{failures} of {len(paths)} job(s) failed"
        raise first_failure


def _make_build_command(job_type: JobType, summary: str, epilog: str) -> click.Command:
    @click.command(name=job_type.value, help=summary, epilog=epilog)
    @click.argument(
        "paths",
        nargs=-1,
        required=True,
        type=click.Path(path_type=Path),
    )
    @click.option(
        "-o",
        "--output-dir",
        "output_dir",
        type=click.Path(path_type=Path, file_okay=False),
        default=None,
        help="Directory to write artifacts to (default: next to each input).",
    )
    @common_config_options
    def command(
        *,
        paths: tuple[Path, ...],
        output_dir: Path | None,
        config_files: tuple[Path, ...],
        no_config: bool,
    ) -> None:
        ctx = click.get_current_context()
        ctx.ensure_object(dict)
        console: ClickConsole = ctx.obj["console"]
        verbosity = get_effective_verbosity(ctx)

        config: Config = resolve_config_from_click(
            paths=paths,
            config_files=config_files,
            no_config=no_config,
            output_dir=output_dir,
        ).freeze()
        report_config_diagnostics(config, console, verbosity)

        run_jobs(
            console=console,
            config=config,
            job_type=job_type,
            paths=list(paths),
            verbosity=verbosity,
        )

    return command


compile_command: click.Command = _make_build_command(
    JobType.COMPILE,
    "Compile LESS, Sass, SCSS, CoffeeScript and TypeScript sources.",
    "Style sheets compile to .css, scripts (.coffee, .ts) to .js.",
)

minify_command: click.Command = _make_build_command(
    JobType.MINIFY,
    "Minify JavaScript and CSS files.",
    "site.css becomes site.min.css; any other input becomes NAME.min.js.",
)

optimize_command: click.Command = _make_build_command(
    JobType.OPTIMIZE,
    "Losslessly recompress PNG, GIF, BMP, TIFF and JPEG images.",
    "The artifact keeps the input's name and extension; use -o to avoid overwriting.",
)
