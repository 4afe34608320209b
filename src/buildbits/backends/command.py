# topmark:header:start
#
#   project      : BuildBits
#   file         : command.py
#   file_relpath : src/buildbits/backends/command.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Backends that delegate to an external command-line tool.

A `CommandBackend` is described by a command template, a sequence of
arguments where ``{input}`` and ``{output}`` are replaced by the job's paths.
Templates can be overridden per backend in configuration::

    [backends.less]
    command = ["npx", "lessc", "--strict-math=on", "{input}", "{output}"]

Tools that only print their result (``coffee --print``) set
``capture_stdout`` so that standard output is written to the output file;
their standard error is then relayed as events. Other tools have stdout and
stderr merged and relayed line by line.
"""

from __future__ import annotations

import os
import shutil
import subprocess
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from buildbits.backends.base import Backend
from buildbits.config.logging import BuildbitsLogger, get_logger
from buildbits.errors import BackendError

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from buildbits.pipeline.job import CompileResult, OutputCallback

logger: BuildbitsLogger = get_logger(__name__)

INPUT_PLACEHOLDER: str = "{input}"
OUTPUT_PLACEHOLDER: str = "{output}"


class CommandBackend(Backend):
    """Backend running an external tool described by a command template."""

    command: ClassVar[tuple[str, ...]] = ()
    capture_stdout: ClassVar[bool] = False

    def effective_command(self) -> tuple[tuple[str, ...], bool]:
        """Return the command template and stdout-capture flag to use.

        Configuration overrides take precedence over the class defaults.
        """
        if self.config is None:
            return self.command, self.capture_stdout
        command = self.config.command_for(self.name) or self.command
        capture = self.config.capture_stdout_for(self.name)
        return command, self.capture_stdout if capture is None else capture

    def build_argv(self, template: Sequence[str], input_path: Path, output_path: Path) -> list[str]:
        """Expand ``template`` into an argument vector for this job.

        Raises:
            BackendError: If the template is empty.
        """
        if not template:
            raise BackendError(self.name, "no command configured")
        return [
            arg.replace(INPUT_PLACEHOLDER, str(input_path)).replace(
                OUTPUT_PLACEHOLDER, str(output_path)
            )
            for arg in template
        ]

    def compile(
        self,
        input_path: Path,
        output_path: Path,
        *,
        on_output: OutputCallback,
    ) -> CompileResult | None:
        """Run the tool and relay its output; return None on success.

        Raises:
            BackendError: If the executable cannot be found or exits non-zero.
        """
        template, capture = self.effective_command()
        argv: list[str] = self.build_argv(template, input_path, output_path)
        if shutil.which(argv[0]) is None:
            raise BackendError(self.name, f"executable not found: {argv[0]!r}")

        output_path.parent.mkdir(parents=True, exist_ok=True)
        logger.debug("Running %s: %s", self.name, argv)

        if capture:
            returncode = self._run_captured(argv, output_path, on_output)
        else:
            with subprocess.Popen(
                argv,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                errors="replace",
            ) as proc:
                returncode = self._drain(proc, proc.stdout, on_output)

        if returncode != 0:
            raise BackendError(
                self.name, f"{argv[0]} exited with status {returncode}", returncode=returncode
            )
        return None

    def _run_captured(self, argv: list[str], output_path: Path, on_output: OutputCallback) -> int:
        """Run ``argv`` with stdout written to a hidden sibling staging file.

        The staging file replaces ``output_path`` only when the tool exits 0,
        so a failing run leaves any previous artifact untouched.
        """
        staging: Path = output_path.with_name(f".{output_path.name}.{os.getpid()}.tmp")
        returncode: int = -1
        try:
            with staging.open("wb") as sink, subprocess.Popen(
                argv, stdout=sink, stderr=subprocess.PIPE, text=True, errors="replace"
            ) as proc:
                returncode = self._drain(proc, proc.stderr, on_output)
            if returncode == 0:
                os.replace(staging, output_path)
        finally:
            if returncode != 0:
                staging.unlink(missing_ok=True)
        return returncode

    def _drain(
        self,
        proc: subprocess.Popen[str],
        lines: Iterable[str] | None,
        on_output: OutputCallback,
    ) -> int:
        """Relay ``lines`` and wait for ``proc``; kill the child if relaying fails."""
        try:
            self._relay(lines or (), on_output)
            return proc.wait()
        except BaseException:
            proc.kill()
            raise

    def _relay(self, lines: Iterable[str], on_output: OutputCallback) -> None:
        for line in lines:
            self.emit(on_output, line.rstrip("\r\n"))
