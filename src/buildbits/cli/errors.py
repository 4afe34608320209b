# topmark:header:start
#
#   project      : BuildBits
#   file         : errors.py
#   file_relpath : src/buildbits/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the BuildBits CLI.

Usage:
    Commands catch core exceptions at their boundary and re-raise them via
    [`from_core_error`][buildbits.cli.errors.from_core_error], so that each
    failure kind exits with its own code.

Styling:
    Errors are printed through the project console when one is present in the
    Click context; otherwise Click's default display is used.
"""

from __future__ import annotations

from typing import IO, Any

import click

from buildbits.cli.exit_codes import ExitCode
from buildbits.errors import BackendError, ConfigurationError, UnsupportedFileTypeError


class BuildbitsCliError(click.ClickException):
    """Base class for all BuildBits CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (colorized later by `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        obj = getattr(ctx, "obj", None)
        console = obj.get("console") if isinstance(obj, dict) else None
        if console is None:
            super().show(file)
            return
        console.error(f"Error: {self.format_message()}")


class BuildbitsUsageError(BuildbitsCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class BuildbitsConfigError(BuildbitsCliError):
    """Error for invalid input paths and missing/invalid/malformed config."""

    exit_code = ExitCode.CONFIG_ERROR


class BuildbitsFileNotFoundError(BuildbitsCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class BuildbitsUnsupportedFileTypeError(BuildbitsCliError):
    """Error when no backend is bound to an input's extension."""

    exit_code = ExitCode.UNSUPPORTED_FILE_TYPE


class BuildbitsBackendError(BuildbitsCliError):
    """Error when a backend fails or reports an unsuccessful result."""

    exit_code = ExitCode.BACKEND_ERROR


class BuildbitsIOError(BuildbitsCliError):
    """Error for I/O failures around a job (e.g. an uncreatable output directory)."""

    exit_code = ExitCode.IO_ERROR


def from_core_error(exc: Exception) -> BuildbitsCliError:
    """Map a core exception onto the CLI error carrying its exit code.

    Args:
        exc (Exception): A `BuildbitsError` or `OSError` raised by the core.

    Returns:
        BuildbitsCliError: The CLI error to raise; unknown kinds map to the
            generic `BuildbitsCliError`.
    """
    message = str(exc)
    if isinstance(exc, ConfigurationError):
        return BuildbitsConfigError(message)
    if isinstance(exc, UnsupportedFileTypeError):
        return BuildbitsUnsupportedFileTypeError(message)
    if isinstance(exc, BackendError):
        return BuildbitsBackendError(message)
    if isinstance(exc, FileNotFoundError):
        return BuildbitsFileNotFoundError(message)
    if isinstance(exc, OSError):
        return BuildbitsIOError(message)
    return BuildbitsCliError(message)
