# topmark:header:start
#
#   project      : BuildBits
#   file         : errors.py
#   file_relpath : src/buildbits/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the BuildBits core.

The dispatcher surfaces exactly one of these failure kinds to its caller:

* `ConfigurationError`: the job itself is invalid (e.g. an empty input path)
  or a configuration source is malformed. Raised before any backend is
  selected.
* `UnsupportedFileTypeError`: no backend is registered for the input's
  extension. Raised before any backend is invoked.
* Any exception raised by a backend, propagated unchanged. Built-in command
  backends raise `BackendError`.

The CLI translates these into `click` exceptions with stable exit codes (see
[`buildbits.cli.errors`][buildbits.cli.errors]).
"""

from __future__ import annotations

from pathlib import Path


class BuildbitsError(Exception):
    """Base class for all BuildBits errors."""


class ConfigurationError(BuildbitsError, ValueError):
    """Invalid job input or malformed configuration."""


class UnsupportedFileTypeError(BuildbitsError, NotImplementedError):
    """No backend is registered for the extension of the given path.

    Args:
        path (Path | str): The input path that could not be dispatched.
        extension (str): The normalized (lower-cased) extension that was looked up.
    """

    def __init__(self, path: Path | str, extension: str) -> None:
        self.path = Path(path)
        self.extension = extension
        shown = extension or "(no extension)"
        super().__init__(f"Unsupported file type '{shown}' for '{self.path}'")


class BackendError(BuildbitsError):
    """A transformation backend failed.

    Args:
        backend (str): Name of the backend that failed.
        message (str): Human-readable description of the failure.
        returncode (int | None): Exit status of the external tool, if any.
    """

    def __init__(self, backend: str, message: str, *, returncode: int | None = None) -> None:
        self.backend = backend
        self.returncode = returncode
        super().__init__(f"{backend}: {message}")
