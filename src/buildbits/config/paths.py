# topmark:header:start
#
#   project      : BuildBits
#   file         : paths.py
#   file_relpath : src/buildbits/config/paths.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pure helpers for path normalization in the config layer.

Policy recap:
    * Paths declared inside a config file are anchored to that file's directory.
    * Paths given on the CLI are kept as typed, so relative paths keep
      resolving against the invocation CWD.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from os import PathLike


def abs_path_from(base: Path, raw: str | PathLike[str]) -> Path:
    """Return an absolute Path for *raw* using *base* if *raw* is relative."""
    p = Path(raw)
    return (base / p).resolve() if not p.is_absolute() else p.resolve()
