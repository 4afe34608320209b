# topmark:header:start
#
#   project      : BuildBits
#   file         : keys.py
#   file_relpath : src/buildbits/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for BuildBits configuration.

These constants are the external configuration schema as it appears in
``buildbits.toml`` and under ``[tool.buildbits]`` in ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by BuildBits configuration."""

    # Root / discovery
    KEY_ROOT: Final[str] = "root"

    # [output]
    SECTION_OUTPUT: Final[str] = "output"
    KEY_DIRECTORY: Final[str] = "directory"

    # [backends.<name>]
    SECTION_BACKENDS: Final[str] = "backends"
    KEY_COMMAND: Final[str] = "command"
    KEY_CAPTURE_STDOUT: Final[str] = "capture_stdout"

    # pyproject.toml
    PYPROJECT_TOOL: Final[str] = "tool"
    PYPROJECT_SECTION: Final[str] = "buildbits"
    PYPROJECT_DOTTED_SECTION: Final[str] = "tool.buildbits"
