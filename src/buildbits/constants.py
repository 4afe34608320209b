# topmark:header:start
#
#   project      : BuildBits
#   file         : constants.py
#   file_relpath : src/buildbits/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BuildBits Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

BUILDBITS_VERSION: str = get_version("buildbits")

# Name of the bundled default config inside the package `buildbits.config`:
DEFAULT_TOML_CONFIG_PACKAGE: str = "buildbits.config"
DEFAULT_TOML_CONFIG_NAME: str = "buildbits-default.toml"

# Project-local config file name (next to, or instead of, `pyproject.toml`):
LOCAL_TOML_CONFIG_NAME: str = "buildbits.toml"

LOG_LEVEL_ENV_VAR: str = "BUILDBITS_LOG_LEVEL"
