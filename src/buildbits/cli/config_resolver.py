# topmark:header:start
#
#   project      : BuildBits
#   file         : config_resolver.py
#   file_relpath : src/buildbits/cli/config_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve the effective BuildBits configuration from Click parameters.

Bridges CLI parsing and [`MutableConfig`][buildbits.config.model.MutableConfig]:
discovery is anchored to the first input path (its parent if it is a file),
or to the current working directory when there is none.

Resolution order (lowest → highest precedence):
  1. Packaged defaults (bundled ``buildbits-default.toml``).
  2. User config ``$XDG_CONFIG_HOME/buildbits/buildbits.toml``.
  3. Project configs discovered upward, unless ``--no-config`` is set.
  4. Explicit ``--config`` files, in order.
  5. CLI overrides (``--output-dir``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from buildbits.cli.errors import from_core_error
from buildbits.config.logging import get_logger
from buildbits.config.model import MutableConfig
from buildbits.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from buildbits.cli.console import ClickConsole
    from buildbits.config.logging import BuildbitsLogger
    from buildbits.config.model import Config

logger: BuildbitsLogger = get_logger(__name__)


def resolve_config_from_click(
    *,
    paths: Sequence[Path] = (),
    config_files: Sequence[Path] = (),
    no_config: bool = False,
    output_dir: Path | str | None = None,
) -> MutableConfig:
    """Build the merged configuration draft for a command.

    Args:
        paths (Sequence[Path]): Input paths; the first anchors discovery.
        config_files (Sequence[Path]): Extra config files from ``--config``.
        no_config (bool): Skip user and project discovery.
        output_dir (Path | str | None): ``--output-dir`` value, or None if absent.

    Returns:
        MutableConfig: The merged draft. Call ``.freeze()`` for the runtime `Config`.

    Raises:
        BuildbitsConfigError: If a config file is missing, unreadable or invalid.
    """
    try:
        draft: MutableConfig = MutableConfig.load_merged(
            input_paths=list(paths),
            extra_config_files=list(config_files),
            no_config=no_config,
        )
    except ConfigurationError as exc:
        raise from_core_error(exc) from exc
    draft.apply_cli_args({"output_dir": output_dir})
    logger.debug("Resolved config from: %s", draft.config_files)
    return draft


def report_config_diagnostics(config: Config, console: ClickConsole, verbosity: int) -> None:
    """Print configuration warnings unless output is quiet."""
    if verbosity < 0:
        return
    for diagnostic in config.diagnostics:
        console.warn(str(diagnostic))
