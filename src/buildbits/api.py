# topmark:header:start
#
#   project      : BuildBits
#   file         : api.py
#   file_relpath : src/buildbits/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public BuildBits API (stable surface).

Thin wrappers around [`Dispatcher`][buildbits.pipeline.dispatcher.Dispatcher]
for integrations that want to build assets without going through the CLI.

Configuration contract
----------------------
- Functions accept either a plain **mapping** mirroring the TOML shape, a
  frozen [`Config`][buildbits.config.model.Config], or ``None``.
- With ``None``, configuration is discovered exactly as the CLI does it,
  anchored at the input file.
- The job's own output directory wins over a configured ``[output] directory``.

```python
from buildbits import api

result = api.compile_file(
    "assets/theme.scss",
    output_dir="dist",
    config={"backends": {"scss": {"command": ["sassc", "{input}", "{output}"]}}},
)
```
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from buildbits.config.logging import get_logger
from buildbits.config.model import Config, MutableConfig
from buildbits.pipeline.dispatcher import Dispatcher
from buildbits.pipeline.job import Job, JobType
from buildbits.pipeline.outputs import require_input_path

if TYPE_CHECKING:
    from collections.abc import Mapping
    from os import PathLike

    from buildbits.config.logging import BuildbitsLogger
    from buildbits.pipeline.job import CompileResult, OutputCallback

logger: BuildbitsLogger = get_logger(__name__)

__all__ = [
    "compile_file",
    "minify_file",
    "optimize_file",
    "process",
]


def _resolve_config(config: Mapping[str, Any] | Config | None, anchor: Path) -> Config:
    if isinstance(config, Config):
        return config
    if config is None:
        return MutableConfig.load_merged(input_paths=[anchor]).freeze()
    overrides: MutableConfig = MutableConfig.from_toml_dict(dict(config))
    return MutableConfig.from_defaults().merge_with(overrides).freeze()


def process(
    job: Job,
    *,
    config: Mapping[str, Any] | Config | None = None,
    on_output: OutputCallback | None = None,
) -> CompileResult:
    """Dispatch ``job`` and return its normalized result.

    Args:
        job (Job): The job to run. An unset ``output_dir`` falls back to the
            configured output directory.
        config (Mapping[str, Any] | Config | None): Configuration to use.
        on_output (OutputCallback | None): Receives backend output events.

    Returns:
        CompileResult: The outcome reported by, or synthesized for, the backend.

    Raises:
        ConfigurationError: If the input path is empty or configuration is invalid.
        UnsupportedFileTypeError: If no backend handles the input's extension.
    """
    input_path: Path = require_input_path(job.input_path)
    effective: Config = _resolve_config(config, input_path)
    for diagnostic in effective.diagnostics:
        logger.debug("config: %s", diagnostic)

    if not job.output_dir and effective.output_dir is not None:
        job = Job(job.input_path, effective.output_dir, job.job_type)

    dispatcher = Dispatcher(effective)
    if on_output is not None:
        dispatcher.subscribe(on_output)
    return dispatcher.process(job)


def compile_file(
    path: str | PathLike[str],
    output_dir: str | PathLike[str] | None = None,
    *,
    config: Mapping[str, Any] | Config | None = None,
    on_output: OutputCallback | None = None,
) -> CompileResult:
    """Compile ``path`` (LESS, Sass, SCSS, CoffeeScript, TypeScript)."""
    return process(
        Job(Path(path), _as_dir(output_dir), JobType.COMPILE), config=config, on_output=on_output
    )


def minify_file(
    path: str | PathLike[str],
    output_dir: str | PathLike[str] | None = None,
    *,
    config: Mapping[str, Any] | Config | None = None,
    on_output: OutputCallback | None = None,
) -> CompileResult:
    """Minify ``path`` into a ``.min.css`` / ``.min.js`` sibling."""
    return process(
        Job(Path(path), _as_dir(output_dir), JobType.MINIFY), config=config, on_output=on_output
    )


def optimize_file(
    path: str | PathLike[str],
    output_dir: str | PathLike[str] | None = None,
    *,
    config: Mapping[str, Any] | Config | None = None,
    on_output: OutputCallback | None = None,
) -> CompileResult:
    """Recompress the image at ``path``, keeping its format."""
    return process(
        Job(Path(path), _as_dir(output_dir), JobType.OPTIMIZE), config=config, on_output=on_output
    )


def _as_dir(output_dir: str | PathLike[str] | None) -> Path | None:
    return Path(output_dir) if output_dir else None
