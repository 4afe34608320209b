# topmark:header:start
#
#   project      : BuildBits
#   file         : outputs.py
#   file_relpath : src/buildbits/pipeline/outputs.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output path resolution for compile, minify and optimize jobs.

Rules, applied to ``output_dir / basename(input)`` with its last extension
stripped:

* **compile**: compilable script sources (``.coffee``, ``.ts``) get ``.js``;
  anything else gets ``.css``.
* **minify**: ``.css`` gets ``.min.css``; anything else gets ``.min.js``.
  There is no check that "anything else" really is JavaScript.
* **optimize**: the input extension is kept as written.

No filesystem access happens here: the functions only manipulate path strings.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from buildbits.assettypes.base import extension_of
from buildbits.assettypes.capabilities import SCRIPT_COMPILE_EXTENSIONS
from buildbits.config.logging import BuildbitsLogger, get_logger
from buildbits.errors import ConfigurationError
from buildbits.pipeline.job import JobType

if TYPE_CHECKING:
    from os import PathLike

    from buildbits.pipeline.job import Job

logger: BuildbitsLogger = get_logger(__name__)

INVALID_INPUT_MESSAGE: str = (
    "The input path must name a Less, Sass, SCSS, CoffeeScript, TypeScript, "
    "script, stylesheet or image file"
)


def require_input_path(path: str | PathLike[str] | None) -> Path:
    """Return ``path`` as a `Path`, rejecting empty or missing values.

    A path without a file name (``""``, ``"."``, ``"/"``) counts as empty.

    Raises:
        ConfigurationError: If ``path`` is None or empty.
    """
    if path is None or not str(path) or not Path(path).name:
        raise ConfigurationError(INVALID_INPUT_MESSAGE)
    return Path(path)


def output_extension(job_type: JobType, input_path: str | PathLike[str]) -> str:
    """Return the extension (with dot) the artifact of ``job_type`` gets.

    Args:
        job_type (JobType): Requested transformation.
        input_path (str | PathLike[str]): Source path; only its extension is used.

    Returns:
        str: E.g. ``".css"``, ``".min.js"`` or the input's own suffix.
    """
    ext: str = extension_of(input_path)
    if job_type is JobType.COMPILE:
        return ".js" if ext in SCRIPT_COMPILE_EXTENSIONS else ".css"
    if job_type is JobType.MINIFY:
        return ".min.css" if ext == ".css" else ".min.js"
    # Optimizers rewrite images in their own format
    return Path(input_path).suffix


def _replace_extension(target: Path, new_ext: str) -> Path:
    return target.with_name(target.stem + new_ext)


def get_output_file_path(path: str | PathLike[str] | None) -> Path:
    """Preview the compiled artifact path for ``path`` in its own directory.

    ``app.coffee`` becomes ``app.js`` and ``style.less`` becomes ``style.css``.
    Only the compile rule is applied; use `resolve_output_path` for jobs.

    Args:
        path (str | PathLike[str] | None): Source path.

    Returns:
        Path: The path the compiled file would be written to.

    Raises:
        ConfigurationError: If ``path`` is None or empty.
    """
    src: Path = require_input_path(path)
    return _replace_extension(src, output_extension(JobType.COMPILE, src))


def resolve_output_path(job: Job) -> Path:
    """Compute the artifact path for ``job``.

    The input's base name is joined onto ``job.output_dir`` (or onto the
    input's own directory when no output directory is given), its last
    extension is stripped and the job-type specific extension appended.

    Args:
        job (Job): The job to resolve.

    Returns:
        Path: The resolved output path; relative when the directory is relative.

    Raises:
        ConfigurationError: If the job has an empty input path.
    """
    src: Path = require_input_path(job.input_path)
    out_dir: Path = Path(job.output_dir) if job.output_dir else src.parent
    target: Path = _replace_extension(out_dir / src.name, output_extension(job.job_type, src))
    logger.debug("Resolved %s output for '%s': %s", job.job_type.value, src, target)
    return target
