# topmark:header:start
#
#   project      : BuildBits
#   file         : job.py
#   file_relpath : src/buildbits/pipeline/job.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Value types exchanged between callers, the dispatcher and backends.

* `Job`: one requested transformation (input path, output directory, type).
* `CompileResult`: the uniform outcome of a dispatched job.
* `OutputEvent`: a line of progress/output relayed from a backend.

All three are frozen dataclasses: they carry no shared mutable state and may
be passed freely between threads.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from buildbits.diagnostic import Diagnostic


class JobType(Enum):
    """Kind of transformation requested for a file.

    Attributes:
        COMPILE: Preprocess/transpile into `.css` or `.js`.
        MINIFY: Produce a minified `.min.css` / `.min.js` sibling.
        OPTIMIZE: Recompress an image in its own format.
    """

    COMPILE = "compile"
    MINIFY = "minify"
    OPTIMIZE = "optimize"


@dataclass(frozen=True)
class Job:
    """A single requested transformation.

    Attributes:
        input_path (Path): Source file. Must be non-empty; validated by the
            dispatcher, not here, so that invalid jobs fail at dispatch time.
        output_dir (Path | None): Directory the artifact is written to. Relative
            directories are left relative (i.e. resolved against the process CWD
            when the backend touches the filesystem). ``None`` or an empty value
            means "next to the input file".
        job_type (JobType): What to do with the file.
    """

    input_path: Path | str
    output_dir: Path | str | None = None
    job_type: JobType = JobType.COMPILE


@dataclass(frozen=True)
class CompileResult:
    """Normalized outcome of a dispatched job.

    Attributes:
        success (bool): Whether the backend reported success.
        input_path (Path): The job's input path.
        output_path (Path): The resolved artifact path.
        is_new_file (bool): True when ``output_path`` did not exist right before
            the backend ran.
        diagnostics (tuple[Diagnostic, ...]): Optional backend-supplied notes.
    """

    success: bool
    input_path: Path
    output_path: Path
    is_new_file: bool
    diagnostics: tuple[Diagnostic, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class OutputEvent:
    """A progress or output message emitted by a backend.

    Attributes:
        source (str): Name of the emitting backend.
        message (str): One line of output, without its trailing newline.
    """

    source: str
    message: str


OutputCallback = Callable[[OutputEvent], None]
